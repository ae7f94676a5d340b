from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.exceptions import RequestValidationError
from coaching_api.core.config import settings
from coaching_api.core.database import Base, engine
from coaching_api.core.exceptions import ServiceError
from coaching_api.core.logging import configure_logging
from coaching_api.endpoints import course, question, student, test, test_result
from coaching_api.middleware.exceptions import (
    global_exception_handler, service_exception_handler, validation_exception_handler
)
from coaching_api.middleware.logging import RequestLoggingMiddleware

configure_logging()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(RequestLoggingMiddleware)

app.add_exception_handler(Exception, global_exception_handler)
app.add_exception_handler(ServiceError, service_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.include_router(course.router, prefix=f"{settings.API_PREFIX}/courses", tags=["Courses"])
app.include_router(student.router, prefix=f"{settings.API_PREFIX}/students", tags=["Students"])
app.include_router(test.router, prefix=f"{settings.API_PREFIX}/tests", tags=["Tests"])
app.include_router(question.router, prefix=f"{settings.API_PREFIX}/questions", tags=["Questions"])
app.include_router(test_result.router, prefix=settings.API_PREFIX)

@app.get("/health", tags=["Health"])
def health_check():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

@app.on_event("startup")
def startup_event():
    Base.metadata.create_all(bind=engine)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
