import logging
import logging.config
from pathlib import Path
from coaching_api.core.config import settings


def build_logging_config() -> dict:
    handlers = ["console"]
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.LOG_LEVEL,
                "formatter": "detailed",
                "stream": "ext://sys.stdout"
            }
        },
        "root": {
            "level": settings.LOG_LEVEL,
            "handlers": handlers
        },
        "loggers": {
            "coaching_api": {
                "level": settings.LOG_LEVEL,
                "handlers": handlers,
                "propagate": False
            },
            "uvicorn.access": {
                "level": "WARNING",
                "handlers": ["console"],
                "propagate": False
            }
        }
    }

    if settings.LOG_TO_FILE:
        log_dir = Path(settings.LOG_DIR)
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": settings.LOG_LEVEL,
            "formatter": "detailed",
            "filename": str(log_dir / "app.log"),
            "maxBytes": 10485760,
            "backupCount": 5
        }
        config["handlers"]["error_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "ERROR",
            "formatter": "detailed",
            "filename": str(log_dir / "error.log"),
            "maxBytes": 10485760,
            "backupCount": 5
        }
        handlers.extend(["file", "error_file"])

    return config


def configure_logging():
    if settings.LOG_TO_FILE:
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config())
