import logging
from typing import Any, Generic, List, Type, TypeVar
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from coaching_api.core.exceptions import ConflictError, NotFoundError, StorageError
from coaching_api.crud.base import CRUDBase

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType")


class ResourceService(Generic[ModelType]):
    """List/create/get/update/delete over one table, raising the API's error types."""

    def __init__(self, crud: CRUDBase, schema: Type[BaseModel], label: str):
        self.crud = crud
        self.schema = schema
        self.label = label

    def _storage_error(self, db: Session, action: str, e: Exception) -> StorageError:
        db.rollback()
        logger.error(f"Failed to {action} {self.label.lower()}: {e}")
        return StorageError(f"Failed to {action} {self.label.lower()}")

    def get(self, db: Session, id: str) -> ModelType:
        try:
            obj = self.crud.get(db, id=id)
        except SQLAlchemyError as e:
            raise self._storage_error(db, "fetch", e)
        if not obj:
            raise NotFoundError(f"{self.label} not found", details={"id": id})
        return obj

    def get_multi(self, db: Session, *, skip: int = 0, limit: int = 100, **filters: Any) -> List[ModelType]:
        filters = {k: v for k, v in filters.items() if v is not None}
        try:
            if filters:
                return self.crud.get_multi_filtered(db, skip=skip, limit=limit, **filters)
            return self.crud.get_multi(db, skip=skip, limit=limit)
        except SQLAlchemyError as e:
            raise self._storage_error(db, "fetch", e)

    def create(self, db: Session, obj_in: BaseModel) -> ModelType:
        if getattr(obj_in, "id", None) and self.get_or_none(db, obj_in.id):
            raise ConflictError(f"{self.label} already exists", details={"id": obj_in.id})
        try:
            obj = self.crud.create(db, obj_in=obj_in)
        except SQLAlchemyError as e:
            raise self._storage_error(db, "create", e)
        logger.info(f"Created {self.label.lower()} {obj.id}")
        return obj

    def get_or_none(self, db: Session, id: str):
        try:
            return self.crud.get(db, id=id)
        except SQLAlchemyError as e:
            raise self._storage_error(db, "fetch", e)

    def update(self, db: Session, id: str, obj_in: BaseModel) -> ModelType:
        db_obj = self.get(db, id)
        try:
            return self.crud.update(db, db_obj=db_obj, obj_in=obj_in)
        except SQLAlchemyError as e:
            raise self._storage_error(db, "update", e)

    def delete(self, db: Session, id: str) -> BaseModel:
        db_obj = self.get(db, id)
        snapshot = self.schema.model_validate(db_obj)
        try:
            self.crud.delete(db, id=db_obj.id)
        except SQLAlchemyError as e:
            raise self._storage_error(db, "delete", e)
        logger.info(f"Deleted {self.label.lower()} {id}")
        return snapshot
