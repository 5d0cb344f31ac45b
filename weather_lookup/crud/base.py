"""
Base CRUD operations.

This module contains the create/read operations shared by model CRUD
classes. Observations are append-only, so there is no update or delete.
"""

from typing import Generic, List, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from weather_lookup.database import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType]):
    """
    Base CRUD operations class.

    The database session is always passed in by the caller; CRUD objects
    hold no connection state of their own.
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initialize CRUD operations for a specific model.

        Args:
            model: The SQLAlchemy model class
        """
        self.model = model

    async def get_all(self, db: AsyncSession) -> List[ModelType]:
        """
        Get every record, in storage order.

        Args:
            db: Database session

        Returns:
            List of model instances (empty when the table is empty)
        """
        result = await db.execute(select(self.model))
        return list(result.scalars().all())

    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType) -> ModelType:
        """
        Create a new record.

        Args:
            db: Database session
            obj_in: Input data schema

        Returns:
            Created model instance, refreshed from the database
        """
        db_obj = self.model(**obj_in.model_dump())
        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)
        return db_obj
