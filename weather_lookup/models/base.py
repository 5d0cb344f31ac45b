"""
Base database model with common fields and functionality.

This module contains the base SQLAlchemy model with the common
auto-incrementing id that other models inherit.
"""

from sqlalchemy import Column, Integer

from weather_lookup.database import Base


class BaseModel(Base):
    """
    Base model with common database fields.

    All other models should inherit from this class to get an
    automatic integer primary key.
    """

    __abstract__ = True

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    def __repr__(self) -> str:
        """String representation of the model instance."""
        return f"<{self.__class__.__name__}(id={self.id})>"
