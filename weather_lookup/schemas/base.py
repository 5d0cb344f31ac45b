"""
Base Pydantic schemas.

This module contains base schemas with common configurations
that other schemas can inherit from.
"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """
    Base schema for responses, readable straight from ORM objects.
    """

    model_config = ConfigDict(from_attributes=True)


class InputSchema(BaseModel):
    """
    Base schema for procedure inputs.

    Inputs are validated strictly: numbers must arrive as JSON numbers,
    not strings or booleans, and unknown keys are ignored.
    """

    model_config = ConfigDict(strict=True, extra="ignore")


class IDSchema(BaseSchema):
    """
    Schema with ID field.
    """

    id: int
