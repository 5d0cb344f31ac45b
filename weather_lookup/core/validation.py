"""
Input validation for RPC procedures.

Procedure inputs are checked against their schema before any handler
runs, so an invalid request never touches the database.
"""

from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from weather_lookup.core.exceptions import InvalidInputError

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def _issue_field(error: Dict[str, Any]) -> str:
    loc = [str(part) for part in error.get("loc", ())]
    return ".".join(loc) or "input"


def parse_input(schema: Type[SchemaType], raw: Any) -> SchemaType:
    """
    Validate raw procedure input against a schema.

    Args:
        schema: Pydantic model describing the input
        raw: Decoded JSON input (normally a dict)

    Returns:
        Validated schema instance

    Raises:
        InvalidInputError: Naming the first offending field, with every
            issue listed in ``issues``
    """
    if not isinstance(raw, dict):
        raise InvalidInputError(
            f"Invalid input: expected an object, got {type(raw).__name__}",
            field="input",
            issues=[{"field": "input", "message": "Input should be an object"}],
        )

    try:
        return schema.model_validate(raw)
    except ValidationError as exc:
        issues: List[Dict[str, str]] = [
            {"field": _issue_field(error), "message": error["msg"]}
            for error in exc.errors()
        ]
        first = issues[0]
        raise InvalidInputError(
            f"Invalid input for field '{first['field']}': {first['message']}",
            field=first["field"],
            issues=issues,
        ) from exc
