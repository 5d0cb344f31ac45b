"""
RPC envelope schemas.

Every procedure answers ``{"result": {"data": ...}}`` on success and
``{"error": {...}}`` on failure, the shape tRPC clients expect.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class RPCResult(BaseModel, Generic[T]):
    """Wrapper around a procedure's return value."""

    data: T


class RPCResponse(BaseModel, Generic[T]):
    """Success envelope."""

    result: RPCResult[T]


class RPCIssue(BaseModel):
    """One validation problem."""

    field: str
    message: str


class RPCErrorData(BaseModel):
    """Machine-readable error details."""

    code: str = Field(..., description="Symbolic error code, e.g. NOT_FOUND")
    httpStatus: int
    path: Optional[str] = Field(None, description="Procedure that failed")
    field: Optional[str] = Field(None, description="First invalid input field")
    issues: List[RPCIssue] = Field(default_factory=list)


class RPCErrorBody(BaseModel):
    message: str
    code: int = Field(..., description="JSON-RPC style numeric code")
    data: RPCErrorData


class RPCErrorResponse(BaseModel):
    """Error envelope."""

    error: RPCErrorBody


def result_envelope(data: Any) -> Dict[str, Any]:
    """Wrap a procedure result in the success envelope."""
    return {"result": {"data": data}}
