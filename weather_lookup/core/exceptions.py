"""
Domain errors raised by the weather procedures.

Each error knows how it is reported over the RPC transport: a
symbolic code, the matching JSON-RPC style numeric code and an HTTP
status.
"""

from typing import Any, Dict, List, Optional


class WeatherAPIError(Exception):
    """Base class for errors reported to API callers."""

    code = "INTERNAL_SERVER_ERROR"
    rpc_code = -32603
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_data(self) -> Dict[str, Any]:
        """Extra fields for the ``error.data`` member of the envelope."""
        return {}


class InvalidInputError(WeatherAPIError):
    """Input failed a declared constraint; raised before any storage access."""

    code = "BAD_REQUEST"
    rpc_code = -32600
    http_status = 400

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        issues: Optional[List[Dict[str, str]]] = None,
    ):
        super().__init__(message)
        self.field = field
        self.issues = issues or []

    def to_data(self) -> Dict[str, Any]:
        return {"field": self.field, "issues": self.issues}


class NotFoundError(WeatherAPIError):
    """No observation matched a lookup."""

    code = "NOT_FOUND"
    rpc_code = -32004
    http_status = 404
