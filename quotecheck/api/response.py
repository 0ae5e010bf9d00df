"""Response envelope helpers.

Every JSON endpoint answers with ``{"data": ..., "error": null}`` on success
and ``{"data": null, "error": {"code": ..., "message": ...}}`` on failure.
"""

from typing import Any


def success_response(data: Any) -> dict[str, Any]:
    """Wrap a payload in the success envelope."""
    return {"data": data, "error": None}


def error_response(code: str, message: str) -> dict[str, Any]:
    """Build the error envelope for a machine-readable code and a message."""
    return {"data": None, "error": {"code": code, "message": message}}
