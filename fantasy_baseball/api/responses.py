"""JSON envelopes shared by every route: ``{success, data | message}``."""

from __future__ import annotations

import math
from typing import Any

from fastapi.responses import JSONResponse


def success(data: Any, message: str | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": True, "data": data}
    if message:
        body["message"] = message
    return body


def paginated(data: list[Any], pagination: dict[str, int], message: str | None = None) -> dict[str, Any]:
    """Envelope plus ``pagination`` with ``totalPages`` derived from total / limit."""
    body = success(data, message)
    limit = pagination["limit"]
    body["pagination"] = {
        "page": pagination["page"],
        "limit": limit,
        "total": pagination["total"],
        "totalPages": math.ceil(pagination["total"] / limit) if limit else 0,
    }
    return body


def error(message: str, status_code: int, errors: Any = None) -> JSONResponse:
    body: dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return JSONResponse(body, status_code=status_code)
