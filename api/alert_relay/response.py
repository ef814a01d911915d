"""Flat JSON error bodies shared by every route."""

from typing import Any

from fastapi.responses import JSONResponse


def error_response(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})
