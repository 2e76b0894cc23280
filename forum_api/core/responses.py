"""JSON envelope shared by every endpoint."""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def send_json(payload: Any, status_code: int = 200) -> JSONResponse:
    """Wrap a successful result as ``{"status_code", "payload"}``."""
    body = {"status_code": status_code, "payload": jsonable_encoder(payload)}
    return JSONResponse(body, status_code=status_code)


def send_error(status_code: int, message: str, additional_information: dict | None = None) -> JSONResponse:
    """Wrap a failure as ``{"status_code", "error": {"message", "additional_information"}}``."""
    body = {
        "status_code": status_code,
        "error": {
            "message": message,
            "additional_information": jsonable_encoder(additional_information or {}),
        },
    }
    return JSONResponse(body, status_code=status_code)
