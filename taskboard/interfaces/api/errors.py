"""Exception handlers that give every error response the same shape.

All non-2xx responses carry ``{"error": "<message>"}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_JSON_ON_CREATE = "Invalid request body. Please send valid JSON."
INVALID_JSON = "Invalid request body"


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


def _is_unparseable_body(error: dict) -> bool:
    if error.get("type") == "json_invalid":
        return True
    # Missing body, or a body that is not a JSON object
    return tuple(error.get("loc", ())) == ("body",)


def describe_error(error: dict) -> str:
    """``field: message`` for one pydantic error entry."""
    fields = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(fields) or "body"
    return f"{field}: {error.get('msg', 'invalid value')}"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if any(_is_unparseable_body(error) for error in errors):
        logger.warning(f"Unreadable request body on {request.method} {request.url.path}")
        message = INVALID_JSON_ON_CREATE if request.method == "POST" else INVALID_JSON
        return error_response(500, message)

    message = describe_error(errors[0]) if errors else "Invalid request"
    return error_response(400, message)


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on an app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
