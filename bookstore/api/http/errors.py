"""Error response bodies: ``{"error": {"message": ..., "status": ...}}``."""

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse


def error_body(message: str | list[str], status: int) -> dict[str, Any]:
    return {"error": {"message": message, "status": status}}


def error_response(
    message: str | list[str],
    status: int,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status, content=error_body(message, status), headers=headers
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes, unsupported methods and explicit HTTPExceptions."""
    return error_response(str(exc.detail), exc.status_code, headers=exc.headers)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Request bodies FastAPI could not parse, e.g. malformed JSON."""
    errors = exc.errors()
    logger.bind(error_count=len(errors)).info("Request body rejected")
    if any(error.get("type") == "json_invalid" for error in errors):
        return error_response("Request body is not valid JSON", 400)
    return error_response([str(error.get("msg")) for error in errors], 400)
