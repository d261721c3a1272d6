"""Global exception handlers.

    - ApiError -> the error's own status and body
    - RequestValidationError -> 400 with an `errors` list
    - HTTPException -> `{"message": ...}`, unmatched routes as "Route Not Found"
    - Exception -> status carried by the error or 500, `{"message", "error": {}}`
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.core import config
from backend.core.errors import ApiError, AuthenticationFailure

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        headers = {"WWW-Authenticate": "Basic"} if isinstance(exc, AuthenticationFailure) else None
        return JSONResponse(status_code=exc.status_code, content=exc.to_response(), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Malformed request body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": build_request_error_messages(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            message = "Route Not Found"
        else:
            message = exc.detail
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": message},
            headers=getattr(exc, "headers", None),
        )

    @app.middleware("http")
    async def catch_unhandled_errors(request: Request, call_next):
        # Innermost user middleware, so CORS and the access log still see the 500.
        try:
            return await call_next(request)
        except Exception as exc:
            return unhandled_error_response(request, exc)


def unhandled_error_response(request: Request, exc: Exception) -> JSONResponse:
    if config.ENABLE_GLOBAL_ERROR_LOGGING:
        logger.error("Global error handler on %s: %s", request.url.path, exc, exc_info=exc)
    return JSONResponse(
        status_code=error_status_code(exc),
        content={"message": str(exc), "error": {}},
    )


def error_status_code(exc: Exception) -> int:
    for attribute in ("status", "status_code"):
        value = getattr(exc, attribute, None)
        if isinstance(value, int) and 400 <= value <= 599:
            return value
    return status.HTTP_500_INTERNAL_SERVER_ERROR


REQUEST_SOURCES = {"body", "path", "query", "header", "cookie"}


def build_request_error_messages(errors) -> list[str]:
    messages = []
    for error in errors:
        location = list(error.get("loc", ()))
        if location and location[0] in REQUEST_SOURCES:
            location = location[1:]
        if location:
            messages.append(f"{'.'.join(str(part) for part in location)}: {error['msg']}")
        else:
            messages.append(error["msg"])
    return messages
