"""Mapping of domain errors to HTTP responses.

Every error body has the shape ``{"error": "<message>"}``.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from quotes.domain.error import AlreadyLikedError, NotFoundError, ValidationError

CREATE_BODY_ERROR = "text and author are required"
ALREADY_LIKED_ERROR = "You have already liked this quote"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logfire.info("Validation error", path=request.url.path, error=str(exc))
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, f"{exc.resource} not found")


async def handle_already_liked(request: Request, exc: AlreadyLikedError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, ALREADY_LIKED_ERROR)


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies and parameters are client errors (400)."""
    logfire.info("Request validation failed", path=request.url.path, errors=exc.errors())

    body_errors = [err for err in exc.errors() if err.get("loc", ("",))[0] == "body"]
    if body_errors and request.method == "POST":
        # Only quote creation takes a body on POST
        return error_response(status.HTTP_400_BAD_REQUEST, CREATE_BODY_ERROR)
    if body_errors:
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request parameters")


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # A wrong method on a known path is reported like an unknown path
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return error_response(status.HTTP_404_NOT_FOUND, "Not found")
    return error_response(exc.status_code, str(exc.detail))


def server_error_headers(request: Request) -> dict[str, str]:
    """Headers the middleware stack would have added to a normal response.

    Unhandled errors are answered outside every user middleware, so the
    backend marker and CORS headers have to be set here.
    """
    api_settings = request.app.state.api_settings
    headers: dict[str, str] = {}
    if api_settings.backend_marker:
        headers["X-Backend"] = api_settings.backend_marker

    origin = request.headers.get("origin")
    if not origin:
        return headers
    if "*" in api_settings.cors_origins:
        headers["Access-Control-Allow-Origin"] = "*"
    elif origin in api_settings.cors_origins:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Access-Control-Allow-Credentials"] = "true"
        headers["Vary"] = "Origin"
    else:
        return headers
    headers["Access-Control-Expose-Headers"] = "X-Backend"
    return headers


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
        headers=server_error_headers(request),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error mapping to the application."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(AlreadyLikedError, handle_already_liked)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected)
