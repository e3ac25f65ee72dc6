# app/core/handlers.py
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.exceptions import BaseAPIException, StudentCreationError
from app.core.logging import logger

# Routes whose validation failures collapse to the creation error
CREATION_ROUTE_NAMES = {"create_student"}


def error_envelope(status_code: int, message, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "statusCode": status_code,
            "message": message,
            "error": error,
        },
    )


# 1. Errors raised by the service itself
async def custom_api_exception_handler(request: Request, exc: BaseAPIException):
    if exc.details:
        logger.info(f"{exc.error} on {request.method} {request.url.path}: {exc.details}")
    return error_envelope(exc.status_code, exc.message, exc.error)


# 2. Request body / path validation errors raised by pydantic
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    route = request.scope.get("route")
    if getattr(route, "name", None) in CREATION_ROUTE_NAMES:
        creation_error = StudentCreationError()
        return error_envelope(creation_error.status_code, creation_error.message, creation_error.error)

    messages = []
    for error in exc.errors():
        field = ".".join(str(x) for x in error["loc"] if x != "body")
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])

    return error_envelope(status.HTTP_400_BAD_REQUEST, messages, "Bad Request")


# 3. Standard HTTP errors (unknown URL, method not allowed, ...)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_envelope(exc.status_code, str(exc.detail), HTTPStatus(exc.status_code).phrase)


# 4. Anything else
async def general_exception_handler(request: Request, exc: Exception):
    logger.critical(f"Unhandled Exception: {exc}", exc_info=True)

    return error_envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please contact support.",
        "Internal Server Error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAPIException, custom_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
