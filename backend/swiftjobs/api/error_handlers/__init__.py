from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from swiftjobs.api.error_handlers.handlers import (
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler,
)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)


__all__ = [
    "register_error_handlers",
    "http_exception_handler",
    "validation_exception_handler",
    "general_exception_handler",
]
