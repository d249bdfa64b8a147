from collections import defaultdict
from typing import Dict, List
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.core.errors import AppError
from app.core.logger import logger

INTERNAL_ERROR_MESSAGE = "Internal server error"


def flatten_field_errors(errors) -> Dict[str, List[str]]:
    """Group pydantic errors by the offending field name."""
    field_errors: Dict[str, List[str]] = defaultdict(list)
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if not isinstance(part, int)]
        field = loc[-1] if loc else "__root__"
        field_errors[field].append(error.get("msg", "Invalid value"))
    return dict(field_errors)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected input on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid input.", "errors": flatten_field_errors(exc.errors())},
    )


async def app_error_handler(request: Request, exc: AppError):
    if exc.is_client_error:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": exc.message},
        )
    logger.error(f"Internal error on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=True
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
