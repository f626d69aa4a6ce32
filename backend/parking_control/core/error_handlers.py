"""Exception Handlers.

Translates domain exceptions and request validation failures into the
standard ``ErrorResponse`` body.
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..schemas.parking_spot import ErrorResponse, FieldError
from .constants import ErrorMessages
from .exceptions import ParkingControlError
from .logging import get_logger, get_request_id

logger = get_logger(__name__)

# Request sections that are not part of a field's name
_LOCATION_PREFIXES = {'body', 'query', 'path', 'header', 'cookie'}
_PYDANTIC_VALUE_ERROR_PREFIX = 'Value error, '


def collect_field_errors(errors: list[dict[str, Any]]) -> list[FieldError]:
    """Flatten pydantic error dicts into ``{field, message}`` pairs.

    Examples:
        >>> collect_field_errors([{'loc': ('body', 'licensePlateCar'), 'msg': 'Field required'}])
        [FieldError(field='licensePlateCar', message='Field required')]
    """
    field_errors = []
    for error in errors:
        loc = [str(part) for part in error.get('loc', ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        message = error.get('msg', '')
        if message.startswith(_PYDANTIC_VALUE_ERROR_PREFIX):
            message = message[len(_PYDANTIC_VALUE_ERROR_PREFIX):]
        field_errors.append(FieldError(field='.'.join(loc) or 'body', message=message))
    return field_errors


def error_response(
    status_code: int,
    error: str,
    detail: str | None = None,
    fields: list[FieldError] | None = None
) -> JSONResponse:
    body = ErrorResponse(
        error=error,
        detail=detail,
        request_id=get_request_id(),
        fields=fields
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True)
    )


async def parking_control_error_handler(request: Request, exc: ParkingControlError):
    """Render a domain exception with its own status code."""
    fields = getattr(exc, 'fields', None) or None
    logger.info(
        "Request rejected",
        extra={
            'status_code': exc.status_code,
            'error_type': type(exc).__name__,
            'detail': exc.message,
            'path': request.url.path
        }
    )
    return error_response(
        exc.status_code,
        exc.title,
        detail=exc.message,
        fields=[FieldError(**field) for field in fields] if fields else None
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Render request validation failures as a structured list of field errors."""
    fields = collect_field_errors(exc.errors())
    logger.info(
        "Request validation failed",
        extra={
            'path': request.url.path,
            'fields': [field.field for field in fields]
        }
    )
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        ErrorMessages.VALIDATION_FAILED,
        detail="; ".join(f"{field.field}: {field.message}" for field in fields),
        fields=fields
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the application's exception handlers."""
    app.add_exception_handler(ParkingControlError, parking_control_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
