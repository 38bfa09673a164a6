from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ...domain.errors import (
    DomainError, DuplicateKey, NotFound, StoreFailure, StoreUnavailable, ValidationError,
)

STATUS_BY_ERROR = {
    NotFound: 404,
    DuplicateKey: 400,
    ValidationError: 400,
    StoreUnavailable: 503,
    StoreFailure: 500,
}


def status_for(exc: DomainError) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return 500


def validation_message(exc: RequestValidationError) -> str:
    """Первая ошибка валидации в виде "поле: сообщение"."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # loc выглядит как ("body", "email") или ("path", "class_id")
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    msg = first.get("msg", "Invalid value")
    return f"{'.'.join(loc)}: {msg}" if loc else msg


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(status_code=status_for(exc), content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=STATUS_BY_ERROR[ValidationError], content={"error": validation_message(exc)})
