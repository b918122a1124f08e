"""Exception to HTTP status translation for the FastAPI app.

A single lookup table drives every handler. Order matters: subclasses are
listed before their bases so the most specific mapping wins.

Body schema::

    {"error": "<message>"}
    {"error": {"code": 409, "type": "...", "message": "..."}}   # with a ModelError
    {"error": {"<field>": ["<message>", ...]}}                  # protean ValidationError
"""

import os
import time

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from protean.exceptions import InvalidOperationError, ObjectNotFoundError, ValidationError

from shared.errors import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    NotModifiedError,
    PlatformError,
    ReadOnlyError,
    RemovedError,
    ServiceUnavailableError,
    UnauthorizedError,
)

logger = structlog.get_logger(__name__)

UNHANDLED_ERROR_MESSAGE = "An unhandled error occurred."

STATUS_MAP = [
    (NotModifiedError, 304),
    (BadRequestError, 400),
    (ValidationError, 400),
    (UnauthorizedError, 401),
    (PermissionError, 401),
    (ForbiddenError, 403),
    (NotFoundError, 404),
    (ObjectNotFoundError, 404),
    (ConflictError, 409),  # DomainException included
    (InvalidOperationError, 409),
    (RemovedError, 410),
    (ReadOnlyError, 423),
    (InternalServerError, 500),
    (NotImplementedError, 501),
    (ServiceUnavailableError, 503),
]


def status_for(exc: BaseException) -> int | None:
    """Return the mapped HTTP status for ``exc``, or None when it is unmapped."""
    for exc_type, status in STATUS_MAP:
        if isinstance(exc, exc_type):
            return status
    return None


def debug_errors_enabled() -> bool:
    return os.getenv("PIZZAPIE_DEBUG_ERRORS", "").lower() in ("1", "true", "yes")


def error_body(exc: BaseException, status: int, *, debug: bool = False) -> dict:
    """Build the JSON body returned for ``exc`` answered with ``status``."""
    if isinstance(exc, PlatformError) and exc.error is not None:
        return {"error": exc.error.to_dict(default_code=status)}

    if isinstance(exc, ValidationError):
        return {"error": exc.messages}

    if status_for(exc) is None and not debug:
        return {"error": UNHANDLED_ERROR_MESSAGE}

    return {"error": str(exc) or type(exc).__name__}


def _log_outcome(request: Request, exc: BaseException, status: int) -> None:
    log_kwargs = {
        "method": request.method,
        "path": request.url.path,
        "status": status,
        "error_type": type(exc).__name__,
    }
    if status >= 500:
        logger.error("Request failed", exc_info=exc, **log_kwargs)
    else:
        logger.warning("Request rejected", error=str(exc), **log_kwargs)


def make_exception_handler(debug: bool = False):
    async def handle_exception(request: Request, exc: Exception) -> Response:
        status = status_for(exc) or 500
        _log_outcome(request, exc, status)

        if status == 304:
            response = Response(status_code=304)
        else:
            response = JSONResponse(status_code=status, content=error_body(exc, status, debug=debug))

        # Unhandled errors are answered outside the HTTP middleware stack
        _stamp_response_time(request, response)
        return response

    return handle_exception


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed request bodies with 400 and the list of messages."""
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))

    logger.warning(
        "Request body rejected",
        method=request.method,
        path=request.url.path,
        errors=messages,
    )
    return JSONResponse(status_code=400, content=messages)


def register_exception_handlers(app: FastAPI, debug: bool | None = None) -> None:
    """Install the status mapping on ``app``.

    Mapped types get their own handler; ``Exception`` catches the rest and
    answers 500.
    """
    if debug is None:
        debug = debug_errors_enabled()

    handler = make_exception_handler(debug=debug)
    for exc_type, _ in STATUS_MAP:
        app.add_exception_handler(exc_type, handler)
    app.add_exception_handler(Exception, handler)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)


def _stamp_response_time(request: Request, response: Response) -> None:
    started = getattr(request.state, "started_at", None)
    if started is None:
        return

    elapsed_ms = int((time.perf_counter() - started) * 1000)
    response.headers["X-ResponseTime"] = f"{elapsed_ms}ms"


async def response_time_middleware(request: Request, call_next):
    """Stamp every response with the time spent producing it.

    The start time is kept on ``request.state`` so the exception handler can
    stamp 500 responses, which never pass back through this middleware.
    """
    request.state.started_at = time.perf_counter()
    response = await call_next(request)
    _stamp_response_time(request, response)
    return response
