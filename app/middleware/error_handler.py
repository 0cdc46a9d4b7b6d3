"""Global error handlers for the application."""
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

from app.utils.errors import APIError

logger = logging.getLogger(__name__)


async def api_error_handler(request: Request, exc: APIError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = format_validation_errors(exc.errors())
    logger.warning(f"Rejected body for {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def format_validation_errors(errors) -> str:
    """Collapse pydantic error dicts into one readable line.

    ``[{"loc": ("body", "emoji"), "msg": "Input should be a valid string"}]``
    becomes ``"emoji: Input should be a valid string"``. The decoder's own
    message (``ctx.error``) is appended for JSON syntax errors unless the
    message already carries it.
    """
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg") or "Invalid input"
        ctx_error = (err.get("ctx") or {}).get("error")
        if ctx_error and str(ctx_error) not in msg:
            msg = f"{msg}: {ctx_error}"
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Malformed request body"
