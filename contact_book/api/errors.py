"""Translation of domain errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from contact_book.domain.errors import ContactBookError

logger = logging.getLogger(__name__)


async def contact_book_error_handler(request: Request, exc: ContactBookError) -> JSONResponse:
    """Return ``{"message": ...}`` with the status the error carries."""
    logger.warning(
        f"Request rejected: {type(exc).__name__}",
        extra={"path": request.url.path, "status_code": exc.status_code},
    )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Register the domain error handler on the application."""
    app.add_exception_handler(ContactBookError, contact_book_error_handler)
