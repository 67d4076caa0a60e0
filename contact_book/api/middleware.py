"""Middleware for request context."""

import logging
from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from contact_book.core.request_context import clear_request_id, set_request_id

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware that tags every request with a request id."""

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        """Process request inside its request-id context.

        Args:
            request: FastAPI request
            call_next: Next middleware/handler

        Returns:
            Response carrying the ``X-Request-ID`` header
        """
        # Reuse an incoming id when the caller sends one
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        set_request_id(request_id)
        try:
            response = await call_next(request)
            logger.debug(
                f"{request.method} {request.url.path} -> {response.status_code}"
            )
        finally:
            clear_request_id()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
