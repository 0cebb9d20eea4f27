"""
Movie Store Middleware

This module provides middleware for X-Request-Id handling and request logging.
"""

import time
import uuid
import logging
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware to assign a request ID and log every request.

    This middleware:
    1. Takes X-Request-Id from the request headers, or generates one
    2. Stores it in request.state for use by route handlers
    3. Logs the request and its outcome with latency
    4. Echoes the ID back in the response headers
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        start_time = time.time()

        logger.info(
            f"Incoming request: {request.method} {request.url.path}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client": request.client.host if request.client else None,
            }
        )

        try:
            response = await call_next(request)

            latency_ms = (time.time() - start_time) * 1000

            logger.info(
                f"Request completed: {request.method} {request.url.path} - Status: {response.status_code}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "latency_ms": round(latency_ms, 2),
                }
            )

            response.headers[REQUEST_ID_HEADER] = request_id
            return response

        except Exception as e:
            latency_ms = (time.time() - start_time) * 1000

            logger.error(
                f"Request failed: {request.method} {request.url.path} - Error: {str(e)}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "error": str(e),
                    "latency_ms": round(latency_ms, 2),
                },
                exc_info=True
            )
            raise


def get_request_id(request: Request) -> str | None:
    """
    Helper function to get the request ID from request state.

    Args:
        request: The FastAPI request object

    Returns:
        Request ID if present, None otherwise
    """
    return getattr(request.state, "request_id", None)


def request_id_headers(request: Request) -> dict:
    """
    Response headers carrying the request ID.

    Exception handlers that run outside RequestContextMiddleware use this,
    since the middleware never sees their responses.
    """
    request_id = get_request_id(request)
    return {REQUEST_ID_HEADER: request_id} if request_id else {}
