"""HTTP middleware shared by all routes."""

import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from chatserver.config.logging_config import request_id_var

REQUEST_ID_HEADER = "X-Request-Id"
SERVER_TIME_HEADER = "X-Server-Time"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Binds a request id to the logging context and reports handling time.

    The id is taken from the X-Request-Id header when the client sends one,
    otherwise a UUID is generated. Both headers are set on the response;
    X-Server-Time is the elapsed time in microseconds.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        token = request_id_var.set(request_id)
        start = time.perf_counter()
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        elapsed_us = int((time.perf_counter() - start) * 1_000_000)
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[SERVER_TIME_HEADER] = f"{elapsed_us}us"
        return response
