"""Per-request access log and request id.

The id is taken from an incoming `x-request-id` header when the caller sent
one, otherwise generated. It is stored on request.state for the response
envelope and echoed back in the `x-request-id` response header.

    INFO [POST] /api/pool/buy → 200 (4ms) req_a1b2c3d4e5f6 wallet=7xKX...
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.lp_common.response import new_request_id

logger = logging.getLogger("lp.request")

REQUEST_ID_HEADER = "x-request-id"


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        request.state.request_id = request_id

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "[%s] %s → %d (%.0fms) %s wallet=%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id,
            request.headers.get("x-wallet-address", "-"),
        )
        return response
