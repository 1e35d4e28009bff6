"""Per-request context for the statement API.

Every request gets a ``req_<12 hex>`` id in ``request.state`` (echoed in
ApiResponse.request_id and the X-Request-ID header). Domain errors are
turned into envelopes by the AppError handler in main.py before they reach
this layer; anything else escaping a handler is logged with its traceback
and answered with the InternalError (9002) envelope.

Log format:
    INFO  POST /api/v1/statements 200 3ms req_a1b2c3d4e5f6
    ERROR POST /api/v1/statements 500 1ms req_a1b2c3d4e5f6 RuntimeError
"""

import logging
import time
import uuid

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from src.th_common.errors import InternalError
from src.th_common.response import error_response

logger = logging.getLogger("th.request")


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


def _internal_error_response(request_id: str) -> JSONResponse:
    err = InternalError()
    resp = error_response(err.code, err.message)
    resp.request_id = request_id
    return JSONResponse(status_code=err.http_status, content=resp.model_dump())


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = new_request_id()
        request.state.request_id = request_id

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.exception(
                "%s %s 500 %.0fms %s %s",
                request.method, request.url.path, elapsed_ms, request_id, type(exc).__name__,
            )
            response = _internal_error_response(request_id)
        else:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.log(
                logging.WARNING if response.status_code >= 400 else logging.INFO,
                "%s %s %d %.0fms %s",
                request.method, request.url.path, response.status_code, elapsed_ms, request_id,
            )

        response.headers["X-Request-ID"] = request_id
        return response
