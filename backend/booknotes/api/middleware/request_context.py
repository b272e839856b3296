"""
Request Context Middleware

Tags every log line emitted while serving a request with a request id, the
method and the path, and echoes the id back in the X-Request-ID header.
A caller-supplied X-Request-ID is reused as is.
"""

from typing import Awaitable, Callable
from uuid import uuid4

from fastapi import FastAPI, Request, Response

from booknotes.shared.core.logging import clear_log_context, log_context


REQUEST_ID_HEADER = "X-Request-ID"


async def bind_request_context(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    log_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_log_context()
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def setup_request_context(app: FastAPI) -> None:
    app.middleware("http")(bind_request_context)
