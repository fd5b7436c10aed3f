"""
Request Context Middleware

Binds method, path and a request id to every log line emitted while a
request is handled. The id is taken from X-Request-ID when the client
sends one and echoed back on the response.
"""

import uuid

from fastapi import FastAPI, Request

from ticketing_api.shared.core.logging import clear_log_context, log_context

REQUEST_ID_HEADER = "X-Request-ID"


def setup_request_context(app: FastAPI) -> None:
    """Register the request-context middleware on `app`."""

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        clear_log_context()
        log_context(request_id=request_id, method=request.method, path=request.url.path)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
