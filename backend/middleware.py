"""
@file_name: middleware.py
@author: NetMind.AI
@date: 2025-11-28
@description: Request logging and request-id propagation

Each request gets an id (the incoming X-Request-Id header, or a fresh UUID).
The id is bound to every log line written while the request is handled and is
echoed back in the X-Request-Id response header.
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from loguru import logger

REQUEST_ID_HEADER = "X-Request-Id"


def register_request_middleware(app: FastAPI) -> None:

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id

        with logger.contextualize(request_id=request_id):
            client = request.client.host if request.client else None
            logger.info(
                f"{request.method} {request.url.path} "
                f"(query={dict(request.query_params)}, client={client})"
            )
            response = await call_next(request)
            logger.debug(f"{request.method} {request.url.path} -> {response.status_code}")

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
