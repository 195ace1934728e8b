"""
@file_name: errors.py
@author: NetMind.AI
@date: 2025-11-28
@description: Exception handlers

Every failure leaves the API in the same shape:
    {"error": {"code": "...", "message": "...", "details": [...]}}

- EventHubError subclasses map to their own code/status
- Request validation (FastAPI or pydantic) maps to VALIDATION_ERROR with one
  detail per failing field
- Anything else maps to INTERNAL_ERROR; the original exception is only logged
"""

from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError

from event_hub.utils import EventHubError, EventValidationError

_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def validation_details(errors: Sequence[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Convert pydantic error dicts into {"field", "message"} pairs

    The request-part prefix ("body", "query", ...) is dropped, so a body error on
    startAt is reported as field "startAt".
    """
    details = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        details.append({
            "field": ".".join(str(part) for part in loc),
            "message": error.get("msg", "Invalid value"),
        })
    return details


async def event_hub_error_handler(request: Request, exc: EventHubError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.to_dict()}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = EventValidationError(details=validation_details(exc.errors()))
    return await event_hub_error_handler(request, error)


async def pydantic_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
    error = EventValidationError(details=validation_details(exc.errors()))
    return await event_hub_error_handler(request, error)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": {"code": "INTERNAL_ERROR", "message": "An unexpected error occurred"}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EventHubError, event_hub_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
