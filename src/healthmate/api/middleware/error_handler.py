"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from healthmate.exceptions import (
    EmptyInputError,
    HealthMateError,
    InvalidReportTypeError,
    LLMClientError,
)

log = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "The AI service is unavailable right now. Please try again."


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", "Invalid value")
    return f"{loc}: {msg}" if loc else msg


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": _first_validation_message(exc), "type": "validation_error"},
        )

    @app.exception_handler(EmptyInputError)
    async def handle_empty_input(request: Request, exc: EmptyInputError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc), "type": "empty_input"})

    @app.exception_handler(InvalidReportTypeError)
    async def handle_invalid_report_type(request: Request, exc: InvalidReportTypeError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc), "type": "invalid_report_type"})

    @app.exception_handler(LLMClientError)
    async def handle_llm_error(request: Request, exc: LLMClientError) -> JSONResponse:
        log.error("AI provider call failed on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content={"error": UNAVAILABLE_MESSAGE, "type": "ai_service_error"})

    @app.exception_handler(HealthMateError)
    async def handle_generic_error(request: Request, exc: HealthMateError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc), "type": "healthmate_error"})
