"""
Exception handlers
blueprint/routers/errors.py

Maps domain exceptions to HTTP responses:
  FlowNotStartedError          → 307 redirect to the first step
  StaleFlowError               → 404
  LeadValidationError          → 422 {"errors": {field: message}}
  InvalidStepError / Frozen    → 400
  ConfigurationError           → 500
"""
from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from blueprint.core.exceptions import (
    ConfigurationError,
    FlowFrozenError,
    FlowNotStartedError,
    InvalidStepError,
    LeadValidationError,
    StaleFlowError,
)

logger = logging.getLogger(__name__)


def _body(error_code: str, message: str) -> dict:
    return {
        "error_code": error_code,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


async def flow_not_started_handler(request: Request, exc: FlowNotStartedError):
    logger.info(f"Redirecting {request.url.path}: {exc}")
    return RedirectResponse(url=exc.redirect_to, status_code=status.HTTP_307_TEMPORARY_REDIRECT)


async def stale_flow_handler(request: Request, exc: StaleFlowError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=_body("FLOW_NOT_FOUND", str(exc)),
    )


async def lead_validation_handler(request: Request, exc: LeadValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"errors": exc.errors},
    )


async def invalid_step_handler(request: Request, exc: InvalidStepError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_body("INVALID_STEP", exc.message),
    )


async def flow_frozen_handler(request: Request, exc: FlowFrozenError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_body("FLOW_FROZEN", exc.message),
    )


async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error(f"Configuration error: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_body("CONFIGURATION_ERROR", exc.message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FlowNotStartedError, flow_not_started_handler)
    app.add_exception_handler(StaleFlowError, stale_flow_handler)
    app.add_exception_handler(LeadValidationError, lead_validation_handler)
    app.add_exception_handler(InvalidStepError, invalid_step_handler)
    app.add_exception_handler(FlowFrozenError, flow_frozen_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
