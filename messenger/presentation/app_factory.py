"""
FastAPI Application Factory.

Builds the app each HTTP service serves: shared middleware (request logging
and latency metrics, correlation id, CORS), error envelopes, health and
metrics routes, then the service's own routers.
"""

import logging
import time
from typing import Any, Iterable

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from messenger import __version__
from messenger.config.logging_config import correlation_id_var
from messenger.config.settings import Config
from messenger.observability.metrics import (
    MetricsErrorType,
    increment_error,
    observe_request_latency,
)
from messenger.presentation.api import health_router, metrics_router
from messenger.presentation.responses import PrettyJSONResponse, error_response

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to worker threads and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs "[Service] METHOD /path -> status" and records request latency."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - started

        service_name = request.app.state.service_name
        route = request.scope.get("route")
        route_path = getattr(route, "path", request.url.path)
        observe_request_latency(
            service_name, request.method, route_path, response.status_code, duration
        )

        message = (
            f"[{service_name}] {request.method} {request.url.path} "
            f"-> {response.status_code}"
        )
        body_length = int(request.headers.get("content-length") or 0)
        if body_length:
            message += f" (body: {body_length} bytes)"
        logger.info(message)
        return response


def validation_error_message(errors: list[dict[str, Any]]) -> str:
    """Turn pydantic/FastAPI validation errors into one human-readable line."""
    for error in errors:
        error_type = error.get("type")
        loc = tuple(error.get("loc", ()))
        if error_type == "json_invalid":
            reason = error.get("ctx", {}).get("error") or error.get("msg")
            return f"Invalid JSON format: {reason}"
        if error_type == "missing":
            if loc == ("body",):
                return "Request body is empty"
            return f"Missing required field: {loc[-1]}"

    first = errors[0] if errors else {}
    loc = tuple(first.get("loc", ()))
    field = loc[-1] if loc else "request"
    return f"Invalid field '{field}': {first.get('msg', 'invalid value')}"


def create_service_app(
    service_name: str,
    port: int,
    routers: Iterable[APIRouter],
    state: dict[str, Any],
) -> FastAPI:
    """
    Application factory for one messenger service.

    Args:
        service_name: Name reported by /health and used in log lines
        port: Port reported by /health
        routers: Service-specific routers
        state: Stores and services exposed on app.state for the dependencies

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title=service_name,
        description=f"Messenger {service_name} API",
        version=__version__,
        debug=Config.DEBUG,
        default_response_class=PrettyJSONResponse,
    )
    app.state.service_name = service_name
    app.state.port = port
    for key, value in state.items():
        setattr(app.state, key, value)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ALLOW_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Correlation-ID"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = validation_error_message(list(exc.errors()))
        logger.warning("[%s] Validation error: %s", service_name, message)
        increment_error(service_name, MetricsErrorType.VALIDATION)
        return error_response(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning("[%s] HTTP error %s: %s", service_name, exc.status_code, exc.detail)
        increment_error(service_name, MetricsErrorType.HTTP)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("[%s] Unhandled error: %s", service_name, exc)
        increment_error(service_name, MetricsErrorType.INTERNAL)
        return error_response(500, f"Internal server error: {exc}")

    app.include_router(health_router)
    app.include_router(metrics_router)
    for router in routers:
        app.include_router(router)

    return app
