# Este archivo implementa el middleware que registra los parámetros de cada
# petición después de ser atendida.

"""
Request logging middleware.

Emits exactly one ``request_handled`` entry per request, after the
handler (or the error mapping) has produced a status code. Method, path
and a request id are bound to the structlog context for the duration of
the request, so every entry logged while handling it carries them.
"""
import time  # Medición de duración con reloj monotónico
import uuid  # Identificador único por petición

import structlog  # Contexto estructurado por petición
from fastapi import FastAPI, Request  # Framework FastAPI para el servidor HTTP

from .utils.logging import get_logger  # Logger estructurado
from .utils.params import collect_params  # Fusión de parámetros de la petición

logger = get_logger(__name__)


def _request_params(request: Request, body: bytes) -> dict:
    """
    Collect the parameters to log, never raising.

    Returns:
        Dictionary with ``params`` and, when collection failed, ``params_error``
    """
    try:
        # path_params is filled in by the router on the shared scope
        params = collect_params(
            path_params=request.path_params,
            query_items=request.query_params.multi_items(),
            body=body,
            content_type=request.headers.get("content-type"),
        )
    except Exception as e:
        return {"params": {}, "params_error": f"{type(e).__name__}: {e}"}
    return {"params": params}


def register_request_logging(app: FastAPI) -> None:
    """
    Attach the request logger to every route of the app.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def log_request_params(request: Request, call_next):
        start_time = time.monotonic()
        # Read before dispatch; Starlette replays the cached body to the route
        body = await request.body()
        status_code = 500

        with structlog.contextvars.bound_contextvars(
            request_id=uuid.uuid4().hex,
            method=request.method,
            path=request.url.path,
        ):
            try:
                response = await call_next(request)
                status_code = response.status_code
                return response
            finally:
                logger.info(
                    "request_handled",
                    status_code=status_code,
                    body_bytes=len(body),
                    duration_ms=round((time.monotonic() - start_time) * 1000, 3),
                    **_request_params(request, body),
                )
