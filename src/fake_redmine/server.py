# Este es el servidor principal que inicializa la configuración, logging,
# registra las rutas y ejecuta la aplicación FastAPI con uvicorn.

"""
Fake Redmine server.

Builds the FastAPI application (routes, request logging, error mapping)
and runs it under uvicorn.
"""
import argparse  # Parseo de argumentos de línea de comandos
from typing import List, Optional  # Type hints para valores opcionales

import uvicorn  # Servidor ASGI
from fastapi import FastAPI, Request  # Framework FastAPI para el servidor HTTP
from fastapi.responses import JSONResponse  # Respuestas JSON para errores
from starlette.exceptions import HTTPException as StarletteHTTPException  # Errores HTTP del router

from .config.settings import Settings, get_settings  # Singleton de configuración
from .middleware import register_request_logging  # Middleware de registro de peticiones
from .routes.issue_routes import register_issue_routes  # Ruta PUT /issues/:id.json
from .routes.status_routes import register_status_routes  # Ruta GET /issue_statuses.json
from .utils.logging import configure_logging, get_logger  # Sistema de logging estructurado

logger = get_logger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render router errors; unsupported methods are reported as 404 like unknown paths."""
    status_code = 404 if exc.status_code == 405 else exc.status_code
    if status_code == 404:
        logger.warning("route_not_found", method=request.method, path=request.url.path)
        detail = "Not Found"
    else:
        detail = exc.detail
    return JSONResponse(status_code=status_code, content={"errors": [detail]})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map any unexpected failure to 500."""
    logger.error(
        "unhandled_exception",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        error=str(exc),
    )
    return JSONResponse(status_code=500, content={"errors": ["Internal Server Error"]})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the fake Redmine application.

    Args:
        settings: Settings to use (default: process-wide singleton)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.server_name,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    register_status_routes(app)
    register_issue_routes(app)
    register_request_logging(app)

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    return app


def port_number(value: str) -> int:
    """argparse type for a TCP port, same range as Settings.port."""
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port must be between 1 and 65535: {port}")
    return port


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fake-redmine",
        description="Fake Redmine API server for client integration tests",
    )
    parser.add_argument("-o", "--host", help="Bind address (default: from settings)")
    parser.add_argument("-p", "--port", type=port_number, help="Bind port (default: from settings)")
    return parser


def main(argv: Optional[List[str]] = None):
    """
    Main entry point for running the fake server.

    Can be invoked via:
    - python -m fake_redmine
    - the fake-redmine console script
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()

    host = args.host if args.host is not None else settings.host
    port = args.port if args.port is not None else settings.port

    settings.ensure_directories()
    configure_logging(settings)

    logger.info("server_starting", server_name=settings.server_name, host=host, port=port)

    try:
        # log_config=None keeps uvicorn off our logging setup; requests are logged by the middleware
        uvicorn.run(create_app(settings), host=host, port=port, log_config=None, access_log=False)
    except KeyboardInterrupt:
        logger.info("server_shutdown", reason="keyboard_interrupt")
    except Exception as e:
        logger.error("server_error", error=str(e))
        raise


if __name__ == "__main__":
    main()
