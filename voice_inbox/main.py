"""FastAPI application entry point."""

from collections.abc import Awaitable, Callable

from fastapi import Depends, FastAPI, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from voice_inbox import __version__
from voice_inbox.config import Settings, get_settings
from voice_inbox.convert.formatting import format_iso_instant
from voice_inbox.convert.models import HealthResponse, NotFoundResponse
from voice_inbox.convert.router import router as convert_router
from voice_inbox.dependencies import Clock, get_clock, logger, setup_logging

# Sent on every response; iOS Shortcuts and browser clients both rely on them.
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


async def cors_shell(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Answer preflights directly and stamp CORS headers on everything else."""
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Reshape unknown routes and wrong methods into the JSON 404 body."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(
            content=NotFoundResponse().model_dump(),
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return await http_exception_handler(request, exc)


async def health(clock: Clock = Depends(get_clock)) -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(timestamp=format_iso_instant(clock.utc_now()))


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Startup configuration; defaults to the cached environment settings

    Returns:
        Configured FastAPI app with health and convert routes
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Voice Inbox Server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings

    app.middleware("http")(cors_shell)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    app.add_api_route("/", health, methods=["GET"], response_model=HealthResponse)
    app.include_router(convert_router)

    logger.info(
        "app_startup",
        extra={"host": settings.host, "port": settings.port, "timezone": settings.timezone},
    )
    return app


app = create_app()
