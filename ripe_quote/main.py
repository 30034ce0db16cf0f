import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.exceptions import QuoteError
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import health, quotes, ui


def create_app(settings_override: Settings | None = None) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment (e.g., alternate fees). Falls back to cached get_settings().
    """
    settings = settings_override or get_settings()
    if settings_override is not None:
        settings.init_post_load()
    # Initialize logging early
    init_logging(debug=settings.debug)

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )
    # Built once; read-only for the lifetime of the app
    app.state.settings = settings
    app.state.rate_table = settings.build_rate_table()
    logging.getLogger("ripe_quote").info(
        "rate table loaded: %s",
        ",".join(c.value for c in app.state.rate_table.codes()),
    )

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(QuoteError, errors.quote_error_handler)
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(quotes.router)
    app.include_router(ui.router)

    @app.get("/")
    async def root():
        return {"message": "Ripe Quote Widget API", "version": settings.version}

    return app


app = create_app()
