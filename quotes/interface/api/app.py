"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from quotes.config import Settings
from quotes.interface.api.errors import register_exception_handlers
from quotes.interface.api.routes import health, likes, quotes, ranking
from quotes.util.di.container import create_container, setup_di
from quotes.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to use instead of the production one
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Quotes API",
        description="Quotes catalog with per-visitor likes and top quote rankings",
        version="0.1.0",
    )

    # Read by the unhandled-error handler, which runs outside the middleware
    app_instance.state.api_settings = settings.api

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=settings.api.cors_allow_credentials,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "User-Agent", "X-Requested-With"],
        expose_headers=["X-Backend"],
        max_age=600,
    )

    backend_marker = settings.api.backend_marker
    if backend_marker:

        @app_instance.middleware("http")
        async def add_backend_header(request: Request, call_next) -> Response:
            response = await call_next(request)
            response.headers["X-Backend"] = backend_marker
            return response

    setup_di(app_instance, container or create_container())

    register_exception_handlers(app_instance)

    # Fixed paths (/quotes/top/*, /quotes/likes/reset) before /quotes/{quote_id}
    app_instance.include_router(health.router)
    app_instance.include_router(ranking.router, prefix=settings.api.root_path)
    app_instance.include_router(likes.router, prefix=settings.api.root_path)
    app_instance.include_router(quotes.router, prefix=settings.api.root_path)

    # Bare OPTIONS (no Access-Control-Request-Method) never reach CORSMiddleware's
    # preflight branch; answer them for any path
    @app_instance.options("/{path:path}", include_in_schema=False)
    async def answer_options(path: str) -> Response:
        return Response(status_code=204)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
