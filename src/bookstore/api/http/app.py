"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from loguru import logger
from starlette.responses import JSONResponse

from src.bookstore.api.http.app_data import ApplicationDependencies
from src.bookstore.api.http.routers.book import router as book_router
from src.bookstore.api.http.routers.health import router as health_router
from src.bookstore.api.utils.app_startup import configure_logging
from src.bookstore.core.services import BookService, BookStore, DbSessionService
from src.bookstore.runtime.config.config_data import ConfigData
from src.bookstore.runtime.context import get_config


def build_dependencies(config: ConfigData) -> ApplicationDependencies:
    """Wire the database, the store context and the book service."""
    database_service = DbSessionService(config.database)
    book_store = BookStore(database_service)
    book_store.initialize()
    book_service = BookService(
        book_store, max_record_bytes=config.storage.max_record_bytes
    )
    return ApplicationDependencies(
        database_service=database_service,
        book_store=book_store,
        book_service=book_service,
    )


async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


def create_app(
    dependencies: ApplicationDependencies | None = None,
    config: ConfigData | None = None,
) -> FastAPI:
    """Build the application.

    When ``dependencies`` is given they are used as-is (tests pass a store on an
    in-memory database); otherwise they are built from the configuration at
    startup and disposed on shutdown.
    """
    main_config = config or get_config()
    configure_logging(main_config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = getattr(app.state, "app_dependencies", None) is None
        if owned:
            app.state.app_dependencies = build_dependencies(main_config)
        logger.info(
            "Starting up application in {} environment", main_config.app.environment
        )
        try:
            yield
        finally:
            logger.info("Shutting down application")
            if owned:
                app.state.app_dependencies.database_service.dispose()
                app.state.app_dependencies = None

    app = FastAPI(
        title="Bookstore",
        lifespan=lifespan,
        docs_url=None if main_config.app.environment == "production" else "/docs",
        redoc_url=None if main_config.app.environment == "production" else "/redoc",
    )
    app.state.app_dependencies = dependencies

    app.middleware("http")(log_requests)

    app.include_router(health_router)
    app.include_router(book_router)

    return app


app = create_app()

__all__ = ["app", "build_dependencies", "create_app"]


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(
        app,
        host=config.app.host,
        port=config.app.port,
        access_log=False,  # request logging middleware covers this
    )
