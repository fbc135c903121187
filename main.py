from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from metrics_app.api import routes
from metrics_app.config import Settings, settings as default_settings, configure_logging, logger
from metrics_app.services.metrics_service import MetricsService
from metrics_app.storage.factory import StorageFactory
from metrics_app.storage.strategies import MetricsStorageStrategy


def create_app(
    config: Optional[Settings] = None,
    storage: Optional[MetricsStorageStrategy] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        config: Settings to use (module settings by default)
        storage: Pre-built storage; skips backend selection when given
    """
    config = config or default_settings
    configure_logging(config.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.storage = storage if storage is not None else await StorageFactory.create(config)
        try:
            yield
        finally:
            await app.state.storage.close()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        description="Page view, click and signup counters",
        debug=config.debug,
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def count_homepage_views(request: Request, call_next):
        """Best-effort page view for GET /, then fall through to static files"""
        if request.method == "GET" and request.url.path == "/":
            await MetricsService(request.app.state.storage).track_page_view()
        return await call_next(request)

    ######## Include routers
    app.include_router(routes.router)

    # Static files go last so they never shadow the API
    public_dir = Path(config.public_dir)
    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")
    else:
        logger.warning(f"Static directory {public_dir} not found, serving API only")

    return app


app = create_app()


if __name__ == "__main__":
    logger.info(f"Listening on {default_settings.port}")
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
