"""
Main entrypoint for the Product Catalog API.

This module assembles the FastAPI application, sets up logging, the
error handlers and the request logger, and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn product_catalog_api.app.main:app --reload

Each application owns its own ``ProductStore`` (``app.state.store``);
pass ``store`` to ``create_app`` to start from a custom product list.
"""

import logging
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers, unexpected_error_response
from .core.logging_config import ACCESS_LOGGER, setup_logging
from .services.product_store import ProductStore
from .services.seed import seed_products


def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment.
    store : Optional[ProductStore]
        Product store to serve.  When omitted a new store is created and,
        if ``settings.seed_products`` is true, filled with the demo
        products.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the startup below
    # is logged with the configured format.
    setup_logging(settings.log_level, settings.log_file, settings.access_log)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if store is None:
        store = ProductStore(seed_products() if settings.seed_products else [])
    app.state.settings = settings
    app.state.store = store

    register_exception_handlers(app)

    access_logger = logging.getLogger(ACCESS_LOGGER)

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable) -> Response:
        """Log every request and turn unexpected failures into a 500 response."""
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        access_logger.info("%s %s", request.method, target)
        try:
            return await call_next(request)
        except Exception as exc:
            return unexpected_error_response(exc)

    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
