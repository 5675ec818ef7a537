"""Customer Images API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CustomerImagesError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Storage initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py so tests can mount them on a bare app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from customer_images.api.error_handlers import register_error_handlers
from customer_images.api.routes import customer_images, customers, health
from customer_images.config import get_settings
from customer_images.infrastructure.json_storage import init_storage
from customer_images.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    storage = init_storage(settings.data_dir)
    logger.info(
        "Customer Images API started",
        extra={"storage_key": str(storage.path_for(settings.customers_key))},
    )
    yield
    logger.info("Customer Images API shutting down")


app = FastAPI(
    title="Customer Images API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(customers.router)
app.include_router(customer_images.router)

register_error_handlers(app)
