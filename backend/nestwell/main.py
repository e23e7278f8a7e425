"""Nestwell API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map NestwellError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The schema registry is built once per app and lives on app.state
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Registry attached at app construction, not in lifespan: in-process test clients
      (httpx ASGITransport) do not run lifespan events
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from nestwell.api.error_handlers import register_error_handlers
from nestwell.api.routes import (
    grocery_lists, health, meal_plans, memories, parenting_activities,
    recipes, tasks,
)
from nestwell.config import get_settings
from nestwell.core.schema_registry import build_schema_registry
from nestwell.infrastructure.database import init_db
from nestwell.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Nestwell API started ({len(app.state.schema_registry)} schemas)")
    yield
    await manager.dispose()
    logger.info("Nestwell API shutting down")


app = FastAPI(title="Nestwell API", version="1.0.0", lifespan=lifespan)
app.state.schema_registry = build_schema_registry()

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(grocery_lists.router)
app.include_router(meal_plans.router)
app.include_router(memories.router)
app.include_router(recipes.router)
app.include_router(tasks.router)
app.include_router(parenting_activities.router)

register_error_handlers(app)
