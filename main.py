"""
Marketplace Application Entry
"""
import uvicorn
from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import Optional

from api.routes import api_v1_router
from api.middleware.error_handler import add_error_handlers
from api.middleware.logging import add_logging_middleware

# Data and service layers
from data.store import EntityStore
from services import build_services

# Configuration and utilities
from configs.settings import Settings, settings
from utils.logger import setup_logging, get_logger


setup_logging()
logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle management"""
    app_settings: Settings = app.state.settings
    logger.info("Starting marketplace application")
    logger.info(f"Debug Mode: {app_settings.debug}")

    admin = app.state.services.users.seed_admin(app_settings)
    if admin:
        logger.info("Admin account ready", user_id=admin.id, username=admin.username)

    logger.info("Marketplace application started successfully", collections=app.state.store.sizes())
    yield
    logger.info("Marketplace application shutdown completed", collections=app.state.store.sizes())

def create_app(store: Optional[EntityStore] = None, app_settings: Settings = settings) -> FastAPI:
    """Create FastAPI application around an entity store"""
    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        description="Influencer and brand marketplace - messaging and discovery",
        debug=app_settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )

    app.state.settings = app_settings
    app.state.store = store if store is not None else EntityStore()
    app.state.services = build_services(app.state.store, app_settings)

    # Add middleware (order is important)
    add_error_handlers(app)
    add_logging_middleware(app)

    app.include_router(api_v1_router, prefix="/api/v1")

    if app_settings.debug:
        logger.info("=== Registered Routes ===")
        for route in app.routes:
            if hasattr(route, 'methods') and hasattr(route, 'path'):
                logger.info(f"  {sorted(route.methods)} -> {route.path}")

    @app.get("/", tags=["root"])
    async def root():
        """Root path - Service information"""
        return {
            "service": app_settings.app_name,
            "version": app_settings.app_version,
            "status": "running",
            "docs_url": "/docs" if app_settings.debug else "disabled",
            "api_prefix": "/api/v1"
        }

    return app

if __name__ == "__main__":
    uvicorn_config = {
        "app": "main:create_app",
        "factory": True,
        "host": settings.host,
        "port": settings.port,
        "reload": settings.debug,
        "log_level": settings.log_level.lower(),
        "access_log": settings.debug,
    }

    # The entity store lives in process memory, so never more than one worker
    if not settings.debug:
        uvicorn_config["workers"] = 1

    logger.info(f"Server will be available at: http://{settings.host}:{settings.port}")
    uvicorn.run(**uvicorn_config)
