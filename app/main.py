from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.core.config import settings
from app.core.logger import setup_logging
from app.core.store import UserStore
from app.middleware.cors import configure_cors
from app.middleware.logging import RequestLoggerMiddleware
from app.middleware import error_handler
from app.utils.errors import APIError

# Routers
from app.routers import pages as pages_router
from app.routers import users as users_router
from app.routers import health as health_router


def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Each application owns its own store. Pass ``store`` to start from a
    given data set; otherwise the store is seeded with the demo users
    unless ``SEED_DEMO_USERS`` is false.
    """
    setup_logging()
    description = (
        "User Profile API.\n\n"
        "A small CRUD service for user profiles with a JSON API and an HTML listing page."
    )

    openapi_tags = [
        {"name": "users", "description": "Create, list, fetch and update user profiles."},
        {"name": "health", "description": "Health checks and service status endpoints."},
    ]

    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        description=description,
        openapi_tags=openapi_tags,
    )

    if store is None:
        store = UserStore.seeded() if settings.SEED_DEMO_USERS else UserStore()
    app.state.store = store

    # Middleware
    configure_cors(app)
    app.add_middleware(RequestLoggerMiddleware)

    # Exception handlers
    app.add_exception_handler(APIError, error_handler.api_error_handler)
    app.add_exception_handler(RequestValidationError, error_handler.validation_exception_handler)

    # Include routers
    app.include_router(health_router.router)
    app.include_router(pages_router.router)
    app.include_router(users_router.router, prefix=settings.API_V1_PREFIX)

    return app


app = create_app()
