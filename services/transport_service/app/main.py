"""FastAPI application for the Transport Service."""
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from libs.auth.accounts import AccountStore
from libs.common.config import Settings, get_settings
from libs.common.error_handler import add_exception_handlers
from libs.common.logging import get_logger
from libs.common.middleware import add_observability_middleware
from libs.common.rate_limit import limiter, rate_limit_exceeded_handler
from services.transport_service.routers import (
    auth_router,
    items_router,
    transports_router,
)
from services.transport_service.services.items import ItemStore
from services.transport_service.services.registry import TransportRegistry

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the Transport Service FastAPI app.

    Each app owns fresh account, transport and item stores.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="API de Gestión de Transportes",
        version="1.0.0",
        description="API para gestionar datos de transporte",
        docs_url="/api-docs",
    )

    app.state.settings = settings
    app.state.account_store = AccountStore.from_seeds(settings.SEED_ACCOUNTS)
    app.state.transport_registry = TransportRegistry()
    app.state.item_store = ItemStore()

    app.state.limiter = limiter
    limiter.enabled = settings.RATE_LIMIT_ENABLED
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_observability_middleware(app)
    add_exception_handlers(app)

    if settings.TRUST_USER_ID_HEADER:
        logger.warning(
            "TRUST_USER_ID_HEADER is enabled: the unverified user-id header is "
            "accepted as caller identity"
        )

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "transport"}

    app.include_router(auth_router)
    app.include_router(transports_router)
    app.include_router(items_router)

    logger.info(
        "Transport service ready with %d seeded accounts", len(app.state.account_store)
    )
    return app


app = create_app()
