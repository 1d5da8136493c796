"""Application factory for the Orders API.

The factory takes the process Settings and, optionally, prebuilt Services.
Both are stored on ``app.state`` and handed to each pipeline invocation.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from orders.api.routes import order_router
from orders.config import Settings
from orders.domain import orders
from orders.errors import OrderError
from orders.services import Services
from orders.store.seeding import seed_stores
from orders.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.settings.seed_stores:
        with orders.domain_context():
            seed_stores()
    yield


def create_app(settings: Settings | None = None, services: Services | None = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Shopping Orders API",
        description="Order admission and queries gated by remote feature flags",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.services = services or Services.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Orders domain context for each request."""
        with orders.domain_context():
            response = await call_next(request)
        return response

    @app.exception_handler(OrderError)
    async def order_error_handler(request: Request, exc: OrderError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    app.include_router(order_router)

    @app.get("/health")
    async def health():
        logger.info("health_check.success")
        return JSONResponse(content={"status": "success", "stage": settings.stage})

    @app.get("/metrics")
    async def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app
