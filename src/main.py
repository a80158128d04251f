# src/main.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.middleware import PrometheusMiddleware
from src.api.routes import health, landing, waitlist
from src.config.settings import settings
from src.infrastructure.email.resend_client import ResendNotifier
from src.infrastructure.storage.waitlist_store import WaitlistStore
from src.utils.logger import get_logger

logger = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_AUTO_CREATE_TABLES:
        await run_in_threadpool(app.state.waitlist_store.create_table)
    logger.info("Rhetix waitlist API started")
    yield

def create_app(
    waitlist_store: Optional[WaitlistStore] = None,
    notifier: Optional[ResendNotifier] = None
) -> FastAPI:
    """
    Build the application.

    The store and notifier live for the lifetime of the process and are
    handed to routes through dependencies; pass fakes here in tests.
    """
    app = FastAPI(
        title="Rhetix Waitlist API",
        description="Waitlist signup for the Rhetix landing page",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan
    )

    app.state.waitlist_store = waitlist_store if waitlist_store is not None else WaitlistStore()
    app.state.notifier = notifier if notifier is not None else ResendNotifier()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(PrometheusMiddleware)

    app.add_exception_handler(StarletteHTTPException, waitlist.waitlist_method_not_allowed)

    app.include_router(landing.router)
    app.include_router(waitlist.router)
    app.include_router(health.router)

    app.mount("/metrics", make_asgi_app())

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)
