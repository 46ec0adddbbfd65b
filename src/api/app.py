"""FastAPI application factory"""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.error import ClientError
from src.api.routes import activities, budgets, farming_years, ledger, reports, subscriptions

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        import sentry_sdk

        sentry_sdk.init(
            dsn=config.DSN_SENTRY,
            environment=config.SENTRY_ENVIRONMENT,
            traces_sample_rate=0.1,
        )
        logger.info(f"Sentry enabled for environment {config.SENTRY_ENVIRONMENT}")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_TABLES:
            from src.depends import create_tables

            await create_tables()
            logger.info("Database tables ensured")
        yield

    app = FastAPI(
        title="Farm Ledger Service",
        description="Activity-to-ledger synchronization, budgets and financial reports for farms",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            start = time.time()
            response = await call_next(request)
            elapsed_ms = int((time.time() - start) * 1000)
            logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms}ms)")
            return response

    @app.exception_handler(ClientError)
    async def handle_client_error(request: Request, exc: ClientError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": {"code": exc.error.code, "message": exc.error.message}},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        first = exc.errors()[0] if exc.errors() else {}
        location = ".".join(str(part) for part in first.get("loc", []))
        message = f"{location}: {first.get('msg')}" if first else "Invalid request parameters"
        return JSONResponse(
            status_code=400,
            content={"error": {"code": "VALIDATION_ERROR", "message": message}},
        )

    for router in (
        activities.router,
        ledger.router,
        reports.router,
        budgets.router,
        farming_years.router,
        subscriptions.router,
    ):
        app.include_router(router, prefix=config.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
