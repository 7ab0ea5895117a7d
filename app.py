from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dotenv import load_dotenv

from errors import StorageError, StorefrontError
from settings import Settings

logger = logging.getLogger(__name__)


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    if isinstance(exc, StorageError):
        logger.error("STORAGE ERROR on %s %s: %s", request.method, request.url.path, exc.message, exc_info=exc)
        # Paths and parser details stay in the log.
        return JSONResponse({"error": "Storage error"}, status_code=exc.status_code)
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse({"error": exc.message}, status_code=exc.status_code, headers=headers)


def create_app(settings: Settings | None = None) -> FastAPI:
    load_dotenv("local.env")

    from container import build_services
    from endpoints.auth_endpoints import router as auth_router
    from endpoints.category_endpoints import router as category_router
    from endpoints.product_endpoints import router as product_router
    from settings import get_settings

    settings = settings or get_settings()

    app = FastAPI(title="storefront")
    app.state.services = build_services(settings)
    logger.info("storefront using database at %s", settings.database_path)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StorefrontError, storefront_error_handler)

    @app.get("/api/health")
    async def health():
        return JSONResponse({"status": "ok"})

    app.include_router(auth_router)
    app.include_router(category_router)
    app.include_router(product_router)

    return app


app = create_app()
