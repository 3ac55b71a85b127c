# app/main.py
import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.api.v1.router import api_router_v1
from app.core.config import settings
from app.core.logging import setup_logging
from app.core.rate_limit import limiter, rate_limit_exceeded_handler
from app.domain.errors import InvalidAmount, RateTableUnavailable, UnsupportedCurrency

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

    # Domain errors
    app.add_exception_handler(UnsupportedCurrency, _unsupported_currency_handler)
    app.add_exception_handler(InvalidAmount, _invalid_amount_handler)
    app.add_exception_handler(RateTableUnavailable, _rate_table_unavailable_handler)

    # Routers
    app.include_router(api_router_v1)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/", include_in_schema=False)
    async def index():
        return FileResponse(STATIC_DIR / "index.html")

    return app


def _unsupported_currency_handler(request: Request, exc: UnsupportedCurrency):
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc), "code": exc.code, "side": exc.side},
    )


def _invalid_amount_handler(request: Request, exc: InvalidAmount):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


def _rate_table_unavailable_handler(request: Request, exc: RateTableUnavailable):
    logger.error(f"Exchange rates unavailable for {request.url.path}: {exc.detail}")
    return JSONResponse(status_code=502, content={"detail": exc.detail})


app = create_app()
