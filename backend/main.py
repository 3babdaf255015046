from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from backend.api.router import api_router
from backend.config import settings
from backend.tax_engine.errors import TaxCalculationError
from backend.utils.logging_config import setup_logging


setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title="TaxIQ Backend",
    version="2.0.0",
    description="TaxIQ — Indian income tax calculator across the 2025-26, 2024-25 and old regimes",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(TaxCalculationError)
async def _tax_error(request: Request, exc: TaxCalculationError) -> JSONResponse:
    logger.warning("Tax calculation rejected path={} err={}", request.url.path, str(exc))
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.on_event("startup")
async def _startup() -> None:
    logger.info("TaxIQ backend started env={} default_age={}", settings.APP_ENV, settings.DEFAULT_AGE)


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {"ok": True, "service": "taxiq-backend", "env": settings.APP_ENV}
