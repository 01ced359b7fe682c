"""Marketplace API - Main FastAPI application."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import (
    addresses,
    auth,
    campaigns,
    commercial_conditions,
    orders,
    products,
    store_suppliers,
    stores,
    suppliers,
    users,
)
from app.config import get_settings
from app.errors import AppError, InternalError
from app.logging_setup import setup_logging

settings = get_settings()
setup_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    description="B2B marketplace connecting stores, suppliers, campaigns and orders",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _envelope(status_code: int, message: str, data=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "data": jsonable_encoder(data)},
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return _envelope(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return _envelope(422, "Validation error", exc.errors())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return _envelope(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _envelope(InternalError.status_code, InternalError.default_message)


# Register API routers
app.include_router(auth.router, prefix="/api/v1")
app.include_router(users.router, prefix="/api/v1")
app.include_router(addresses.router, prefix="/api/v1")
app.include_router(suppliers.router, prefix="/api/v1")
app.include_router(stores.router, prefix="/api/v1")
app.include_router(store_suppliers.router, prefix="/api/v1")
app.include_router(products.router, prefix="/api/v1")
app.include_router(commercial_conditions.router, prefix="/api/v1")
app.include_router(campaigns.router, prefix="/api/v1")
app.include_router(orders.router, prefix="/api/v1")


@app.get("/health")
async def health():
    return {"status": "ok"}
