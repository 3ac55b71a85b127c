# app/api/v1/router.py
from fastapi import APIRouter

from app.api.v1.endpoints.exchange import router as exchange_router
from app.api.v1.endpoints.health import router as health_router
from app.api.v1.endpoints.storefront import router as storefront_router


api_router_v1 = APIRouter(prefix="/api/v1")

api_router_v1.include_router(health_router)
api_router_v1.include_router(exchange_router)
api_router_v1.include_router(storefront_router)
