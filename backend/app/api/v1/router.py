from fastapi import APIRouter

from backend.app.api.v1.endpoints.clients import router as clients_router
from backend.app.api.v1.endpoints.products import router as products_router
from backend.app.api.v1.endpoints.orders import router as orders_router

router = APIRouter()
router.include_router(clients_router, tags=["clients"])
router.include_router(products_router, tags=["products"])
router.include_router(orders_router, tags=["orders"])
