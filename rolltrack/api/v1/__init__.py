from .orders import router as orders_router
from .production_orders import router as production_orders_router
from .customers import router as customers_router
from .rolls import router as rolls_router
from .reference import router as reference_router

__all__ = ["orders_router", "production_orders_router", "customers_router", "rolls_router", "reference_router"]
