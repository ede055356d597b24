from .profiles import router as profiles_router
from .quotes import router as quotes_router
from .orders import router as orders_router
from .matching import router as matching_router

__all__ = ["profiles_router", "quotes_router", "orders_router", "matching_router"]
