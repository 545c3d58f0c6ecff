from .listings import router as listings_router
from .valuation import router as valuation_router

__all__ = ["listings_router", "valuation_router"]
