from gridledger.api.grid import router as grid_router
from gridledger.api.health import router as health_router
from gridledger.api.progression import router as progression_router
from gridledger.api.recommendations import router as recommendations_router
from gridledger.api.setups import router as setups_router

__all__ = [
    "grid_router",
    "health_router",
    "progression_router",
    "recommendations_router",
    "setups_router",
]
