# routers/__init__.py

from fastapi import APIRouter

from .auth import router as auth_router
from .health import router as health_router

# Record kinds
from .vehicles import router as vehicles_router
from .driver_licenses import router as driver_licenses_router
from .businesses import router as businesses_router
from .properties import router as properties_router
from .permits import router as permits_router
from .criminal_records import router as criminal_records_router
from .citizens import router as citizens_router, wanted_router
from .users import router as users_router


# Everything under /api plus /health, in registration order
api_router = APIRouter()

api_router.include_router(auth_router)

api_router.include_router(wanted_router)
api_router.include_router(citizens_router)
api_router.include_router(vehicles_router)
api_router.include_router(driver_licenses_router)
api_router.include_router(businesses_router)
api_router.include_router(properties_router)
api_router.include_router(permits_router)
api_router.include_router(criminal_records_router)
api_router.include_router(users_router)

api_router.include_router(health_router)

__all__ = ["api_router"]
