from fastapi import APIRouter

from swivel_mfa.presentation.routers.v1.swivel import router as swivel_router
from swivel_mfa.presentation.routes.health import router as health_router

api = APIRouter()
api.include_router(health_router)

# Add all v1 routers here
routers = (swivel_router,)
for router in routers:
    api.include_router(router, prefix="/v1")
