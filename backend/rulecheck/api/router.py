"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from rulecheck.api.health import router as health_router
from rulecheck.api.profiles import create_profile, router as profiles_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Profiles
api_router.include_router(profiles_router, tags=["Profiles"])

# Unversioned POST /profile kept for existing clients — mounted at app root
legacy_router = APIRouter()
legacy_router.add_api_route(
    "/profile",
    create_profile,
    methods=["POST"],
    status_code=201,
    tags=["Profiles"],
    include_in_schema=False,
)
