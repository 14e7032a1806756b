"""
Main API Router
Aggregates all API endpoints for v1
"""

from fastapi import APIRouter
from app.api.v1.endpoints import (
    admin,
    advertisements,
    auth,
    branches,
    favorites,
    geocode,
    health,
    map,
    profile,
    reports,
    reviews,
    themes
)

api_router = APIRouter()

# Include all routers
api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(map.router, prefix="/map", tags=["map"])
api_router.include_router(branches.router, prefix="/branches", tags=["branches"])
api_router.include_router(themes.router, prefix="/themes", tags=["themes"])
api_router.include_router(reviews.router, tags=["reviews"])
api_router.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(geocode.router, prefix="/geocode", tags=["geocode"])
api_router.include_router(advertisements.router, prefix="/advertisements", tags=["advertisements"])
api_router.include_router(health.router, prefix="/health", tags=["health"])
