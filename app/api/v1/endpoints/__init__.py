"""
API endpoints module
"""

from . import (
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

__all__ = [
    "admin",
    "advertisements",
    "auth",
    "branches",
    "favorites",
    "geocode",
    "health",
    "map",
    "profile",
    "reports",
    "reviews",
    "themes"
]
