"""
API route modules.

Each module defines routes for one domain area.
"""

from routes.tracking import router as tracking_router

__all__ = [
    "tracking_router",
]
