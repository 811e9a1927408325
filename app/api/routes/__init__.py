"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from app.api.routes.internship_routes import router as internship_router
from app.api.routes.recommendation_routes import router as recommendation_router
from app.api.routes.profile_routes import router as profile_router
from app.api.routes.application_routes import router as application_router
from app.api.routes.saved_routes import router as saved_router
from app.api.routes.notification_routes import router as notification_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(internship_router)
api_router.include_router(recommendation_router)
api_router.include_router(profile_router)
api_router.include_router(application_router)
api_router.include_router(saved_router)
api_router.include_router(notification_router)
