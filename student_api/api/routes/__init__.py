"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from student_api.api.routes.health_routes import router as health_router
from student_api.api.routes.student_routes import router as student_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(health_router)
api_router.include_router(student_router)
