"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from copilot.api.routes.student_routes import router as student_router
from copilot.api.routes.internship_routes import router as internship_router
from copilot.api.routes.project_routes import router as project_router
from copilot.api.routes.skill_gap_routes import router as skill_gap_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(student_router)
api_router.include_router(internship_router)
api_router.include_router(project_router)
api_router.include_router(skill_gap_router)
