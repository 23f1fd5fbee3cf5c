"""
Student Co-Pilot - Main Application

FastAPI backend with:
- Student onboarding and profile updates
- Skill-based internship matching and search
- Project recommendations
- Skill gap analysis with a learning plan
- Mock internship scraping

Run: uvicorn copilot.main:app --reload
"""

import logging

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from copilot.api.deps import get_storage
from copilot.api.routes import api_router
from copilot.core.config import get_settings
from copilot.services.storage_service import CatalogStorage

settings = get_settings()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Student Co-Pilot",
    description="""
    Career guidance for students.

    ## Features
    - **Students**: Onboarding and profile updates
    - **Internships**: Skill-overlap matching, search, mock scraping
    - **Projects**: Recommendations ranked by known technologies
    - **Skill Gap**: Missing skills for a target role plus a learning plan

    ## Storage
    - `memory` (default): in-process, seeded with sample data
    - `sql`: any SQLAlchemy URL (PostgreSQL, SQLite)
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create the store (and seed it) before the first request."""
    storage = get_storage()
    logger.info(
        "Storage backend: %s, match mode: %s",
        type(storage).__name__, settings.match_mode
    )


@app.get("/health", tags=["Health"])
async def health_check(storage: CatalogStorage = Depends(get_storage)):
    """Detailed health check."""
    healthy = storage.is_healthy()
    return {
        "status": "healthy" if healthy else "degraded",
        "storage": settings.storage_backend,
        "database": "connected" if healthy else "disconnected",
        "match_mode": settings.match_mode
    }
