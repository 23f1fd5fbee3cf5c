"""
Internship Routes

GET  /internships                    - Catalog, optionally filtered (query/location/stipend)
GET  /find-internships/{student_id}  - Internships matched to a stored student
POST /find-internships               - Match by studentId, inline profile, or return all
POST /scrape-internships             - Run the mock scraper and store results
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import Optional

from copilot.api.deps import get_career_service, get_scraping_service
from copilot.core.exceptions import UpstreamUnavailableError
from copilot.schemas.schemas import (
    FindInternshipsRequest, ScrapeRequest, InternshipMatch,
    InternshipListResponse, InternshipMatchListResponse, ScrapeResponse
)
from copilot.services.career_service import CareerService
from copilot.services.scraping_service import ScrapingService

router = APIRouter(tags=["Internships"])


@router.get("/internships", response_model=InternshipListResponse)
async def list_internships(
    query: Optional[str] = Query(None, description="Search in title, company and description"),
    location: Optional[str] = Query(None),
    stipend: Optional[str] = Query(None, description="Text contained in the stipend"),
    service: CareerService = Depends(get_career_service)
):
    """List internships. Filters are case-insensitive substring matches."""
    internships = service.search_internships(query=query, location=location, stipend=stipend)
    return InternshipListResponse(internships=internships)


@router.get("/find-internships/{student_id}", response_model=InternshipMatchListResponse)
async def find_internships_for_student(
    student_id: str,
    service: CareerService = Depends(get_career_service)
):
    """Internships sharing at least one skill with the student, best first."""
    return InternshipMatchListResponse(internships=service.match_internships(student_id))


@router.post("/find-internships", response_model=InternshipMatchListResponse)
async def find_internships(
    body: Optional[FindInternshipsRequest] = None,
    service: CareerService = Depends(get_career_service)
):
    """
    Accepts:
    - { studentId }          -> same as GET /find-internships/{studentId}
    - { profile, filters }   -> on-the-fly matching of the given skills
    - no body                -> every internship, matchScore 0
    """
    if body and body.student_id:
        return InternshipMatchListResponse(internships=service.match_internships(body.student_id))

    if body and body.profile is not None:
        filters = body.filters
        matches = service.match_profile(
            body.profile.skills,
            location=filters.location if filters else None,
            remote=filters.remote if filters else None,
        )
        return InternshipMatchListResponse(internships=matches)

    everything = [
        InternshipMatch(**i.model_dump(), match_score=0)
        for i in service.search_internships()
    ]
    return InternshipMatchListResponse(internships=everything)


@router.post("/scrape-internships", response_model=ScrapeResponse)
async def scrape_internships(
    body: Optional[ScrapeRequest] = None,
    scraper: ScrapingService = Depends(get_scraping_service)
):
    """Run the (mock) scraper for the given sources and store what it finds."""
    sources = (body or ScrapeRequest()).sources
    try:
        stored = scraper.scrape_and_store(sources)
    except UpstreamUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return ScrapeResponse(
        message=f"Successfully scraped and stored {len(stored)} internships",
        data=stored
    )
