"""
Project Routes

GET  /projects               - Full project catalog
GET  /projects/{student_id}  - Projects ranked for a student
POST /projects               - Rank by studentId or inline profile
"""

from fastapi import APIRouter, Depends
from typing import Optional

from copilot.api.deps import get_career_service
from copilot.schemas.schemas import (
    ProjectsRequest, ProjectListResponse, ProjectRecommendationResponse
)
from copilot.services.career_service import CareerService

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=ProjectListResponse)
async def list_projects(service: CareerService = Depends(get_career_service)):
    return ProjectListResponse(projects=service.storage.list_projects())


@router.get("/{student_id}", response_model=ProjectRecommendationResponse)
async def recommend_projects(student_id: str, service: CareerService = Depends(get_career_service)):
    """
    Projects ordered by how many of their technologies the student knows.
    Unknown students and students without skills get the catalog shuffled.
    """
    return ProjectRecommendationResponse(projects=service.recommend_projects(student_id))


@router.post("", response_model=ProjectRecommendationResponse)
async def recommend_projects_for_profile(
    body: Optional[ProjectsRequest] = None,
    service: CareerService = Depends(get_career_service)
):
    if body and body.profile is not None and not body.student_id:
        projects = service.recommend_projects_for_skills(body.profile.skills)
    else:
        projects = service.recommend_projects(body.student_id if body else None)
    return ProjectRecommendationResponse(projects=projects)
