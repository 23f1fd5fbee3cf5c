"""
Skill Gap Routes

POST /skill-gap        - Gap report for a student and target role
GET  /skill-gap/roles  - Known roles and their required skills
"""

from fastapi import APIRouter, HTTPException, Depends
from typing import Optional

from copilot.api.deps import get_career_service
from copilot.core.exceptions import StudentNotFoundError
from copilot.schemas.schemas import (
    SkillGapRequest, SkillGapResponse, RoleListResponse, ErrorResponse
)
from copilot.services.career_service import CareerService

router = APIRouter(prefix="/skill-gap", tags=["Skill Gap"])


@router.post(
    "",
    response_model=SkillGapResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def analyze_skill_gap(
    body: Optional[SkillGapRequest] = None,
    service: CareerService = Depends(get_career_service)
):
    """
    Compare the student's skills with the role's requirements.

    Unknown roles use the default role's requirements.
    """
    if not body or not body.student_id or not body.target_role:
        raise HTTPException(status_code=400, detail="Student ID and target role are required")

    try:
        report = service.analyze_skill_gap(body.student_id, body.target_role)
    except StudentNotFoundError:
        raise HTTPException(status_code=404, detail="Student not found")

    return SkillGapResponse(analysis=report)


@router.get("/roles", response_model=RoleListResponse)
async def list_roles(service: CareerService = Depends(get_career_service)):
    analyzer = service.analyzer
    return RoleListResponse(roles=analyzer.role_requirements, default_role=analyzer.default_role)
