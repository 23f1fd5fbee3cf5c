"""
Student Routes

POST /onboard                - Create student profile
GET  /student/{id}           - Get profile by id
GET  /student/email/{email}  - Get profile by email
PUT  /student/{id}           - Partial update (skills/interests are replaced)
"""

from typing import Any

from fastapi import APIRouter, HTTPException, Depends, Body

from copilot.api.deps import get_storage
from copilot.core.exceptions import InvalidInputError, UpstreamUnavailableError
from copilot.schemas.schemas import (
    StudentCreate, StudentUpdate, StudentResponse, ErrorResponse, validate_payload
)
from copilot.services.storage_service import CatalogStorage

router = APIRouter(tags=["Students"])


@router.post(
    "/onboard",
    response_model=StudentResponse,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def onboard(payload: Any = Body(None), storage: CatalogStorage = Depends(get_storage)):
    """Create a student profile from the onboarding form."""
    result = validate_payload(StudentCreate, payload)
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.errors)

    try:
        student = storage.create_student(result.value)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.errors)
    except UpstreamUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return StudentResponse(student=student)


@router.get("/student/email/{email}", response_model=StudentResponse)
async def get_student_by_email(email: str, storage: CatalogStorage = Depends(get_storage)):
    student = storage.get_student_by_email(email)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return StudentResponse(student=student)


@router.get("/student/{student_id}", response_model=StudentResponse)
async def get_student(student_id: str, storage: CatalogStorage = Depends(get_storage)):
    student = storage.get_student(student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return StudentResponse(student=student)


@router.put(
    "/student/{student_id}",
    response_model=StudentResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_student(
    student_id: str,
    payload: Any = Body(None),
    storage: CatalogStorage = Depends(get_storage)
):
    """Update profile. Only provided fields change; arrays are replaced, not merged."""
    result = validate_payload(StudentUpdate, payload)
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.errors)

    try:
        student = storage.update_student(student_id, result.value)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=e.errors)
    except UpstreamUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

    if not student:
        raise HTTPException(status_code=404, detail="Student not found")

    return StudentResponse(student=student)
