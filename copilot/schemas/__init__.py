"""
Schemas module - domain models plus Request/Response schemas for API endpoints.

Difference from services:
- Schemas: data shapes and validation (what client sends/receives)
- Services: behaviour (matching, scoring, storage)
"""

from copilot.schemas.schemas import (
    Student, StudentCreate, StudentUpdate,
    Internship, InternshipBase, InternshipMatch,
    Project, ProjectBase, ProjectMatch, ProjectDifficulty,
    SkillGapReport, ValidationResult, validate_payload, normalize_email,
)

__all__ = [
    "Student", "StudentCreate", "StudentUpdate",
    "Internship", "InternshipBase", "InternshipMatch",
    "Project", "ProjectBase", "ProjectMatch", "ProjectDifficulty",
    "SkillGapReport", "ValidationResult", "validate_payload", "normalize_email",
]
