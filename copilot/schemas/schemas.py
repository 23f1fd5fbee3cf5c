"""
Pydantic Schemas - Domain models and Request/Response validation

All schemas in one file for simplicity. Field names are snake_case in
Python and camelCase on the wire (requiredSkills, matchScore, ...).
"""

from dataclasses import dataclass, field
from pydantic import (
    BaseModel, ConfigDict, EmailStr, Field, TypeAdapter, ValidationError, field_validator
)
from typing import Optional, List, Any, Dict, Type
from enum import Enum


class CamelModel(BaseModel):
    """Accepts both the Python name and the camelCase alias on input."""
    model_config = ConfigDict(populate_by_name=True)


# ============================================================
# ENUMS
# ============================================================

class ProjectDifficulty(str, Enum):
    beginner = "Beginner"
    intermediate = "Intermediate"
    advanced = "Advanced"


class MatchMode(str, Enum):
    exact = "exact"
    fuzzy = "fuzzy"


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    year: int = Field(..., ge=1, le=4)
    skills: List[str] = []
    interests: List[str] = []

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()


class StudentUpdate(CamelModel):
    """Partial update. skills / interests replace the stored arrays."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    year: Optional[int] = Field(None, ge=1, le=4)
    skills: Optional[List[str]] = None
    interests: Optional[List[str]] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if not v.strip():
            raise ValueError("name must not be blank")
        return v.strip()


class Student(CamelModel):
    id: str
    name: str
    email: str
    year: int
    skills: List[str] = []
    interests: List[str] = []


# ============================================================
# CATALOG SCHEMAS
# ============================================================

class InternshipBase(CamelModel):
    title: str
    company: str
    location: str
    stipend: str
    duration: str
    required_skills: List[str] = Field(default_factory=list, alias="requiredSkills")
    description: str
    source: Optional[str] = None
    url: Optional[str] = None


class Internship(InternshipBase):
    id: str


class InternshipMatch(Internship):
    match_score: int = Field(0, alias="matchScore")


class ProjectBase(CamelModel):
    title: str
    description: str
    difficulty: ProjectDifficulty
    duration: str
    technologies: List[str] = []
    features: List[str] = []


class Project(ProjectBase):
    id: str


class ProjectMatch(Project):
    score: int = 0


# ============================================================
# SKILL GAP SCHEMAS
# ============================================================

class CurrentSkill(CamelModel):
    name: str
    level: str
    proficiency: int


class MissingSkill(CamelModel):
    name: str
    priority: str
    time_to_learn: str = Field(..., alias="timeToLearn")


class LearningWeek(CamelModel):
    title: str
    focus: str
    tasks: List[str]


class LearningPlan(CamelModel):
    weeks: List[LearningWeek] = []


class SkillGapReport(CamelModel):
    target_role: str = Field(..., alias="targetRole")
    current_skills: List[CurrentSkill] = Field(default_factory=list, alias="currentSkills")
    missing_skills: List[MissingSkill] = Field(default_factory=list, alias="missingSkills")
    learning_plan: LearningPlan = Field(default_factory=LearningPlan, alias="learningPlan")


# ============================================================
# REQUEST SCHEMAS
# ============================================================

class ProfileSkills(CamelModel):
    skills: List[str] = []


class InternshipFilters(CamelModel):
    location: Optional[str] = None
    remote: Optional[bool] = None


class FindInternshipsRequest(CamelModel):
    student_id: Optional[str] = Field(None, alias="studentId")
    profile: Optional[ProfileSkills] = None
    filters: Optional[InternshipFilters] = None


class ProjectsRequest(CamelModel):
    student_id: Optional[str] = Field(None, alias="studentId")
    profile: Optional[ProfileSkills] = None


class SkillGapRequest(CamelModel):
    # Both are checked in the route so a missing one gives the 400 message
    student_id: Optional[str] = Field(None, alias="studentId")
    target_role: Optional[str] = Field(None, alias="targetRole")


class ScrapeRequest(CamelModel):
    sources: List[str] = ["linkedin", "indeed"]


# ============================================================
# RESPONSE SCHEMAS
# ============================================================

class StudentResponse(BaseModel):
    success: bool = True
    student: Student


class InternshipListResponse(BaseModel):
    success: bool = True
    internships: List[Internship]


class InternshipMatchListResponse(BaseModel):
    success: bool = True
    internships: List[InternshipMatch]


class ProjectListResponse(BaseModel):
    success: bool = True
    projects: List[Project]


class ProjectRecommendationResponse(BaseModel):
    success: bool = True
    projects: List[ProjectMatch]


class SkillGapResponse(BaseModel):
    success: bool = True
    analysis: SkillGapReport


class RoleListResponse(CamelModel):
    success: bool = True
    roles: Dict[str, List[str]]
    default_role: str = Field(..., alias="defaultRole")


class ScrapeResponse(BaseModel):
    success: bool = True
    message: str
    data: List[Internship]


class ErrorResponse(BaseModel):
    # str for simple failures, list of {field, message} for validation
    detail: Any


# ============================================================
# VALIDATION
# ============================================================

@dataclass
class ValidationResult:
    """Tagged outcome of validate_payload: either value or errors is set."""
    ok: bool
    value: Optional[BaseModel] = None
    errors: List[Dict[str, str]] = field(default_factory=list)


def validate_payload(model: Type[BaseModel], data: Any) -> ValidationResult:
    """
    Validate a raw JSON body against a schema.

    Never raises; the errors list names each offending field so
    the route can return them as-is.
    """
    if not isinstance(data, dict):
        return ValidationResult(
            ok=False,
            errors=[{"field": "body", "message": "Request body must be a JSON object"}]
        )

    try:
        return ValidationResult(ok=True, value=model.model_validate(data))
    except ValidationError as e:
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or "body",
                "message": err["msg"],
            }
            for err in e.errors()
        ]
        return ValidationResult(ok=False, errors=errors)


_email_adapter = TypeAdapter(EmailStr)


def normalize_email(email: str) -> str:
    """
    The form EmailStr stores (domain lower-cased). Strings that aren't
    valid addresses come back unchanged so lookups simply miss.
    """
    try:
        return _email_adapter.validate_python(email)
    except ValidationError:
        return email
