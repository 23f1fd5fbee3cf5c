"""Tests for payload validation and wire format."""

from copilot.schemas.schemas import (
    InternshipMatch,
    StudentCreate,
    StudentUpdate,
    normalize_email,
    validate_payload,
)


def test_validate_payload_success_strips_name():
    result = validate_payload(StudentCreate, {"name": "  Bo ", "email": "bo@university.edu", "year": 4})
    assert result.ok
    assert result.errors == []
    assert result.value.name == "Bo"
    assert result.value.skills == []
    assert result.value.interests == []


def test_validate_payload_rejects_non_object():
    result = validate_payload(StudentCreate, ["not", "an", "object"])
    assert not result.ok
    assert result.value is None
    assert result.errors == [{"field": "body", "message": "Request body must be a JSON object"}]


def test_validate_payload_blank_name():
    result = validate_payload(StudentCreate, {"name": "   ", "email": "bo@university.edu", "year": 1})
    assert not result.ok
    assert [e["field"] for e in result.errors] == ["name"]


def test_validate_payload_reports_nested_field_paths():
    result = validate_payload(StudentUpdate, {"skills": ["ok", 5]})
    assert not result.ok
    assert result.errors[0]["field"] == "skills.1"


def test_internship_match_accepts_and_emits_camel_case():
    match = InternshipMatch.model_validate({
        "id": "1",
        "title": "Intern",
        "company": "Co",
        "location": "Remote",
        "stipend": "100",
        "duration": "1 month",
        "requiredSkills": ["Go"],
        "description": "Go work",
        "matchScore": 1,
    })
    assert match.required_skills == ["Go"]
    dumped = match.model_dump(by_alias=True)
    assert dumped["matchScore"] == 1
    assert dumped["requiredSkills"] == ["Go"]


def test_update_rejects_blank_name_and_strips():
    blank = validate_payload(StudentUpdate, {"name": "   "})
    assert not blank.ok
    assert [e["field"] for e in blank.errors] == ["name"]

    padded = validate_payload(StudentUpdate, {"name": " Bo "})
    assert padded.value.name == "Bo"
    assert validate_payload(StudentUpdate, {"year": 2}).value.name is None


def test_normalize_email_matches_stored_form():
    stored = StudentCreate(name="Bo", email="bo@University.EDU", year=1).email
    assert normalize_email("bo@University.EDU") == stored == "bo@university.edu"
    assert normalize_email("not-an-email") == "not-an-email"
