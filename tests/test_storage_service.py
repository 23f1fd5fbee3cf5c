"""Tests for both storage backends."""

import pytest
from sqlalchemy import text

from copilot.core.exceptions import InvalidInputError, UpstreamUnavailableError
from copilot.schemas.schemas import StudentCreate, StudentUpdate
from copilot.services.sample_data import SAMPLE_INTERNSHIPS, SAMPLE_PROJECTS
from copilot.services.storage_service import MemoryStorage, _load_list
from factories import make_internship


def new_student(email="asha@university.edu", skills=None):
    return StudentCreate(
        name="Asha",
        email=email,
        year=2,
        skills=skills if skills is not None else ["React", "JavaScript"],
        interests=["Web"],
    )


def test_create_and_fetch_student(storage):
    created = storage.create_student(new_student())

    assert created.id
    assert storage.get_student(created.id) == created
    assert storage.get_student_by_email("asha@university.edu") == created


def test_unknown_student_is_none(storage):
    assert storage.get_student("does-not-exist") is None
    assert storage.get_student_by_email("nobody@university.edu") is None


def test_duplicate_email_is_rejected(storage):
    storage.create_student(new_student())
    with pytest.raises(InvalidInputError) as exc:
        storage.create_student(new_student())
    assert exc.value.errors[0]["field"] == "email"


def test_update_replaces_arrays(storage):
    created = storage.create_student(new_student(skills=["React", "CSS"]))

    updated = storage.update_student(created.id, StudentUpdate(skills=["Python"]))
    assert updated.skills == ["Python"]
    assert updated.interests == ["Web"]
    assert updated.name == "Asha"

    updated = storage.update_student(created.id, StudentUpdate(year=3, interests=[]))
    assert updated.year == 3
    assert updated.interests == []
    assert updated.skills == ["Python"]


def test_update_unknown_student_returns_none(storage):
    assert storage.update_student("missing", StudentUpdate(year=2)) is None
    assert storage.update_student("missing", StudentUpdate()) is None


def test_update_to_taken_email_is_rejected(storage):
    storage.create_student(new_student(email="first@university.edu"))
    second = storage.create_student(new_student(email="second@university.edu"))

    with pytest.raises(InvalidInputError):
        storage.update_student(second.id, StudentUpdate(email="first@university.edu"))


def test_catalog_keeps_insertion_order(storage):
    storage.add_internships([make_internship("A", ["Python"]), make_internship("B", [])])
    storage.add_internships([make_internship("C", ["Go"])])

    internships = storage.list_internships()
    assert [i.title for i in internships] == ["A", "B", "C"]
    assert internships[0].required_skills == ["Python"]
    assert internships[1].required_skills == []


def test_seed_sample_data_only_fills_empty_catalogs(storage):
    storage.seed_sample_data()
    storage.seed_sample_data()

    assert len(storage.list_internships()) == len(SAMPLE_INTERNSHIPS)
    assert len(storage.list_projects()) == len(SAMPLE_PROJECTS)
    assert storage.list_projects()[0].technologies == SAMPLE_PROJECTS[0].technologies


def test_storage_reports_healthy(storage):
    assert storage.is_healthy()


def test_memory_storage_returns_copies():
    storage = MemoryStorage(seed=False)
    created = storage.create_student(new_student())
    created.skills.append("Hacking")

    assert storage.get_student(created.id).skills == ["React", "JavaScript"]


def test_sql_read_failure_falls_back_to_empty(sql_storage):
    sql_storage.add_internships([make_internship("A", ["Python"])])
    with sql_storage.engine.begin() as conn:
        conn.execute(text("DROP TABLE internships"))
        conn.execute(text("DROP TABLE students"))

    assert sql_storage.list_internships() == []
    assert sql_storage.get_student("anything") is None


def test_sql_write_failure_is_reported(sql_storage):
    with sql_storage.engine.begin() as conn:
        conn.execute(text("DROP TABLE internships"))
        conn.execute(text("DROP TABLE students"))

    with pytest.raises(UpstreamUnavailableError):
        sql_storage.add_internships([make_internship("A", ["Python"])])
    with pytest.raises(UpstreamUnavailableError):
        sql_storage.create_student(new_student())


def test_load_list_is_permissive():
    assert _load_list(None) == []
    assert _load_list("not json") == []
    assert _load_list('{"a": 1}') == []
    assert _load_list('["React"]') == ["React"]
    assert _load_list(["Go"]) == ["Go"]


def test_email_lookup_ignores_domain_case(storage):
    created = storage.create_student(new_student(email="bo@University.EDU"))

    assert storage.get_student_by_email("bo@University.EDU") == created
    assert storage.get_student_by_email("bo@university.edu") == created


def test_sql_update_failure_is_reported(sql_storage):
    created = sql_storage.create_student(new_student())
    with sql_storage.engine.begin() as conn:
        conn.execute(text("DROP TABLE students"))

    with pytest.raises(UpstreamUnavailableError):
        sql_storage.update_student(created.id, StudentUpdate(year=3))


def test_sql_malformed_rows_fall_back_to_empty(sql_storage):
    sql_storage.seed_sample_data()
    with sql_storage.engine.begin() as conn:
        conn.execute(text("UPDATE projects SET difficulty = 'Impossible'"))

    assert sql_storage.list_projects() == []
