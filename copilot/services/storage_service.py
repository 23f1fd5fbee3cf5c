"""
Storage Service - students and the internship / project catalog.

Two interchangeable backends behind CatalogStorage:
1. MemoryStorage - dict-backed, used for local runs and tests
2. SqlStorage    - SQLAlchemy engine + raw SQL (PostgreSQL or SQLite)

FAILURE POLICY:
- Reads (get_*, list_*): storage errors and rows that fail validation
  are logged and a default is returned ([] or None) so matching
  stays available.
- Writes (create / update / add): storage errors are re-raised as
  UpstreamUnavailableError. No retries.

Student writes are last-writer-wins; there is no version check.
"""

import json
import logging
import uuid
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from copilot.core.exceptions import InvalidInputError, UpstreamUnavailableError
from copilot.db.database import (
    check_database_connection,
    execute_raw_sql,
    get_db_session,
    get_engine,
    init_schema,
)
from copilot.schemas.schemas import (
    Internship,
    InternshipBase,
    Project,
    ProjectBase,
    Student,
    StudentCreate,
    StudentUpdate,
    normalize_email,
)
from copilot.services.sample_data import SAMPLE_INTERNSHIPS, SAMPLE_PROJECTS

logger = logging.getLogger(__name__)


def _duplicate_email_error(email: str) -> InvalidInputError:
    return InvalidInputError(
        "Invalid student data",
        errors=[{"field": "email", "message": f"A student with email {email} already exists"}],
    )


# ============================================================
# INTERFACE
# ============================================================

class CatalogStorage(ABC):
    """Everything the matching engine and the routes need from a store."""

    @abstractmethod
    def get_student(self, student_id: str) -> Optional[Student]:
        ...

    @abstractmethod
    def get_student_by_email(self, email: str) -> Optional[Student]:
        ...

    @abstractmethod
    def create_student(self, data: StudentCreate) -> Student:
        ...

    @abstractmethod
    def update_student(self, student_id: str, data: StudentUpdate) -> Optional[Student]:
        ...

    @abstractmethod
    def list_internships(self) -> List[Internship]:
        ...

    @abstractmethod
    def add_internships(self, items: List[InternshipBase]) -> List[Internship]:
        ...

    @abstractmethod
    def list_projects(self) -> List[Project]:
        ...

    @abstractmethod
    def add_projects(self, items: List[ProjectBase]) -> List[Project]:
        ...

    @abstractmethod
    def is_healthy(self) -> bool:
        ...

    def seed_sample_data(self) -> None:
        """Fill empty catalogs with the built-in sample entries."""
        if not self.list_internships():
            self.add_internships(SAMPLE_INTERNSHIPS)
            logger.info("Seeded %d sample internships", len(SAMPLE_INTERNSHIPS))
        if not self.list_projects():
            self.add_projects(SAMPLE_PROJECTS)
            logger.info("Seeded %d sample projects", len(SAMPLE_PROJECTS))


# ============================================================
# IN-MEMORY BACKEND
# ============================================================

class MemoryStorage(CatalogStorage):
    """
    Dict-backed store. Catalog order is insertion order.

    Returned models are copies, so callers can't mutate stored state.
    """

    def __init__(self, seed: bool = True):
        self.students: Dict[str, Student] = {}
        self.internships: Dict[str, Internship] = {}
        self.projects: Dict[str, Project] = {}

        if seed:
            self.seed_sample_data()

    def get_student(self, student_id: str) -> Optional[Student]:
        student = self.students.get(student_id)
        return student.model_copy(deep=True) if student else None

    def get_student_by_email(self, email: str) -> Optional[Student]:
        email = normalize_email(email)
        for student in self.students.values():
            if student.email == email:
                return student.model_copy(deep=True)
        return None

    def create_student(self, data: StudentCreate) -> Student:
        if self.get_student_by_email(data.email) is not None:
            raise _duplicate_email_error(data.email)

        student = Student(id=str(uuid.uuid4()), **data.model_dump())
        self.students[student.id] = student
        return student.model_copy(deep=True)

    def update_student(self, student_id: str, data: StudentUpdate) -> Optional[Student]:
        existing = self.students.get(student_id)
        if existing is None:
            return None

        updates = data.model_dump(exclude_none=True)
        new_email = updates.get("email")
        if new_email and new_email != existing.email:
            other = self.get_student_by_email(new_email)
            if other is not None and other.id != student_id:
                raise _duplicate_email_error(new_email)

        updated = existing.model_copy(update=updates)
        self.students[student_id] = updated
        return updated.model_copy(deep=True)

    def list_internships(self) -> List[Internship]:
        return [i.model_copy(deep=True) for i in self.internships.values()]

    def add_internships(self, items: List[InternshipBase]) -> List[Internship]:
        created = []
        for item in items:
            internship = Internship(id=str(uuid.uuid4()), **item.model_dump())
            self.internships[internship.id] = internship
            created.append(internship.model_copy(deep=True))
        return created

    def list_projects(self) -> List[Project]:
        return [p.model_copy(deep=True) for p in self.projects.values()]

    def add_projects(self, items: List[ProjectBase]) -> List[Project]:
        created = []
        for item in items:
            project = Project(id=str(uuid.uuid4()), **item.model_dump())
            self.projects[project.id] = project
            created.append(project.model_copy(deep=True))
        return created

    def is_healthy(self) -> bool:
        return True


# ============================================================
# RELATIONAL BACKEND
# ============================================================

def _load_list(value) -> List[str]:
    """Decode a JSON-text list column. Bad or missing data becomes []."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    try:
        decoded = json.loads(value)
    except (TypeError, ValueError):
        return []
    return decoded if isinstance(decoded, list) else []


class SqlStorage(CatalogStorage):
    """
    Store backed by a SQL database through SQLAlchemy.

    Uses the application engine unless one is passed in.
    """

    STUDENT_COLUMNS = "id, name, email, year, skills, interests"
    INTERNSHIP_COLUMNS = (
        "id, title, company, location, stipend, duration, required_skills, "
        "description, source, url"
    )
    PROJECT_COLUMNS = "id, title, description, difficulty, duration, technologies, features"

    def __init__(self, engine: Optional[Engine] = None, seed: bool = False):
        self.engine = engine or get_engine()

        try:
            init_schema(self.engine)
        except SQLAlchemyError as e:
            logger.error("Could not initialise database schema: %s", e)

        if seed:
            self.seed_sample_data()

    # ---------- row conversion ----------

    @staticmethod
    def _row_to_student(row: dict) -> Student:
        return Student(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            year=row["year"],
            skills=_load_list(row["skills"]),
            interests=_load_list(row["interests"]),
        )

    @staticmethod
    def _row_to_internship(row: dict) -> Internship:
        return Internship(
            id=row["id"],
            title=row["title"],
            company=row["company"],
            location=row["location"],
            stipend=row["stipend"],
            duration=row["duration"],
            required_skills=_load_list(row["required_skills"]),
            description=row["description"],
            source=row["source"],
            url=row["url"],
        )

    @staticmethod
    def _row_to_project(row: dict) -> Project:
        return Project(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            difficulty=row["difficulty"],
            duration=row["duration"],
            technologies=_load_list(row["technologies"]),
            features=_load_list(row["features"]),
        )

    # ---------- students ----------

    def _fetch_one_student(self, where: str, params: dict) -> Optional[Student]:
        rows = execute_raw_sql(
            f"SELECT {self.STUDENT_COLUMNS} FROM students WHERE {where}",
            params,
            engine=self.engine,
        )
        return self._row_to_student(rows[0]) if rows else None

    def get_student(self, student_id: str) -> Optional[Student]:
        try:
            return self._fetch_one_student("id = :id", {"id": student_id})
        except (SQLAlchemyError, ValidationError) as e:
            logger.error("Error fetching student %s: %s", student_id, e)
            return None

    def get_student_by_email(self, email: str) -> Optional[Student]:
        try:
            return self._fetch_one_student("email = :email", {"email": normalize_email(email)})
        except (SQLAlchemyError, ValidationError) as e:
            logger.error("Error fetching student by email: %s", e)
            return None

    def create_student(self, data: StudentCreate) -> Student:
        student = Student(id=str(uuid.uuid4()), **data.model_dump())

        try:
            with get_db_session(self.engine) as db:
                existing = db.execute(
                    text("SELECT id FROM students WHERE email = :email"),
                    {"email": student.email}
                ).fetchone()
                if existing:
                    raise _duplicate_email_error(student.email)

                db.execute(
                    text("""
                        INSERT INTO students (id, name, email, year, skills, interests)
                        VALUES (:id, :name, :email, :year, :skills, :interests)
                    """),
                    {
                        "id": student.id,
                        "name": student.name,
                        "email": student.email,
                        "year": student.year,
                        "skills": json.dumps(student.skills),
                        "interests": json.dumps(student.interests),
                    }
                )
        except IntegrityError as e:
            # Lost a race with a concurrent insert of the same email
            raise _duplicate_email_error(student.email) from e
        except SQLAlchemyError as e:
            logger.error("Error creating student: %s", e)
            raise UpstreamUnavailableError("Failed to create student") from e

        return student

    def update_student(self, student_id: str, data: StudentUpdate) -> Optional[Student]:
        updates = []
        params = {"id": student_id}

        for field in ["name", "email", "year", "skills", "interests"]:
            value = getattr(data, field)
            if value is None:
                continue
            updates.append(f"{field} = :{field}")
            params[field] = json.dumps(value) if isinstance(value, list) else value

        try:
            with get_db_session(self.engine) as db:
                if data.email is not None:
                    clash = db.execute(
                        text("SELECT id FROM students WHERE email = :email AND id != :id"),
                        {"email": data.email, "id": student_id}
                    ).fetchone()
                    if clash:
                        raise _duplicate_email_error(data.email)

                if updates:
                    result = db.execute(
                        text(f"UPDATE students SET {', '.join(updates)} WHERE id = :id"),
                        params
                    )
                    if result.rowcount == 0:
                        return None
        except IntegrityError as e:
            raise _duplicate_email_error(data.email or "") from e
        except SQLAlchemyError as e:
            logger.error("Error updating student %s: %s", student_id, e)
            raise UpstreamUnavailableError("Failed to update student") from e

        return self.get_student(student_id)

    # ---------- catalog ----------

    def list_internships(self) -> List[Internship]:
        try:
            rows = execute_raw_sql(
                f"SELECT {self.INTERNSHIP_COLUMNS} FROM internships ORDER BY catalog_order",
                engine=self.engine,
            )
            return [self._row_to_internship(r) for r in rows]
        except (SQLAlchemyError, ValidationError) as e:
            logger.error("Error fetching internships: %s", e)
            return []

    def add_internships(self, items: List[InternshipBase]) -> List[Internship]:
        created = []
        try:
            with get_db_session(self.engine) as db:
                order = db.execute(
                    text("SELECT COALESCE(MAX(catalog_order), 0) FROM internships")
                ).scalar()
                for item in items:
                    order += 1
                    internship = Internship(id=str(uuid.uuid4()), **item.model_dump())
                    db.execute(
                        text("""
                            INSERT INTO internships (id, catalog_order, title, company, location,
                                stipend, duration, required_skills, description, source, url)
                            VALUES (:id, :catalog_order, :title, :company, :location,
                                :stipend, :duration, :required_skills, :description, :source, :url)
                        """),
                        {
                            "id": internship.id, "catalog_order": order,
                            "title": internship.title, "company": internship.company,
                            "location": internship.location, "stipend": internship.stipend,
                            "duration": internship.duration,
                            "required_skills": json.dumps(internship.required_skills),
                            "description": internship.description,
                            "source": internship.source, "url": internship.url,
                        }
                    )
                    created.append(internship)
        except SQLAlchemyError as e:
            logger.error("Error storing internships: %s", e)
            raise UpstreamUnavailableError("Failed to store internships") from e
        return created

    def list_projects(self) -> List[Project]:
        try:
            rows = execute_raw_sql(
                f"SELECT {self.PROJECT_COLUMNS} FROM projects ORDER BY catalog_order",
                engine=self.engine,
            )
            return [self._row_to_project(r) for r in rows]
        except (SQLAlchemyError, ValidationError) as e:
            logger.error("Error fetching projects: %s", e)
            return []

    def add_projects(self, items: List[ProjectBase]) -> List[Project]:
        created = []
        try:
            with get_db_session(self.engine) as db:
                order = db.execute(
                    text("SELECT COALESCE(MAX(catalog_order), 0) FROM projects")
                ).scalar()
                for item in items:
                    order += 1
                    project = Project(id=str(uuid.uuid4()), **item.model_dump())
                    db.execute(
                        text("""
                            INSERT INTO projects (id, catalog_order, title, description,
                                difficulty, duration, technologies, features)
                            VALUES (:id, :catalog_order, :title, :description,
                                :difficulty, :duration, :technologies, :features)
                        """),
                        {
                            "id": project.id, "catalog_order": order,
                            "title": project.title, "description": project.description,
                            "difficulty": project.difficulty.value, "duration": project.duration,
                            "technologies": json.dumps(project.technologies),
                            "features": json.dumps(project.features),
                        }
                    )
                    created.append(project)
        except SQLAlchemyError as e:
            logger.error("Error storing projects: %s", e)
            raise UpstreamUnavailableError("Failed to store projects") from e
        return created

    def is_healthy(self) -> bool:
        return check_database_connection(self.engine)
