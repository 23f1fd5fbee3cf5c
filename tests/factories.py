"""
Small builders for catalog entries used across the tests.
"""
from copilot.schemas.schemas import Internship, InternshipBase, Project, ProjectDifficulty


def make_internship(title, skills, location="Remote", stipend="15000", id=None, description=None):
    """InternshipBase, or a stored-looking Internship when id is given."""
    data = dict(
        title=title,
        company=f"{title} Co",
        location=location,
        stipend=stipend,
        duration="3 months",
        required_skills=skills,
        description=description or f"Work as {title}",
    )
    if id is not None:
        return Internship(id=id, **data)
    return InternshipBase(**data)


def make_project(title, technologies, id):
    return Project(
        id=id,
        title=title,
        description=f"Build {title}",
        difficulty=ProjectDifficulty.beginner,
        duration="1 week",
        technologies=technologies,
        features=[],
    )
