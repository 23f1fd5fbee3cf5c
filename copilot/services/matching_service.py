"""
Matching & Scoring Service

PURPOSE:
Score catalog entries (internships, projects) against a student's
skills and return ranked views. Everything here is a pure function of
its arguments plus an injected random.Random.

SCORING MODES (one per deployment, see Settings.match_mode):
1. exact  - count of required skills present in the student's skill set.
            Case-sensitive, no normalisation. Deterministic.
2. fuzzy  - case-insensitive substring containment in either direction,
            scaled to a 0-100 percentage plus a random bonus, capped at 100.

Sorting is always descending by score and stable, so ties keep
catalog order.
"""

import random
from typing import Iterable, List, Optional

from copilot.schemas.schemas import (
    Internship,
    InternshipMatch,
    MatchMode,
    Project,
    ProjectMatch,
)


# ============================================================
# SCORERS
# ============================================================

def score_exact(student_skills: Iterable[str], required_skills: Optional[List[str]]) -> int:
    """
    Number of required skills the student has.

    Duplicates in required_skills each count, the same way the
    catalog lists them.
    """
    skill_set = set(student_skills)
    return sum(1 for skill in (required_skills or []) if skill in skill_set)


def fuzzy_overlap(student_skills: Iterable[str], required_skills: Optional[List[str]]) -> int:
    """
    Number of required skills matched by at least one student skill, where
    "matched" means one lower-cased string contains the other.
    """
    lowered = [s.lower() for s in student_skills if s and s.strip()]
    matched = 0
    for required in required_skills or []:
        req = required.lower()
        if req and any(req in s or s in req for s in lowered):
            matched += 1
    return matched


def score_fuzzy(
    student_skills: Iterable[str],
    required_skills: Optional[List[str]],
    rng: random.Random,
    bonus_max: int = 10
) -> int:
    """
    Percentage of required skills matched (0-100) plus a random bonus
    in [0, bonus_max], capped at 100. Zero overlap stays at 0.
    """
    required_skills = required_skills or []
    if not required_skills:
        return 0

    overlap = fuzzy_overlap(student_skills, required_skills)
    if overlap == 0:
        return 0

    base = round(overlap / len(required_skills) * 100)
    return min(100, base + rng.randint(0, bonus_max))


# ============================================================
# INTERNSHIPS
# ============================================================

def rank_internships(
    student_skills: List[str],
    internships: List[Internship],
    mode: MatchMode = MatchMode.exact,
    rng: Optional[random.Random] = None,
    bonus_max: int = 10,
    keep_unmatched: bool = False
) -> List[InternshipMatch]:
    """
    Score every internship and sort by score, highest first.

    Args:
        student_skills: Skills to match with
        internships: Catalog, in catalog order
        mode: exact or fuzzy scorer
        rng: Random source for the fuzzy bonus
        bonus_max: Upper bound of the fuzzy bonus
        keep_unmatched: Keep zero-score entries (inline profile search)

    Returns:
        InternshipMatch list, non-increasing by match_score
    """
    rng = rng or random.Random()
    results = []

    for internship in internships:
        if MatchMode(mode) == MatchMode.fuzzy:
            score = score_fuzzy(student_skills, internship.required_skills, rng, bonus_max)
        else:
            score = score_exact(student_skills, internship.required_skills)

        if score > 0 or keep_unmatched:
            results.append(InternshipMatch(**internship.model_dump(), match_score=score))

    # sorted() is stable, so equal scores keep catalog order
    return sorted(results, key=lambda m: m.match_score, reverse=True)


def filter_internships(
    internships: List[InternshipMatch],
    location: Optional[str] = None,
    remote: Optional[bool] = None
) -> List[InternshipMatch]:
    """Optional location containment and remote-only filters."""
    filtered = internships
    if location:
        needle = location.lower()
        filtered = [i for i in filtered if needle in (i.location or "").lower()]
    if remote:
        filtered = [i for i in filtered if "remote" in (i.location or "").lower()]
    return filtered


def search_internships(
    internships: List[Internship],
    query: Optional[str] = None,
    location: Optional[str] = None,
    stipend: Optional[str] = None
) -> List[Internship]:
    """
    Case-insensitive substring search over title / company / description,
    with optional location and stipend text filters. No ranking.
    """
    results = internships

    if query:
        q = query.lower()
        results = [
            i for i in results
            if q in i.title.lower() or q in i.company.lower() or q in i.description.lower()
        ]
    if location:
        loc = location.lower()
        results = [i for i in results if loc in i.location.lower()]
    if stipend:
        st = stipend.lower()
        results = [i for i in results if st in i.stipend.lower()]

    return list(results)


# ============================================================
# PROJECTS
# ============================================================

def rank_projects(
    student_skills: List[str],
    projects: List[Project],
    rng: Optional[random.Random] = None
) -> List[ProjectMatch]:
    """
    Order projects by how many of their technologies the student knows.

    Nothing is filtered out. With no skills the whole catalog comes back
    shuffled (score 0 for everyone) instead of in catalog order.
    """
    rng = rng or random.Random()

    if not student_skills:
        shuffled = [ProjectMatch(**p.model_dump(), score=0) for p in projects]
        rng.shuffle(shuffled)
        return shuffled

    scored = [
        ProjectMatch(**p.model_dump(), score=score_exact(student_skills, p.technologies))
        for p in projects
    ]
    return sorted(scored, key=lambda p: p.score, reverse=True)
