"""
Career Service - the four engine operations wired to storage.

    match_internships(student_id)            -> ranked internships (score > 0)
    recommend_projects(student_id)           -> all projects, ranked or shuffled
    analyze_skill_gap(student_id, role)      -> SkillGapReport
    search_internships(query, location, ...) -> filtered internships

Storage and the random source are injected so tests can pin both.
"""

import logging
import random
from typing import List, Optional

from copilot.core.config import Settings, get_settings
from copilot.core.exceptions import StudentNotFoundError
from copilot.schemas.schemas import (
    Internship,
    InternshipMatch,
    MatchMode,
    ProjectMatch,
    SkillGapReport,
)
from copilot.services.matching_service import (
    filter_internships,
    rank_internships,
    rank_projects,
    search_internships,
)
from copilot.services.skill_gap_service import SkillGapAnalyzer, load_role_requirements
from copilot.services.storage_service import CatalogStorage

logger = logging.getLogger(__name__)


class CareerService:

    def __init__(
        self,
        storage: CatalogStorage,
        rng: Optional[random.Random] = None,
        settings: Optional[Settings] = None,
        analyzer: Optional[SkillGapAnalyzer] = None
    ):
        self.storage = storage
        self.settings = settings or get_settings()
        self.rng = rng or random.Random(self.settings.random_seed)
        self.match_mode = MatchMode(self.settings.match_mode)
        self.analyzer = analyzer or SkillGapAnalyzer(
            role_requirements=load_role_requirements(self.settings.role_requirements_path),
            default_role=self.settings.default_role,
        )

    def match_internships(self, student_id: str) -> List[InternshipMatch]:
        """
        Internships the student has at least one required skill for,
        best match first. Unknown student gives an empty list.
        """
        student = self.storage.get_student(student_id)
        if student is None:
            logger.info("match_internships: student %s not found", student_id)
            return []

        return rank_internships(
            student.skills,
            self.storage.list_internships(),
            mode=self.match_mode,
            rng=self.rng,
            bonus_max=self.settings.fuzzy_bonus_max,
        )

    def match_profile(
        self,
        skills: List[str],
        location: Optional[str] = None,
        remote: Optional[bool] = None
    ) -> List[InternshipMatch]:
        """
        Score the whole catalog against an ad-hoc skill list, then filter.
        Zero-score entries are kept so filters alone still return results.
        """
        ranked = rank_internships(
            skills,
            self.storage.list_internships(),
            mode=self.match_mode,
            rng=self.rng,
            bonus_max=self.settings.fuzzy_bonus_max,
            keep_unmatched=True,
        )
        return filter_internships(ranked, location=location, remote=remote)

    def recommend_projects(self, student_id: Optional[str]) -> List[ProjectMatch]:
        """All projects by relevance; shuffled if the student has no skills or doesn't exist."""
        student = self.storage.get_student(student_id) if student_id else None
        skills = student.skills if student else []
        return rank_projects(skills, self.storage.list_projects(), rng=self.rng)

    def recommend_projects_for_skills(self, skills: List[str]) -> List[ProjectMatch]:
        return rank_projects(skills, self.storage.list_projects(), rng=self.rng)

    def analyze_skill_gap(self, student_id: str, target_role: str) -> SkillGapReport:
        """
        Raises:
            StudentNotFoundError: student_id doesn't resolve
        """
        student = self.storage.get_student(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return self.analyzer.analyze(student.skills, target_role, rng=self.rng)

    def search_internships(
        self,
        query: Optional[str] = None,
        location: Optional[str] = None,
        stipend: Optional[str] = None
    ) -> List[Internship]:
        return search_internships(
            self.storage.list_internships(),
            query=query,
            location=location,
            stipend=stipend,
        )
