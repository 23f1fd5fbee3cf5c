"""
Skill Gap Service

Compares a student's skills with the skills a target role requires and
builds a report:
- currentSkills: required skills the student already has, with a
  proficiency estimate (60-99) and a level label
- missingSkills: required skills the student lacks, in the role table's
  order, with a priority and a time-to-learn estimate
- learningPlan: one week per missing skill, first four only

Unknown roles fall back to the default role's requirements.
"""

import json
import logging
import random
from pathlib import Path
from typing import Dict, List, Optional

from copilot.schemas.schemas import (
    CurrentSkill,
    LearningPlan,
    LearningWeek,
    MissingSkill,
    SkillGapReport,
)

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "Full-Stack Developer"

# Role -> required skills, in priority order
ROLE_SKILL_REQUIREMENTS: Dict[str, List[str]] = {
    "Full-Stack Developer": ["React", "Node.js", "MongoDB", "JavaScript", "CSS", "HTML", "APIs", "Docker", "Git", "TypeScript"],
    "Frontend Developer": ["React", "JavaScript", "CSS", "HTML", "TypeScript", "Redux", "Next.js", "Tailwind CSS"],
    "Backend Developer": ["Node.js", "Python", "Java", "SQL", "MongoDB", "APIs", "Docker", "AWS", "Express"],
    "Data Scientist": ["Python", "Machine Learning", "Statistics", "SQL", "Pandas", "TensorFlow", "Scikit-learn", "Jupyter"],
    "DevOps Engineer": ["Docker", "Kubernetes", "AWS", "CI/CD", "Linux"],
    "Mobile Developer": ["React Native", "Flutter", "Swift", "Kotlin", "Firebase", "Mobile UI/UX"],
    "UI/UX Designer": ["Figma", "Adobe XD", "Sketch", "Prototyping", "User Research", "Design Systems"],
    "Product Manager": ["Product Strategy", "User Research", "Data Analysis", "Agile", "JIRA", "SQL"],
}

PROFICIENCY_MIN = 60
PROFICIENCY_MAX = 99
HIGH_PRIORITY_COUNT = 3
LEARNING_PLAN_WEEKS = 4
TIME_TO_LEARN = "2-4 weeks"


def load_role_requirements(path: Optional[str] = None) -> Dict[str, List[str]]:
    """
    Built-in role table, optionally extended from a JSON file of
    {"Role name": ["Skill", ...]}. File entries override built-ins.

    An unreadable file is logged and ignored.
    """
    roles = {role: list(skills) for role, skills in ROLE_SKILL_REQUIREMENTS.items()}
    if not path:
        return roles

    try:
        with open(Path(path), "r", encoding="utf-8") as f:
            extra = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not load role requirements from %s: %s", path, e)
        return roles

    if not isinstance(extra, dict):
        logger.warning("Role requirements file %s is not a JSON object, ignoring", path)
        return roles

    for role, skills in extra.items():
        if isinstance(skills, list):
            roles[str(role)] = [str(s) for s in skills]
    return roles


def proficiency_level(proficiency: int) -> str:
    """Coarse label for a 60-99 proficiency estimate."""
    if proficiency >= 90:
        return "Expert"
    if proficiency >= 75:
        return "Advanced"
    return "Intermediate"


def build_learning_plan(missing_skills: List[str]) -> LearningPlan:
    """One week per missing skill for the first four; no placeholder weeks."""
    weeks = []
    for index, skill in enumerate(missing_skills[:LEARNING_PLAN_WEEKS]):
        weeks.append(LearningWeek(
            title=f"Week {index + 1}-{index + 2}: {skill}",
            focus=skill,
            tasks=[
                f"Learn fundamentals of {skill}",
                f"Complete {skill} tutorials and exercises",
                f"Build a small project using {skill}",
                f"Practice {skill} concepts daily",
            ]
        ))
    return LearningPlan(weeks=weeks)


class SkillGapAnalyzer:
    """Holds the role table and produces gap reports."""

    def __init__(
        self,
        role_requirements: Optional[Dict[str, List[str]]] = None,
        default_role: str = DEFAULT_ROLE
    ):
        self.role_requirements = role_requirements or dict(ROLE_SKILL_REQUIREMENTS)
        if default_role not in self.role_requirements:
            logger.warning("Default role %r not in role table, using %r", default_role, DEFAULT_ROLE)
            default_role = DEFAULT_ROLE
        self.default_role = default_role

    def required_skills_for(self, target_role: str) -> List[str]:
        """Requirements for the role, or the default role's if unknown."""
        if target_role in self.role_requirements:
            return self.role_requirements[target_role]
        logger.info("Unknown role %r, falling back to %r", target_role, self.default_role)
        return self.role_requirements[self.default_role]

    def analyze(
        self,
        student_skills: List[str],
        target_role: str,
        rng: Optional[random.Random] = None
    ) -> SkillGapReport:
        """
        Build the gap report for one student and role.

        Args:
            student_skills: The student's skills (duplicates allowed)
            target_role: Requested role; echoed back even when unknown
            rng: Random source for proficiency estimates

        Returns:
            SkillGapReport
        """
        rng = rng or random.Random()

        # dict.fromkeys keeps first-seen order while dropping duplicates
        required = list(dict.fromkeys(self.required_skills_for(target_role)))
        required_set = set(required)
        student_set = set(student_skills)

        current = [s for s in dict.fromkeys(student_skills) if s in required_set]
        missing = [s for s in required if s not in student_set]

        current_skills = []
        for skill in current:
            proficiency = rng.randint(PROFICIENCY_MIN, PROFICIENCY_MAX)
            current_skills.append(CurrentSkill(
                name=skill,
                level=proficiency_level(proficiency),
                proficiency=proficiency
            ))

        missing_skills = [
            MissingSkill(
                name=skill,
                priority="High" if index < HIGH_PRIORITY_COUNT else "Medium",
                time_to_learn=TIME_TO_LEARN
            )
            for index, skill in enumerate(missing)
        ]

        return SkillGapReport(
            target_role=target_role,
            current_skills=current_skills,
            missing_skills=missing_skills,
            learning_plan=build_learning_plan(missing)
        )
