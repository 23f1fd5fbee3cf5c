"""Tests for the skill gap analyzer."""

import json
import random

from copilot.services.skill_gap_service import (
    DEFAULT_ROLE,
    ROLE_SKILL_REQUIREMENTS,
    SkillGapAnalyzer,
    build_learning_plan,
    load_role_requirements,
    proficiency_level,
)


def test_devops_with_linux():
    report = SkillGapAnalyzer().analyze(["Linux"], "DevOps Engineer", rng=random.Random(0))

    assert report.target_role == "DevOps Engineer"
    assert [s.name for s in report.current_skills] == ["Linux"]
    assert [s.name for s in report.missing_skills] == ["Docker", "Kubernetes", "AWS", "CI/CD"]
    assert [s.priority for s in report.missing_skills] == ["High", "High", "High", "Medium"]
    assert all(s.time_to_learn == "2-4 weeks" for s in report.missing_skills)


def test_unknown_role_falls_back_to_default_structure():
    analyzer = SkillGapAnalyzer()
    skills = ["React", "Git"]
    unknown = analyzer.analyze(skills, "Astronaut", rng=random.Random(5))
    default = analyzer.analyze(skills, DEFAULT_ROLE, rng=random.Random(5))

    assert unknown.target_role == "Astronaut"
    assert unknown.current_skills == default.current_skills
    assert unknown.missing_skills == default.missing_skills
    assert unknown.learning_plan == default.learning_plan


def test_current_skills_use_student_order_without_duplicates():
    report = SkillGapAnalyzer().analyze(
        ["Git", "React", "Git", "Cooking"], "Full-Stack Developer", rng=random.Random(1)
    )
    assert [s.name for s in report.current_skills] == ["Git", "React"]


def test_proficiency_is_bounded_and_labelled():
    analyzer = SkillGapAnalyzer()
    rng = random.Random(11)
    for _ in range(30):
        report = analyzer.analyze(["Docker", "Linux", "AWS"], "DevOps Engineer", rng=rng)
        for skill in report.current_skills:
            assert 60 <= skill.proficiency <= 99
            assert skill.level == proficiency_level(skill.proficiency)


def test_proficiency_level_bands():
    assert proficiency_level(60) == "Intermediate"
    assert proficiency_level(75) == "Advanced"
    assert proficiency_level(99) == "Expert"


def test_learning_plan_covers_first_four_missing_skills():
    report = SkillGapAnalyzer().analyze([], "Data Scientist", rng=random.Random(0))
    weeks = report.learning_plan.weeks

    assert [w.focus for w in weeks] == ROLE_SKILL_REQUIREMENTS["Data Scientist"][:4]
    assert [w.title for w in weeks[:2]] == ["Week 1-2: Python", "Week 2-3: Machine Learning"]
    assert len(weeks[0].tasks) == 4
    assert all("Python" in task for task in weeks[0].tasks)


def test_learning_plan_has_no_placeholder_weeks():
    assert len(build_learning_plan(["AWS"]).weeks) == 1
    assert build_learning_plan([]).weeks == []


def test_no_missing_skills():
    report = SkillGapAnalyzer().analyze(
        ["Docker", "Kubernetes", "AWS", "CI/CD", "Linux"], "DevOps Engineer", rng=random.Random(0)
    )
    assert report.missing_skills == []
    assert len(report.current_skills) == 5


def test_report_serialises_with_camel_case_keys():
    report = SkillGapAnalyzer().analyze(["Linux"], "DevOps Engineer", rng=random.Random(0))
    data = report.model_dump(by_alias=True)
    assert set(data) == {"targetRole", "currentSkills", "missingSkills", "learningPlan"}
    assert "timeToLearn" in data["missingSkills"][0]


def test_load_role_requirements_merges_file(tmp_path):
    path = tmp_path / "roles.json"
    path.write_text(json.dumps({
        "Cloud Engineer": ["AWS", "Terraform"],
        "DevOps Engineer": ["Docker"],
    }))

    roles = load_role_requirements(str(path))
    assert roles["Cloud Engineer"] == ["AWS", "Terraform"]
    assert roles["DevOps Engineer"] == ["Docker"]
    assert roles["Data Scientist"] == ROLE_SKILL_REQUIREMENTS["Data Scientist"]


def test_load_role_requirements_ignores_bad_file(tmp_path):
    bad = tmp_path / "roles.json"
    bad.write_text("not json")

    assert load_role_requirements(str(bad)) == ROLE_SKILL_REQUIREMENTS
    assert load_role_requirements(str(tmp_path / "missing.json")) == ROLE_SKILL_REQUIREMENTS
    assert load_role_requirements(None) == ROLE_SKILL_REQUIREMENTS


def test_unknown_default_role_reverts_to_builtin_default():
    analyzer = SkillGapAnalyzer(default_role="Astronaut")
    assert analyzer.default_role == DEFAULT_ROLE
