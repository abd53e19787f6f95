from __future__ import annotations

import pytest

from careergap.catalog import load_reference_data
from careergap.errors import UnknownRoleError
from careergap.gap_analysis import (
    SkillsGapAnalyzer,
    build_milestones,
    prioritize_skills,
    suggest_target_level,
)
from careergap.models import MissingSkill, Skill, TargetRequirements
from careergap.skill_sets import (
    calculate_skill_importance,
    categorize_skill,
    estimate_learning_hours,
)


def _skill(name: str, proficiency: int = 3) -> Skill:
    return Skill(name=name, category="technical", proficiency=proficiency, years_experience=2)


def _missing(name: str, importance: int, hours: int = 40) -> MissingSkill:
    return MissingSkill(name=name, importance=importance, category="domain", estimated_learning_hours=hours)


def test_unknown_role_raises(reference, assessment_factory):
    analyzer = SkillsGapAnalyzer(reference)
    with pytest.raises(UnknownRoleError) as excinfo:
        analyzer.analyze(assessment_factory([_skill("Python")]), "astronaut")
    assert excinfo.value.role_id == "astronaut"
    assert "backend-engineer" in excinfo.value.known_roles


def test_level_requirements_are_merged(reference):
    requirements = SkillsGapAnalyzer(reference).resolve_requirements("backend-engineer", "senior")
    assert requirements.core_skills == ["python", "sql", "docker"]
    assert requirements.level_specific_skills == ["system design"]
    assert requirements.responsibilities == ["deploy", "debug", "architecture reviews"]
    assert requirements.salary_range == (120000, 150000)


def test_undefined_level_uses_core_skills_only(reference):
    requirements = SkillsGapAnalyzer(reference).resolve_requirements("designer", "senior")
    assert requirements.level_specific_skills == []
    assert requirements.salary_range is None


def test_suggested_level_follows_progression():
    assert suggest_target_level("entry") == "mid"
    assert suggest_target_level("lead") == "executive"
    assert suggest_target_level("executive") == "executive"
    assert suggest_target_level("unknown") == "mid"


def test_full_gap_analysis(reference, assessment_factory):
    assessment = assessment_factory([_skill("Python", proficiency=3)], level="mid")
    analysis = SkillsGapAnalyzer(reference).analyze(assessment, "backend-engineer", "senior")

    assert analysis.target_level == "senior"
    assert [(m.name, m.importance, m.estimated_learning_hours) for m in analysis.missing_skills] == [
        ("sql", 9, 40),
        ("docker", 9, 40),
        ("system design", 7, 72),
    ]
    assert len(analysis.skills_to_improve) == 1
    improve = analysis.skills_to_improve[0]
    assert (improve.name, improve.importance, improve.improvement_needed) == ("Python", 9, 1)
    assert improve.target_proficiency == 4
    assert improve.estimated_learning_hours == 60
    assert analysis.strength_skills == []

    assert analysis.timeline.total_hours == 212
    assert analysis.timeline.weeks == 22
    assert analysis.timeline.months == 6
    assert [p.name for p in analysis.timeline.phases] == ["Foundation Phase", "Development Phase"]
    assert analysis.timeline.phases[0].duration_weeks == 4

    assert [s.name for s in analysis.priority.high] == ["sql", "docker", "Python"]
    assert [s.name for s in analysis.priority.medium] == ["system design"]
    assert analysis.priority.low == []

    assert [(m.id, m.title, m.estimated_weeks) for m in analysis.milestones] == [
        (1, "Foundation Skills", 4),
        (2, "Intermediate Competencies", 2),
    ]


def test_no_target_level_suggests_one_but_uses_core_requirements(reference, assessment_factory):
    analysis = SkillsGapAnalyzer(reference).analyze(
        assessment_factory([_skill("Python")], level="entry"), "backend-engineer"
    )
    assert analysis.target_level == "mid"
    assert "system design" not in [m.name for m in analysis.missing_skills]


def test_fully_qualified_candidate_has_no_gap(reference, assessment_factory):
    skills = [_skill("Python", 5), _skill("SQL", 5), _skill("Docker", 5), _skill("Figma", 5)]
    analysis = SkillsGapAnalyzer(reference).analyze(assessment_factory(skills), "backend-engineer")

    assert analysis.missing_skills == []
    assert analysis.skills_to_improve == []
    assert analysis.milestones == []
    assert analysis.learning_path == []
    assert analysis.timeline.total_hours == 0
    assert [s.name for s in analysis.strength_skills] == ["Python", "SQL", "Docker"]


def test_missing_and_strength_sets_are_disjoint(reference, assessment_factory):
    skills = [_skill("Python", 5), _skill("Docker", 2), _skill("Communication", 4)]
    for role in ("backend-engineer", "designer", "data-analyst"):
        analysis = SkillsGapAnalyzer(reference).analyze(assessment_factory(skills), role, "senior")
        missing = {m.name.lower() for m in analysis.missing_skills}
        strengths = {s.name.lower() for s in analysis.strength_skills}
        assert not missing & strengths
        assert analysis.timeline.total_hours == sum(
            m.estimated_learning_hours for m in analysis.missing_skills
        ) + sum(s.estimated_learning_hours for s in analysis.skills_to_improve)
        for entry in [*analysis.missing_skills, *analysis.skills_to_improve]:
            assert 0 <= entry.importance <= 10


def test_priority_tiers_split_three_five_rest():
    missing = [_missing(f"skill {i}", importance=10 - i % 4) for i in range(10)]
    tiers = prioritize_skills(missing, [])
    assert (len(tiers.high), len(tiers.medium), len(tiers.low)) == (3, 5, 2)
    scores = [item.priority_score for item in tiers.ordered()]
    assert scores == sorted(scores, reverse=True)


def test_milestone_ids_are_contiguous():
    missing = [_missing(f"skill {i}", importance=9) for i in range(9)]
    milestones = build_milestones(prioritize_skills(missing, []))
    assert [m.id for m in milestones] == [1, 2, 3]
    assert [m.title for m in milestones] == [
        "Foundation Skills",
        "Intermediate Competencies",
        "Advanced Specialization",
    ]
    assert milestones[0].estimated_weeks == 3


def test_learning_hour_multipliers():
    assert estimate_learning_hours("SQL") == 40
    assert estimate_learning_hours("machine learning", "beginner") == 80
    assert estimate_learning_hours("Python programming", "intermediate") == 90
    assert estimate_learning_hours("communication", "advanced") == 80
    assert estimate_learning_hours("team leadership", "beginner") == 48


def test_importance_and_category(reference):
    requirements = TargetRequirements(
        core_skills=["python", "negotiation"],
        level_specific_skills=["python", "budgeting"],
        responsibilities=[],
    )
    assert calculate_skill_importance("python", requirements, reference.skills) == 10
    assert calculate_skill_importance("negotiation", requirements) == 8
    assert calculate_skill_importance("budgeting", requirements) == 7
    assert categorize_skill("figma", reference.skills) == "tools"
    assert categorize_skill("people management") == "soft"
    assert categorize_skill("valuation") == "domain"


def test_catalog_category_takes_precedence_over_keywords():
    requirements = TargetRequirements(core_skills=["git"], level_specific_skills=[], responsibilities=[])
    catalog = load_reference_data().skills
    assert categorize_skill("git", catalog) == "technical"
    assert categorize_skill("git") == "domain"
    assert calculate_skill_importance("git", requirements, catalog) == 9
    assert calculate_skill_importance("git", requirements) == 8
