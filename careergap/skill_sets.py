from __future__ import annotations

from typing import Sequence

from careergap.catalog import SkillCatalog
from careergap.classification import names_overlap
from careergap.models import MissingSkill, Skill, SkillToImprove, TargetRequirements

TARGET_PROFICIENCY = 4

BASE_IMPORTANCE = 5
CORE_SKILL_BONUS = 3
LEVEL_SKILL_BONUS = 2
TECHNICAL_BONUS = 1
MAX_IMPORTANCE = 10

BASE_LEARNING_HOURS = {
    "beginner": 40,
    "intermediate": 60,
    "advanced": 100,
}
# Checked in order; a later match overrides an earlier one.
LEARNING_HOUR_MULTIPLIERS = (
    ("programming", 1.5),
    ("machine learning", 2.0),
    ("system design", 1.8),
    ("leadership", 1.2),
    ("communication", 0.8),
    ("project management", 1.0),
)

TECHNICAL_KEYWORDS = (
    "programming",
    "javascript",
    "python",
    "java",
    "react",
    "sql",
    "aws",
    "docker",
    "kubernetes",
    "machine learning",
    "ai",
)
SOFT_KEYWORDS = ("leadership", "communication", "management", "teamwork", "presentation")


def categorize_skill(skill_name: str, catalog: SkillCatalog | None = None) -> str:
    if catalog is not None:
        entry = catalog.find(skill_name)
        if entry is not None:
            return entry.category

    lowered = skill_name.lower()
    if any(keyword in lowered for keyword in TECHNICAL_KEYWORDS):
        return "technical"
    if any(keyword in lowered for keyword in SOFT_KEYWORDS):
        return "soft"
    return "domain"


def estimate_learning_hours(skill_name: str, level: str = "beginner") -> int:
    lowered = skill_name.lower()
    multiplier = 1.0
    for keyword, value in LEARNING_HOUR_MULTIPLIERS:
        if keyword in lowered:
            multiplier = value
    return int(round(BASE_LEARNING_HOURS[level] * multiplier))


def calculate_skill_importance(
    skill_name: str, requirements: TargetRequirements, catalog: SkillCatalog | None = None
) -> int:
    importance = BASE_IMPORTANCE
    if skill_name in requirements.core_skills:
        importance += CORE_SKILL_BONUS
    if skill_name in requirements.level_specific_skills:
        importance += LEVEL_SKILL_BONUS
    if categorize_skill(skill_name, catalog) == "technical":
        importance += TECHNICAL_BONUS
    return min(importance, MAX_IMPORTANCE)


# A current skill covers a requirement when either lower-cased name contains the other.
def _first_covered_requirement(skill: Skill, requirements: TargetRequirements) -> str | None:
    for required in requirements.all_skills:
        if names_overlap(skill.name, required):
            return required
    return None


def identify_missing_skills(
    current_skills: Sequence[Skill],
    requirements: TargetRequirements,
    catalog: SkillCatalog | None = None,
) -> list[MissingSkill]:
    missing = [
        MissingSkill(
            name=required,
            importance=calculate_skill_importance(required, requirements, catalog),
            category=categorize_skill(required, catalog),
            estimated_learning_hours=estimate_learning_hours(required, "beginner"),
        )
        for required in requirements.all_skills
        if not any(names_overlap(skill.name, required) for skill in current_skills)
    ]
    return sorted(missing, key=lambda item: item.importance, reverse=True)


def identify_skills_to_improve(
    current_skills: Sequence[Skill],
    requirements: TargetRequirements,
    catalog: SkillCatalog | None = None,
) -> list[SkillToImprove]:
    to_improve: list[SkillToImprove] = []
    for skill in current_skills:
        if skill.proficiency >= TARGET_PROFICIENCY:
            continue
        required = _first_covered_requirement(skill, requirements)
        if required is None:
            continue
        to_improve.append(
            SkillToImprove(
                name=skill.name,
                category=skill.category,
                proficiency=skill.proficiency,
                years_experience=skill.years_experience,
                importance=calculate_skill_importance(required, requirements, catalog),
                target_proficiency=TARGET_PROFICIENCY,
                improvement_needed=TARGET_PROFICIENCY - skill.proficiency,
                estimated_learning_hours=estimate_learning_hours(skill.name, "intermediate"),
            )
        )
    return sorted(to_improve, key=lambda item: item.improvement_needed, reverse=True)


def identify_strength_skills(
    current_skills: Sequence[Skill], requirements: TargetRequirements
) -> list[Skill]:
    strengths = [
        skill
        for skill in current_skills
        if skill.proficiency >= TARGET_PROFICIENCY
        and _first_covered_requirement(skill, requirements) is not None
    ]
    return sorted(strengths, key=lambda skill: skill.proficiency, reverse=True)
