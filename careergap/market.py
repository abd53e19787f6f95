from __future__ import annotations

from typing import Sequence

from careergap.catalog import RoleCatalog
from careergap.models import (
    ExperienceSummary,
    MarketPosition,
    MarketRecommendation,
    RoleClassification,
    SalaryRange,
    Skill,
)

# Illustrative heuristics, not live market data.
COMPETITIVENESS_WEIGHTS = {
    "skills": 0.4,
    "experience": 0.3,
    "leadership": 0.3,
}
SKILL_SATURATION = 15
YEARS_SATURATION = 10
LEADERSHIP_SATURATION = 5

DEFAULT_BASE_SALARY = 60000
EXPERIENCE_SALARY_STEP = 0.1
SALARY_MIN_FACTOR = 0.8
SALARY_MAX_FACTOR = 1.3

HIGH_DEMAND_ROLES = ("software-engineer", "data-scientist", "cybersecurity-specialist")
HIGH_DEMAND_SKILLS = ("python", "javascript", "react", "aws", "machine learning")
HIGH_DEMAND_SKILL_THRESHOLD = 3


def _saturate(value: float, ceiling: float) -> float:
    return min(value / ceiling, 1.0)


def calculate_competitiveness(skills: Sequence[Skill], experience: ExperienceSummary) -> float:
    return (
        COMPETITIVENESS_WEIGHTS["skills"] * _saturate(len(skills), SKILL_SATURATION)
        + COMPETITIVENESS_WEIGHTS["experience"] * _saturate(experience.total_years, YEARS_SATURATION)
        + COMPETITIVENESS_WEIGHTS["leadership"]
        * _saturate(experience.leadership_indicator_count, LEADERSHIP_SATURATION)
    )


def estimate_salary_range(base_salary: int | None, total_years: int) -> SalaryRange:
    base = (base_salary or DEFAULT_BASE_SALARY) * (1 + EXPERIENCE_SALARY_STEP * total_years)
    return SalaryRange(
        min=int(round(base * SALARY_MIN_FACTOR)),
        max=int(round(base * SALARY_MAX_FACTOR)),
        median=int(round(base)),
    )


def count_high_demand_skills(skills: Sequence[Skill]) -> int:
    return sum(
        1
        for skill in skills
        if any(demand in skill.name.lower() for demand in HIGH_DEMAND_SKILLS)
    )


def assess_demand_level(role_id: str, skills: Sequence[Skill]) -> str:
    in_demand_role = role_id in HIGH_DEMAND_ROLES
    in_demand_skills = count_high_demand_skills(skills) >= HIGH_DEMAND_SKILL_THRESHOLD
    if in_demand_role and in_demand_skills:
        return "high"
    if in_demand_role or in_demand_skills:
        return "medium"
    return "low"


def build_market_recommendations(
    classification: RoleClassification, skills: Sequence[Skill], experience: ExperienceSummary
) -> list[MarketRecommendation]:
    recommendations: list[MarketRecommendation] = []
    if len(skills) < 10:
        recommendations.append(
            MarketRecommendation(
                type="skill-development",
                priority="high",
                message="Expand your skill set to increase market competitiveness",
            )
        )
    if experience.total_years >= 3 and experience.leadership_indicator_count < 2:
        recommendations.append(
            MarketRecommendation(
                type="leadership",
                priority="medium",
                message="Consider taking on leadership responsibilities to advance your career",
            )
        )
    if classification.confidence < 0.7:
        recommendations.append(
            MarketRecommendation(
                type="specialization",
                priority="medium",
                message="Focus on developing expertise in a specific domain",
            )
        )
    return recommendations


class MarketPositionEstimator:
    def __init__(self, roles: RoleCatalog):
        self.roles = roles

    def estimate(
        self,
        classification: RoleClassification,
        skills: Sequence[Skill],
        experience: ExperienceSummary,
    ) -> MarketPosition:
        role = self.roles.get(classification.primary_role)
        return MarketPosition(
            competitiveness=calculate_competitiveness(skills, experience),
            salary_range=estimate_salary_range(
                role.base_salary if role else None, experience.total_years
            ),
            demand_level=assess_demand_level(classification.primary_role, skills),
            recommendations=build_market_recommendations(classification, skills, experience),
        )
