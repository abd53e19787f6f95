from __future__ import annotations

from typing import Sequence

from loguru import logger

from careergap.catalog import ReferenceData
from careergap.classification import RoleClassifier
from careergap.experience import ExperienceAnalyzer
from careergap.market import MarketPositionEstimator
from careergap.models import CareerAssessment, ExperienceSummary, RoleClassification, Skill
from careergap.parsers import SkillExtractor

CONFIDENCE_WEIGHTS = {
    "skills": 0.4,
    "experience": 0.3,
    "role": 0.3,
}
CONFIDENT_SKILL_COUNT = 10
MAX_STRENGTHS = 5

COMMUNICATION_KEYWORDS = ("presentation", "communication", "training", "mentoring")
PROBLEM_SOLVING_KEYWORDS = ("optimization", "improvement", "solution", "innovation")


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def effective_years(experience: ExperienceSummary, skills: Sequence[Skill]) -> int:
    stated = max((skill.years_experience for skill in skills), default=0)
    return max(experience.total_years, stated)


def determine_experience_level(experience: ExperienceSummary, skills: Sequence[Skill] = ()) -> str:
    years = effective_years(experience, skills)
    leadership = experience.leadership_indicator_count
    keywords = experience.seniority_keywords

    if years >= 10 and (leadership >= 3 or "executive" in keywords):
        return "executive"
    if years >= 7 and (leadership >= 2 or "lead" in keywords):
        return "lead"
    if years >= 4 and (leadership >= 1 or "senior" in keywords):
        return "senior"
    if years >= 2:
        return "mid"
    return "entry"


def identify_strengths(skills: Sequence[Skill], experience: ExperienceSummary) -> list[str]:
    strengths: list[str] = []
    if sum(1 for skill in skills if skill.category == "technical") >= 5:
        strengths.append("Strong Technical Foundation")
    if experience.leadership_indicator_count >= 2:
        strengths.append("Leadership Experience")
    if sum(1 for skill in skills if skill.proficiency >= 4) >= 3:
        strengths.append("Domain Expertise")
    if any(
        keyword in item.lower()
        for keyword in COMMUNICATION_KEYWORDS
        for item in experience.responsibilities
    ):
        strengths.append("Communication Skills")
    if any(
        keyword in item.lower()
        for keyword in PROBLEM_SOLVING_KEYWORDS
        for item in experience.achievements
    ):
        strengths.append("Problem Solving")
    return strengths[:MAX_STRENGTHS]


def calculate_confidence(
    skills: Sequence[Skill], experience: ExperienceSummary, classification: RoleClassification
) -> float:
    skills_part = min(len(skills) / CONFIDENT_SKILL_COUNT, 1.0)
    experience_part = min(experience.total_years, 1)
    weighted = (
        CONFIDENCE_WEIGHTS["skills"] * skills_part
        + CONFIDENCE_WEIGHTS["experience"] * experience_part
        + CONFIDENCE_WEIGHTS["role"] * classification.confidence
    )
    return _clamp(weighted)


class CareerAssessmentBuilder:
    """Runs extraction, classification and market estimation for one résumé."""

    def __init__(self, reference: ReferenceData, current_year: int | None = None):
        self.skill_extractor = SkillExtractor(reference.skills)
        self.experience_analyzer = ExperienceAnalyzer(current_year=current_year)
        self.role_classifier = RoleClassifier(reference.roles)
        self.market_estimator = MarketPositionEstimator(reference.roles)

    def build(self, text: str | None) -> CareerAssessment:
        skills = self.skill_extractor.extract(text)
        experience = self.experience_analyzer.analyze(text)
        logger.debug(
            f"Extracted {len(skills)} skills, {experience.total_years} years, "
            f"{experience.leadership_indicator_count} leadership indicators"
        )

        classification = self.role_classifier.classify(text, skills)
        logger.debug(
            f"Classified as {classification.primary_role} "
            f"(confidence {classification.confidence:.2f}, alternatives {classification.alternative_roles})"
        )
        market_position = self.market_estimator.estimate(classification, skills, experience)

        return CareerAssessment(
            current_role=classification.primary_role,
            experience_level=determine_experience_level(experience, skills),
            skills=skills,
            strengths=identify_strengths(skills, experience),
            market_position=market_position,
            confidence=calculate_confidence(skills, experience, classification),
            experience=experience,
            role_classification=classification,
        )
