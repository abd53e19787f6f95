from __future__ import annotations

import math
from typing import Sequence

from loguru import logger

from careergap.catalog import ReferenceData
from careergap.errors import UnknownRoleError
from careergap.learning_path import LearningPathGenerator
from careergap.models import (
    CareerAssessment,
    LearningPhase,
    Milestone,
    MissingSkill,
    PrioritizedSkill,
    PriorityTiers,
    SkillsGapAnalysis,
    SkillToImprove,
    TargetRequirements,
    Timeline,
)
from careergap.skill_sets import (
    identify_missing_skills,
    identify_skills_to_improve,
    identify_strength_skills,
)

LEVEL_PROGRESSION = {
    "entry": "mid",
    "mid": "senior",
    "senior": "lead",
    "lead": "executive",
    "executive": "executive",
}
DEFAULT_SUGGESTED_LEVEL = "mid"

HIGH_TIER_SIZE = 3
MEDIUM_TIER_SIZE = 5

# Overall plan assumes part-time study; milestones assume full-time weeks.
STUDY_HOURS_PER_WEEK = 10
WEEKS_PER_MONTH = 4
MILESTONE_HOURS_PER_WEEK = 40

FOUNDATION_IMPORTANCE = 7
PHASE_SKILL_LIMIT = 3

MILESTONE_TEMPLATES = (
    (
        "high",
        "Foundation Skills",
        "Master the most critical skills for your target role",
        "Complete all high-priority skill requirements",
    ),
    (
        "medium",
        "Intermediate Competencies",
        "Develop supporting skills and deepen expertise",
        "Achieve proficiency in medium-priority skills",
    ),
    (
        "low",
        "Advanced Specialization",
        "Master advanced skills and develop unique expertise",
        "Complete all skill development goals",
    ),
)


def suggest_target_level(current_level: str) -> str:
    return LEVEL_PROGRESSION.get(current_level, DEFAULT_SUGGESTED_LEVEL)


def _weeks(hours: int, hours_per_week: int) -> int:
    return math.ceil(hours / hours_per_week)


def prioritize_skills(
    missing: Sequence[MissingSkill], to_improve: Sequence[SkillToImprove]
) -> PriorityTiers:
    combined = [
        PrioritizedSkill(
            name=item.name,
            kind="missing",
            importance=item.importance,
            category=item.category,
            estimated_learning_hours=item.estimated_learning_hours,
        )
        for item in missing
    ] + [
        PrioritizedSkill(
            name=item.name,
            kind="improve",
            importance=item.importance,
            category=item.category,
            estimated_learning_hours=item.estimated_learning_hours,
        )
        for item in to_improve
    ]
    ranked = sorted(combined, key=lambda item: item.priority_score, reverse=True)
    medium_end = HIGH_TIER_SIZE + MEDIUM_TIER_SIZE
    return PriorityTiers(
        high=ranked[:HIGH_TIER_SIZE],
        medium=ranked[HIGH_TIER_SIZE:medium_end],
        low=ranked[medium_end:],
    )


def build_learning_phases(
    missing: Sequence[MissingSkill], to_improve: Sequence[SkillToImprove]
) -> list[LearningPhase]:
    foundation = [item for item in missing if item.importance >= FOUNDATION_IMPORTANCE][
        :PHASE_SKILL_LIMIT
    ]
    development = [
        *[item for item in missing if item.importance < FOUNDATION_IMPORTANCE],
        *to_improve[:PHASE_SKILL_LIMIT],
    ]
    mastery = list(to_improve[PHASE_SKILL_LIMIT:])

    phases = []
    for name, items, description in (
        ("Foundation Phase", foundation, "Build essential skills required for the target role"),
        (
            "Development Phase",
            development,
            "Develop intermediate skills and improve existing competencies",
        ),
        ("Mastery Phase", mastery, "Achieve mastery and develop advanced expertise"),
    ):
        if not items:
            continue
        hours = sum(item.estimated_learning_hours for item in items)
        phases.append(
            LearningPhase(
                name=name,
                duration_weeks=_weeks(hours, MILESTONE_HOURS_PER_WEEK),
                skills=[item.name for item in items],
                description=description,
            )
        )
    return phases


def estimate_timeline(
    missing: Sequence[MissingSkill], to_improve: Sequence[SkillToImprove]
) -> Timeline:
    total_hours = sum(item.estimated_learning_hours for item in missing) + sum(
        item.estimated_learning_hours for item in to_improve
    )
    weeks = _weeks(total_hours, STUDY_HOURS_PER_WEEK)
    return Timeline(
        total_hours=total_hours,
        weeks=weeks,
        months=math.ceil(weeks / WEEKS_PER_MONTH),
        phases=build_learning_phases(missing, to_improve),
    )


def build_milestones(priority: PriorityTiers) -> list[Milestone]:
    milestones: list[Milestone] = []
    for tier, title, description, criteria in MILESTONE_TEMPLATES:
        skills = getattr(priority, tier)
        if not skills:
            continue
        hours = sum(item.estimated_learning_hours for item in skills)
        milestones.append(
            Milestone(
                id=len(milestones) + 1,
                title=title,
                description=description,
                skills=list(skills),
                estimated_weeks=_weeks(hours, MILESTONE_HOURS_PER_WEEK),
                completion_criteria=criteria,
            )
        )
    return milestones


class SkillsGapAnalyzer:
    """Compares a CareerAssessment with a target role's requirements."""

    def __init__(self, reference: ReferenceData):
        self.reference = reference
        self.learning_path_generator = LearningPathGenerator(reference.resources, reference.skills)

    def resolve_requirements(self, target_role: str, target_level: str | None = None) -> TargetRequirements:
        role = self.reference.roles.get(target_role)
        if role is None:
            raise UnknownRoleError(target_role, self.reference.roles.role_ids)

        requirements = TargetRequirements(
            core_skills=list(role.required_skills),
            level_specific_skills=[],
            responsibilities=list(role.responsibility_verbs),
        )
        level = role.levels.get(target_level) if target_level else None
        if level is not None:
            requirements.level_specific_skills = list(level.skills)
            requirements.responsibilities.extend(level.responsibilities)
            requirements.salary_range = level.salary_range
        elif target_level:
            logger.debug(f"Role {target_role} defines no level {target_level!r}; using core skills only")
        return requirements

    def analyze(
        self,
        assessment: CareerAssessment,
        target_role: str,
        target_level: str | None = None,
    ) -> SkillsGapAnalysis:
        requirements = self.resolve_requirements(target_role, target_level)
        resolved_level = target_level or suggest_target_level(assessment.experience_level)
        current_skills = assessment.skills
        catalog = self.reference.skills

        missing = identify_missing_skills(current_skills, requirements, catalog)
        to_improve = identify_skills_to_improve(current_skills, requirements, catalog)
        strengths = identify_strength_skills(current_skills, requirements)
        logger.debug(
            f"Gap vs {target_role}/{resolved_level}: {len(missing)} missing, "
            f"{len(to_improve)} to improve, {len(strengths)} strengths"
        )

        priority = prioritize_skills(missing, to_improve)
        timeline = estimate_timeline(missing, to_improve)
        milestones = build_milestones(priority)
        learning_path = self.learning_path_generator.generate(current_skills, requirements)

        return SkillsGapAnalysis(
            target_role=target_role,
            target_level=resolved_level,
            missing_skills=missing,
            skills_to_improve=to_improve,
            strength_skills=strengths,
            timeline=timeline,
            priority=priority,
            learning_path=learning_path,
            milestones=milestones,
            requirements=requirements,
        )
