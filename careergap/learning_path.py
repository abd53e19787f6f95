from __future__ import annotations

from typing import Sequence

from careergap.career_connectors import search_url
from careergap.catalog import LearningResourceCatalog, SkillCatalog
from careergap.models import (
    LearningModule,
    LearningResource,
    Skill,
    SkillAssessment,
    SkillMilestone,
    TargetRequirements,
)
from careergap.skill_sets import identify_missing_skills, identify_skills_to_improve

MAX_MISSING_MODULES = 5
MAX_IMPROVE_MODULES = 3
MAX_RESOURCES = 5
DEFAULT_MODULE_HOURS = 40
DEFAULT_MODULE_PRIORITY = 5


def generic_resources(skill_name: str, level: str) -> list[LearningResource]:
    return [
        LearningResource(
            type="course",
            title=f"{skill_name} {level} Course",
            provider="Online Learning Platform",
            duration="4-6 weeks",
            cost="Free/Paid",
            url=search_url("Coursera", f"{skill_name} {level}"),
            rating=4.5,
        ),
        LearningResource(
            type="documentation",
            title=f"Official {skill_name} Documentation",
            provider="Official Docs",
            duration="Self-paced",
            cost="Free",
            url=search_url("Documentation", skill_name),
            rating=4.0,
        ),
        LearningResource(
            type="practice",
            title=f"{skill_name} Practice Projects",
            provider="GitHub",
            duration="2-4 weeks",
            cost="Free",
            url=search_url("GitHub", f"{skill_name} projects"),
            rating=4.2,
        ),
    ]


def find_learning_resources(
    skill_name: str, level: str, resources: LearningResourceCatalog
) -> list[LearningResource]:
    found = list(resources.lookup(skill_name, level))
    if not found:
        found = generic_resources(skill_name, level)
    return found[:MAX_RESOURCES]


def build_skill_milestones(skill_name: str, level: str) -> list[SkillMilestone]:
    milestones = [
        SkillMilestone(
            id=1,
            title=f"Understand {skill_name} Fundamentals",
            description=f"Learn the basic concepts and principles of {skill_name}",
            estimated_hours=10,
        ),
        SkillMilestone(
            id=2,
            title=f"Practice {skill_name} Basics",
            description="Complete hands-on exercises and simple projects",
            estimated_hours=15,
        ),
        SkillMilestone(
            id=3,
            title=f"Build {skill_name} Project",
            description=f"Create a complete project demonstrating {skill_name} skills",
            estimated_hours=15,
        ),
    ]
    if level != "beginner":
        milestones.append(
            SkillMilestone(
                id=4,
                title=f"Advanced {skill_name} Techniques",
                description="Master advanced concepts and best practices",
                estimated_hours=20,
            )
        )
    return milestones


def build_assessments(skill_name: str) -> list[SkillAssessment]:
    return [
        SkillAssessment(
            type="quiz",
            title=f"{skill_name} Knowledge Check",
            description=f"Test your understanding of {skill_name} concepts",
            questions=10,
            passing_score=80,
        ),
        SkillAssessment(
            type="project",
            title=f"{skill_name} Practical Assessment",
            description=f"Demonstrate your {skill_name} skills through a practical project",
            requirements=[f"Use {skill_name} effectively", "Follow best practices", "Document your work"],
            estimated_hours=8,
        ),
    ]


class LearningPathGenerator:
    """Builds per-skill learning modules for the biggest gaps."""

    def __init__(self, resources: LearningResourceCatalog, skills: SkillCatalog | None = None):
        self.resources = resources
        self.skills = skills

    def build_module(self, skill_name: str, level: str, hours: int | None, priority: int | None) -> LearningModule:
        return LearningModule(
            skill_name=skill_name,
            level=level,
            estimated_hours=hours or DEFAULT_MODULE_HOURS,
            priority=priority or DEFAULT_MODULE_PRIORITY,
            resources=find_learning_resources(skill_name, level, self.resources),
            milestones=build_skill_milestones(skill_name, level),
            assessments=build_assessments(skill_name),
        )

    def generate(
        self, current_skills: Sequence[Skill], requirements: TargetRequirements
    ) -> list[LearningModule]:
        missing = identify_missing_skills(current_skills, requirements, self.skills)
        to_improve = identify_skills_to_improve(current_skills, requirements, self.skills)

        modules = [
            self.build_module(item.name, "beginner", item.estimated_learning_hours, item.importance)
            for item in missing[:MAX_MISSING_MODULES]
        ]
        modules.extend(
            self.build_module(item.name, "intermediate", item.estimated_learning_hours, item.importance)
            for item in to_improve[:MAX_IMPROVE_MODULES]
        )
        return sorted(modules, key=lambda module: module.priority, reverse=True)
