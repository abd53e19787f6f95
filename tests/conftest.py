from __future__ import annotations

import pytest

from careergap.catalog import (
    ReferenceData,
    resource_catalog_from_dict,
    role_catalog_from_dict,
    skill_catalog_from_dict,
)
from careergap.models import (
    CareerAssessment,
    MarketPosition,
    SalaryRange,
    Skill,
)

SKILLS = {
    "technical": [
        {"name": "Python", "aliases": ["python"]},
        {"name": "JavaScript", "aliases": ["javascript", "node.js"]},
        {"name": "SQL", "aliases": ["sql", "postgresql"]},
        {"name": "Docker", "aliases": ["docker"]},
    ],
    "soft": [
        {"name": "Leadership", "aliases": ["leadership"]},
        {"name": "Communication", "aliases": ["communication"]},
    ],
    "tools": [
        {"name": "Figma", "aliases": ["figma"]},
    ],
}

ROLES = {
    "career_levels": {
        "entry": {"name": "Entry Level", "years_range": [0, 2]},
        "senior": {"name": "Senior Level", "years_range": [5, 8]},
    },
    "roles": [
        {
            "id": "backend-engineer",
            "name": "Backend Engineer",
            "base_salary": 100000,
            "title_keywords": ["backend engineer", "software engineer"],
            "required_skills": ["python", "sql", "docker"],
            "responsibility_verbs": ["deploy", "debug"],
            "levels": {
                "senior": {
                    "title": "Senior Backend Engineer",
                    "skills": ["system design"],
                    "responsibilities": ["architecture reviews"],
                    "salary_range": [120000, 150000],
                }
            },
        },
        {
            "id": "designer",
            "name": "Designer",
            "title_keywords": ["designer"],
            "required_skills": ["figma", "communication"],
            "responsibility_verbs": ["design", "prototype"],
        },
        {
            "id": "data-analyst",
            "name": "Data Analyst",
            "title_keywords": ["data analyst"],
            "required_skills": ["sql", "excel"],
            "responsibility_verbs": ["analyze"],
        },
    ],
}


def _resource(title: str) -> dict:
    return {
        "type": "course",
        "title": title,
        "provider": "Test Provider",
        "duration": "2 weeks",
        "cost": "Free",
        "url": "",
        "rating": 4.0,
    }


RESOURCES = {
    "python": {
        "beginner": [_resource("Python Basics")],
        "intermediate": [_resource("Python In Depth")],
    },
    "docker": {
        "beginner": [_resource(f"Docker Lesson {i}") for i in range(1, 7)],
    },
}


@pytest.fixture
def reference() -> ReferenceData:
    return ReferenceData(
        skills=skill_catalog_from_dict(SKILLS),
        roles=role_catalog_from_dict(ROLES),
        resources=resource_catalog_from_dict(RESOURCES),
    )


def make_assessment(skills: list[Skill], level: str = "mid") -> CareerAssessment:
    return CareerAssessment(
        current_role="backend-engineer",
        experience_level=level,
        skills=tuple(skills),
        strengths=[],
        market_position=MarketPosition(
            competitiveness=0.5,
            salary_range=SalaryRange(min=80000, max=130000, median=100000),
            demand_level="medium",
            recommendations=[],
        ),
        confidence=0.5,
    )


@pytest.fixture
def assessment_factory():
    return make_assessment
