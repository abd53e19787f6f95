from __future__ import annotations

from careergap.catalog import LearningResourceCatalog
from careergap.learning_path import (
    LearningPathGenerator,
    build_skill_milestones,
    find_learning_resources,
)
from careergap.models import Skill, TargetRequirements


def _requirements(core: list[str]) -> TargetRequirements:
    return TargetRequirements(core_skills=core, level_specific_skills=[], responsibilities=[])


def test_modules_are_capped_and_ordered_by_priority(reference):
    core = [f"negotiation {i}" for i in range(7)] + ["python"]
    current = [Skill(name="Python", category="technical", proficiency=2, years_experience=1)]
    modules = LearningPathGenerator(reference.resources, reference.skills).generate(current, _requirements(core))

    assert len(modules) == 6
    assert [m.level for m in modules].count("beginner") == 5
    assert modules[0].skill_name == "Python"
    assert modules[0].level == "intermediate"
    priorities = [m.priority for m in modules]
    assert priorities == sorted(priorities, reverse=True)


def test_improve_modules_limited_to_three(reference):
    current = [
        Skill(name=name, category="technical", proficiency=1, years_experience=1)
        for name in ("Python", "SQL", "Docker", "Figma")
    ]
    requirements = _requirements(["python", "sql", "docker", "figma"])
    modules = LearningPathGenerator(reference.resources).generate(current, requirements)
    assert len(modules) == 3
    assert {m.level for m in modules} == {"intermediate"}


def test_resource_lookup_prefers_requested_level(reference):
    resources = find_learning_resources("Python", "intermediate", reference.resources)
    assert [r.title for r in resources] == ["Python In Depth"]


def test_resource_lookup_falls_back_to_beginner_and_caps(reference):
    resources = find_learning_resources("docker", "intermediate", reference.resources)
    assert len(resources) == 5
    assert resources[0].title == "Docker Lesson 1"


def test_generic_resources_when_catalog_has_nothing():
    resources = find_learning_resources("Kotlin", "beginner", LearningResourceCatalog())
    assert [r.type for r in resources] == ["course", "documentation", "practice"]
    assert resources[0].title == "Kotlin beginner Course"
    assert resources[0].url.startswith("https://www.coursera.org/search?query=Kotlin")


def test_module_templates(reference):
    generator = LearningPathGenerator(reference.resources)
    beginner = generator.build_module("SQL", "beginner", 40, 9)
    intermediate = generator.build_module("SQL", "intermediate", None, None)

    assert [m.id for m in beginner.milestones] == [1, 2, 3]
    assert intermediate.milestones[-1].title == "Advanced SQL Techniques"
    assert [a.type for a in beginner.assessments] == ["quiz", "project"]
    assert beginner.assessments[0].passing_score == 80
    assert intermediate.estimated_hours == 40
    assert intermediate.priority == 5


def test_advanced_level_gets_four_milestones():
    assert len(build_skill_milestones("Go", "advanced")) == 4
