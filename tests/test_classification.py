from __future__ import annotations

import pytest

from careergap.catalog import RoleCatalog
from careergap.classification import RoleClassifier, extract_title_lines, is_likely_job_title
from careergap.models import Skill


def _skill(name: str) -> Skill:
    return Skill(name=name, category="technical", proficiency=3, years_experience=1)


def test_scores_combine_titles_skills_and_verbs(reference):
    text = "Backend Engineer at Foo\nWe deploy and debug services"
    result = RoleClassifier(reference.roles).classify(text, [_skill("Python"), _skill("SQL")])
    assert result.primary_role == "backend-engineer"
    assert result.scores == {"backend-engineer": 9, "designer": 0, "data-analyst": 2}
    assert result.confidence == pytest.approx(0.9)
    assert result.alternative_roles == ["data-analyst", "designer"]


def test_all_zero_tie_picks_first_declared_role(reference):
    result = RoleClassifier(reference.roles).classify("hello world", [])
    assert result.primary_role == "backend-engineer"
    assert result.confidence == 0.0
    assert result.alternative_roles == ["designer", "data-analyst"]


def test_confidence_is_clamped_to_one(reference):
    text = "Senior Backend Engineer\nSoftware Engineer\ndeploy debug"
    skills = [_skill("Python"), _skill("SQL"), _skill("Docker")]
    result = RoleClassifier(reference.roles).classify(text, skills)
    assert result.scores["backend-engineer"] > 10
    assert result.confidence == 1.0


def test_skill_match_is_mutual_substring(reference):
    result = RoleClassifier(reference.roles).classify("", [_skill("PostgreSQL")])
    assert result.scores["data-analyst"] == 2


def test_title_lines_need_title_noun_and_short_length():
    assert is_likely_job_title("Staff Software Engineer")
    assert not is_likely_job_title("Acme Corporation")
    assert not is_likely_job_title("engineer " * 20)
    assert extract_title_lines("Lead Designer\nrandom line\n  Data Analyst  ") == [
        "Lead Designer",
        "Data Analyst",
    ]


def test_empty_catalog_is_rejected():
    with pytest.raises(ValueError):
        RoleClassifier(RoleCatalog(roles=()))
