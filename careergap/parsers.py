from __future__ import annotations

import re

from careergap.catalog import CatalogSkill, SkillCatalog
from careergap.models import Skill

# Evaluated in order; the first tier whose keyword sits next to a skill alias wins.
PROFICIENCY_RULES: tuple[tuple[tuple[str, ...], int], ...] = (
    (("expert", "advanced", "lead", "architect", "senior"), 5),
    (("experienced", "proficient", "skilled"), 4),
    (("basic", "beginner", "learning", "familiar"), 2),
)
DEFAULT_PROFICIENCY = 3
DEFAULT_YEARS = 1

YEARS_PATTERN = re.compile(r"(\d+)\s*(?:years?|yrs?)\b", re.IGNORECASE)


def _is_adjacent(lowered: str, keyword: str, form: str) -> bool:
    return f"{keyword} {form}" in lowered or f"{form} {keyword}" in lowered


def estimate_proficiency(
    lowered: str,
    forms: tuple[str, ...],
    rules: tuple[tuple[tuple[str, ...], int], ...] = PROFICIENCY_RULES,
) -> int:
    for keywords, level in rules:
        if any(_is_adjacent(lowered, keyword, form) for keyword in keywords for form in forms):
            return level
    return DEFAULT_PROFICIENCY


def estimate_years_experience(text: str) -> int:
    # Document-wide maximum, not per skill.
    years = [int(match) for match in YEARS_PATTERN.findall(text)]
    return max([*years, DEFAULT_YEARS])


class SkillExtractor:
    """Detects catalog skills in résumé text by alias substring matching."""

    def __init__(self, catalog: SkillCatalog, rules=PROFICIENCY_RULES):
        self.catalog = catalog
        self.rules = rules

    def _forms(self, entry: CatalogSkill) -> tuple[str, ...]:
        forms = entry.surface_forms()
        name = entry.name.lower()
        return forms if name in forms else (name, *forms)

    def extract(self, text: str | None) -> tuple[Skill, ...]:
        if not text or not text.strip():
            return ()

        lowered = text.lower()
        years = estimate_years_experience(text)
        seen: set[str] = set()
        skills: list[Skill] = []
        for entry in self.catalog.skills:
            key = entry.name.lower()
            if key in seen:
                continue
            if not any(alias in lowered for alias in entry.surface_forms()):
                continue
            seen.add(key)
            skills.append(
                Skill(
                    name=entry.name,
                    category=entry.category,
                    proficiency=estimate_proficiency(lowered, self._forms(entry), self.rules),
                    years_experience=years,
                )
            )
        return tuple(skills)
