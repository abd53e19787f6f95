from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from careergap.config import load_settings
from careergap.models import SKILL_CATEGORIES, LearningResource, RoleLevel, RoleProfile

SKILL_CATALOG_FILE = "skill_catalog.json"
ROLE_PROFILES_FILE = "role_profiles.json"
LEARNING_RESOURCES_FILE = "learning_resources.json"


@dataclass(frozen=True)
class CatalogSkill:
    name: str
    category: str
    aliases: tuple[str, ...]

    def surface_forms(self) -> tuple[str, ...]:
        """Lower-cased aliases, or the canonical name when no alias is declared."""
        forms = self.aliases or (self.name,)
        return tuple(form.lower() for form in forms)


@dataclass(frozen=True)
class SkillCatalog:
    skills: tuple[CatalogSkill, ...]

    def find(self, name: str) -> CatalogSkill | None:
        """Exact lookup by canonical name or alias, case-insensitive."""
        needle = name.strip().lower()
        for skill in self.skills:
            if skill.name.lower() == needle or needle in skill.surface_forms():
                return skill
        return None


@dataclass(frozen=True)
class CareerLevel:
    id: str
    name: str
    years_range: tuple[int, int]
    description: str


@dataclass(frozen=True)
class RoleCatalog:
    roles: tuple[RoleProfile, ...]
    career_levels: tuple[CareerLevel, ...] = ()

    @property
    def role_ids(self) -> list[str]:
        return [role.id for role in self.roles]

    def get(self, role_id: str) -> RoleProfile | None:
        for role in self.roles:
            if role.id == role_id:
                return role
        return None


@dataclass(frozen=True)
class LearningResourceCatalog:
    resources: dict[str, dict[str, tuple[LearningResource, ...]]] = field(default_factory=dict)

    def lookup(self, skill_name: str, level: str) -> tuple[LearningResource, ...]:
        by_level = self.resources.get(skill_name.lower())
        if not by_level:
            return ()
        return by_level.get(level) or by_level.get("beginner") or ()


@dataclass(frozen=True)
class ReferenceData:
    skills: SkillCatalog
    roles: RoleCatalog
    resources: LearningResourceCatalog


def _read_json(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def skill_catalog_from_dict(raw: dict) -> SkillCatalog:
    entries: list[CatalogSkill] = []
    for category in SKILL_CATEGORIES:
        for item in raw.get(category, []):
            entries.append(
                CatalogSkill(
                    name=item["name"],
                    category=category,
                    aliases=tuple(item.get("aliases", [])),
                )
            )
    unknown = set(raw) - set(SKILL_CATEGORIES)
    if unknown:
        logger.warning(f"Ignoring unknown skill categories: {sorted(unknown)}")
    return SkillCatalog(skills=tuple(entries))


def _role_level_from_dict(item: dict) -> RoleLevel:
    salary = item.get("salary_range")
    return RoleLevel(
        title=item["title"],
        skills=tuple(item.get("skills", [])),
        responsibilities=tuple(item.get("responsibilities", [])),
        salary_range=(int(salary[0]), int(salary[1])) if salary else None,
    )


def role_catalog_from_dict(raw: dict) -> RoleCatalog:
    roles = tuple(
        RoleProfile(
            id=item["id"],
            name=item.get("name", item["id"]),
            title_keywords=tuple(item.get("title_keywords", [])),
            required_skills=tuple(item.get("required_skills", [])),
            responsibility_verbs=tuple(item.get("responsibility_verbs", [])),
            levels={
                level_id: _role_level_from_dict(level)
                for level_id, level in item.get("levels", {}).items()
            },
            base_salary=item.get("base_salary"),
        )
        for item in raw.get("roles", [])
    )
    levels = tuple(
        CareerLevel(
            id=level_id,
            name=level["name"],
            years_range=(int(level["years_range"][0]), int(level["years_range"][1])),
            description=level.get("description", ""),
        )
        for level_id, level in raw.get("career_levels", {}).items()
    )
    return RoleCatalog(roles=roles, career_levels=levels)


def resource_catalog_from_dict(raw: dict) -> LearningResourceCatalog:
    resources: dict[str, dict[str, tuple[LearningResource, ...]]] = {}
    for skill_name, by_level in raw.items():
        resources[skill_name.lower()] = {
            level: tuple(
                LearningResource(
                    type=item["type"],
                    title=item["title"],
                    provider=item.get("provider", ""),
                    duration=item.get("duration", ""),
                    cost=item.get("cost", ""),
                    url=item.get("url", ""),
                    rating=float(item.get("rating", 0.0)),
                    description=item.get("description", ""),
                )
                for item in items
            )
            for level, items in by_level.items()
        }
    return LearningResourceCatalog(resources=resources)


def load_reference_data(data_dir: Path | None = None) -> ReferenceData:
    """
    Load the three reference catalogs from a data directory.

    Args:
        data_dir: Directory holding the JSON catalogs; defaults to
            CAREERGAP_DATA_DIR or the data shipped with the package
    """
    data_dir = data_dir or load_settings().data_dir
    logger.debug(f"Loading reference data from {data_dir}")
    data = ReferenceData(
        skills=skill_catalog_from_dict(_read_json(data_dir / SKILL_CATALOG_FILE)),
        roles=role_catalog_from_dict(_read_json(data_dir / ROLE_PROFILES_FILE)),
        resources=resource_catalog_from_dict(_read_json(data_dir / LEARNING_RESOURCES_FILE)),
    )
    logger.debug(
        f"Loaded {len(data.skills.skills)} skills, {len(data.roles.roles)} roles, "
        f"{len(data.resources.resources)} resource entries"
    )
    return data
