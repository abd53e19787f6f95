from __future__ import annotations

from typing import Iterable

import numpy as np

from careergap.catalog import RoleCatalog
from careergap.models import RoleClassification, RoleProfile, Skill

TITLE_NOUNS = (
    "engineer",
    "developer",
    "manager",
    "analyst",
    "specialist",
    "coordinator",
    "director",
    "lead",
    "senior",
    "junior",
    "associate",
    "consultant",
    "architect",
    "designer",
    "scientist",
    "researcher",
    "administrator",
)
MAX_TITLE_LENGTH = 100

TITLE_WEIGHT = 3
SKILL_WEIGHT = 2
RESPONSIBILITY_WEIGHT = 1
CONFIDENCE_SCALE = 10.0
MAX_ALTERNATIVES = 2


def is_likely_job_title(line: str) -> bool:
    lowered = line.lower()
    return len(line) < MAX_TITLE_LENGTH and any(noun in lowered for noun in TITLE_NOUNS)


def extract_title_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if is_likely_job_title(line.strip())]


def names_overlap(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    return a in b or b in a


def score_role(
    role: RoleProfile, lowered_text: str, titles: list[str], skill_names: Iterable[str]
) -> int:
    lowered_titles = [title.lower() for title in titles]
    skill_names = list(skill_names)

    title_hits = sum(
        1
        for keyword in role.title_keywords
        if any(keyword.lower() in title for title in lowered_titles)
    )
    skill_hits = sum(
        1
        for required in role.required_skills
        if any(names_overlap(required, name) for name in skill_names)
    )
    verb_hits = sum(1 for verb in role.responsibility_verbs if verb.lower() in lowered_text)
    return TITLE_WEIGHT * title_hits + SKILL_WEIGHT * skill_hits + RESPONSIBILITY_WEIGHT * verb_hits


class RoleClassifier:
    """Scores every role profile and picks the best match."""

    def __init__(self, roles: RoleCatalog):
        if not roles.roles:
            raise ValueError("Role catalog is empty; nothing to classify against.")
        self.roles = roles

    def classify(self, text: str | None, skills: Iterable[Skill]) -> RoleClassification:
        text = text or ""
        lowered = text.lower()
        titles = extract_title_lines(text)
        skill_names = [skill.name for skill in skills]

        role_ids = self.roles.role_ids
        scores = np.array(
            [score_role(role, lowered, titles, skill_names) for role in self.roles.roles],
            dtype=int,
        )
        # argmax and a stable argsort both keep catalog order on ties.
        primary_idx = int(np.argmax(scores))
        ranked = [int(i) for i in np.argsort(-scores, kind="stable") if int(i) != primary_idx]

        confidence = float(np.clip(scores[primary_idx] / CONFIDENCE_SCALE, 0.0, 1.0))
        return RoleClassification(
            primary_role=role_ids[primary_idx],
            confidence=confidence,
            alternative_roles=[role_ids[i] for i in ranked[:MAX_ALTERNATIVES]],
            scores={role_id: int(score) for role_id, score in zip(role_ids, scores)},
        )
