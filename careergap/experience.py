from __future__ import annotations

import re
from datetime import date

from careergap.models import ExperienceSummary

DATE_RANGE_PATTERN = re.compile(r"(\d{4})\s*[-–—]\s*(\d{4}|present|current)", re.IGNORECASE)

LEADERSHIP_VERBS = (
    "led",
    "managed",
    "supervised",
    "directed",
    "coordinated",
    "mentored",
    "trained",
    "guided",
    "oversaw",
    "headed",
)
LEADERSHIP_PATTERN = re.compile(r"\b(?:" + "|".join(LEADERSHIP_VERBS) + r")\b")

SENIORITY_KEYWORDS = (
    "senior",
    "lead",
    "principal",
    "staff",
    "director",
    "manager",
    "head",
    "chief",
    "executive",
    "vice president",
)
ACHIEVEMENT_VERBS = (
    "achieved",
    "improved",
    "increased",
    "reduced",
    "optimized",
    "delivered",
    "implemented",
    "launched",
    "created",
    "developed",
)

BULLET_MARKERS = ("•", "-", "*")
MIN_RESPONSIBILITY_LENGTH = 20
MAX_COMPANIES = 10


def calculate_total_years(text: str, current_year: int) -> int:
    # Overlapping ranges are summed as-is.
    total = 0
    for start, end in DATE_RANGE_PATTERN.findall(text):
        end_year = current_year if end.lower() in ("present", "current") else int(end)
        total += max(0, end_year - int(start))
    return total


def count_leadership_indicators(text: str) -> int:
    return len(LEADERSHIP_PATTERN.findall(text.lower()))


def extract_seniority_keywords(text: str) -> list[str]:
    lowered = text.lower()
    return [keyword for keyword in SENIORITY_KEYWORDS if keyword in lowered]


def extract_responsibilities(text: str) -> list[str]:
    responsibilities = []
    for line in text.splitlines():
        trimmed = line.strip()
        if trimmed.startswith(BULLET_MARKERS) and len(trimmed) > MIN_RESPONSIBILITY_LENGTH:
            responsibilities.append(trimmed[1:].strip())
    return responsibilities


def extract_achievements(responsibilities: list[str]) -> list[str]:
    return [
        item
        for item in responsibilities
        if any(verb in item.lower() for verb in ACHIEVEMENT_VERBS)
    ]


def extract_companies(text: str) -> list[str]:
    """Best-effort guess at employer lines; not authoritative."""
    companies = []
    for line in text.splitlines():
        trimmed = line.strip()
        if (
            3 < len(trimmed) < 50
            and not trimmed.startswith(BULLET_MARKERS)
            and "A" <= trimmed[0] <= "Z"
        ):
            companies.append(trimmed)
    return companies[:MAX_COMPANIES]


class ExperienceAnalyzer:
    """Turns date ranges and bullet lines into an ExperienceSummary."""

    def __init__(self, current_year: int | None = None):
        self.current_year = current_year

    def analyze(self, text: str | None) -> ExperienceSummary:
        if not text:
            return ExperienceSummary()

        current_year = self.current_year or date.today().year
        responsibilities = extract_responsibilities(text)
        return ExperienceSummary(
            total_years=calculate_total_years(text, current_year),
            leadership_indicator_count=count_leadership_indicators(text),
            seniority_keywords=extract_seniority_keywords(text),
            responsibilities=responsibilities,
            achievements=extract_achievements(responsibilities),
            companies=extract_companies(text),
        )
