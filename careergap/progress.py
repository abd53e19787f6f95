from __future__ import annotations

import json
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Protocol, Sequence
from urllib.parse import quote

from loguru import logger

from careergap.config import load_settings

STORAGE_KEY_PREFIX = "career-progress"


class ProgressStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryProgressStore:
    def __init__(self):
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileProgressStore:
    """One JSON file per key inside a directory."""

    def __init__(self, directory: Path):
        self.directory = directory

    def _path(self, key: str) -> Path:
        # One flat file per key, whatever characters the key holds.
        return self.directory / f"{quote(key, safe='')}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ProgressTracker:
    def __init__(self, store: ProgressStore, clock: Callable[[], str] = _utc_now):
        self.store = store
        self.clock = clock

    @staticmethod
    def storage_key(user_id: str) -> str:
        return f"{STORAGE_KEY_PREFIX}-{user_id}"

    def get_progress(self, user_id: str) -> dict[str, Any]:
        raw = self.store.get(self.storage_key(user_id))
        if not raw:
            return {}
        try:
            progress = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning(f"Discarding unreadable progress record for {user_id}: {exc}")
            return {}
        if not isinstance(progress, dict):
            logger.warning(f"Discarding malformed progress record for {user_id}")
            return {}
        return progress

    def save_progress(self, user_id: str, progress: dict[str, Any]) -> None:
        self.store.set(self.storage_key(user_id), json.dumps(progress))

    def track_skill_completion(
        self, user_id: str, skill_name: str, completion_data: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        progress = self.get_progress(user_id)
        progress.setdefault("completedSkills", []).append(
            {"skill": skill_name, "completedAt": self.clock(), **(completion_data or {})}
        )
        self.save_progress(user_id, progress)
        logger.info(f"Recorded skill completion for {user_id}: {skill_name}")
        return progress

    def track_milestone_completion(
        self, user_id: str, milestone_id: int, milestone_data: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        progress = self.get_progress(user_id)
        progress.setdefault("completedMilestones", []).append(
            {"milestoneId": milestone_id, "completedAt": self.clock(), **(milestone_data or {})}
        )
        self.save_progress(user_id, progress)
        logger.info(f"Recorded milestone completion for {user_id}: {milestone_id}")
        return progress

    def progress_percentage(self, user_id: str, total_milestones: Sequence[Any]) -> int:
        if not total_milestones:
            return 0
        completed = len(self.get_progress(user_id).get("completedMilestones", []))
        # Halves round up.
        return math.floor(completed / len(total_milestones) * 100 + 0.5)


def default_progress_store() -> ProgressStore:
    """File-backed store under CAREERGAP_PROGRESS_DIR, else in-memory."""
    directory = load_settings().progress_dir
    if directory is None:
        return InMemoryProgressStore()
    return JsonFileProgressStore(directory)
