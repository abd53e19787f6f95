from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"


@dataclass(frozen=True)
class EngineSettings:
    data_dir: Path
    log_level: str
    log_file: Path | None
    progress_dir: Path | None


def load_settings() -> EngineSettings:
    data_dir = os.getenv("CAREERGAP_DATA_DIR")
    log_file = os.getenv("CAREERGAP_LOG_FILE")
    progress_dir = os.getenv("CAREERGAP_PROGRESS_DIR")
    return EngineSettings(
        data_dir=Path(data_dir) if data_dir else PACKAGE_DATA_DIR,
        log_level=(os.getenv("CAREERGAP_LOG_LEVEL") or "WARNING").upper(),
        log_file=Path(log_file) if log_file else None,
        progress_dir=Path(progress_dir) if progress_dir else None,
    )
