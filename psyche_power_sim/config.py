from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _load_dotenv(path: str = ".env") -> Dict[str, str]:
    """
    Read KEY=VALUE lines from a local .env file into os.environ.

    Variables already present in the environment win. Returns the parsed
    pairs, including those that were not applied.
    """
    env_path = Path(path)
    if not env_path.exists():
        return {}

    parsed: Dict[str, str] = {}
    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        os.environ.setdefault(key, value)
        parsed[key] = value
    return parsed


_load_dotenv()


def get_results_dir() -> Path:
    """
    Directory where run exports (CSV, plots, summaries) are written.

    Returns:
        Absolute path from ``PSYCHE_SIM_RESULTS_DIR`` (default ``results``),
        resolved against the current working directory when relative.
    """
    results_dir = Path(os.getenv("PSYCHE_SIM_RESULTS_DIR", "results")).expanduser()
    if not results_dir.is_absolute():
        results_dir = Path.cwd() / results_dir
    return results_dir


def get_log_level() -> int:
    """
    Logging level from ``PSYCHE_SIM_LOG_LEVEL`` (name or number, default WARNING).
    """
    raw = os.getenv("PSYCHE_SIM_LOG_LEVEL", "WARNING").strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: int | None = None) -> None:
    """
    Configure root logging for command-line entry points.
    """
    logging.basicConfig(
        level=get_log_level() if level is None else level,
        format=LOG_FORMAT,
    )
