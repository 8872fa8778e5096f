"""
Paths, log level and centralized configuration.
All resolution relative to the backend directory.
"""
import os
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Repo root: backend/allergen_core/config.py -> parent=allergen_core, parent.parent=backend
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_REPO_ROOT = _BACKEND_DIR.parent

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


# --- Data paths ---
def get_input_path() -> Path:
    override = os.environ.get("ALLERGEN_INPUT_PATH", "").strip()
    if override:
        return Path(override)
    return _REPO_ROOT / "input.txt"


def get_report_path() -> Optional[Path]:
    """Optional JSON report destination; None when not configured."""
    value = os.environ.get("ALLERGEN_REPORT_PATH", "").strip()
    return Path(value) if value else None


# --- Logging ---
def get_log_level() -> str:
    level = os.environ.get("ALLERGEN_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        if level:
            logger.warning("Unknown ALLERGEN_LOG_LEVEL=%r; using %s", level, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


# --- Startup logging ---
def log_config() -> None:
    input_path = get_input_path()
    report_path = get_report_path()
    logger.info(
        "CONFIG: input=%s input_exists=%s report=%s log_level=%s",
        input_path, input_path.exists(), report_path, get_log_level(),
    )
