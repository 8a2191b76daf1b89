import os
from pathlib import Path
from typing import Optional

from aiogram.fsm.state import State, StatesGroup
from dotenv import load_dotenv

load_dotenv()


class PokerStates(StatesGroup):
    waiting_for_task_title = State()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


# Telegram
BOT_TOKEN: Optional[str] = os.getenv("BOT_TOKEN") or None

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE: Optional[Path] = Path(os.environ["LOG_FILE"]) if os.getenv("LOG_FILE") else None

# Session rules
FACILITATOR_ONLY = _env_bool("FACILITATOR_ONLY", True)
OUTLIER_THRESHOLD = _env_float("OUTLIER_THRESHOLD", 0.5)
TASK_HISTORY_LIMIT = _env_int("TASK_HISTORY_LIMIT", 10)
