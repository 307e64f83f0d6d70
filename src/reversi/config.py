import logging
import os
from dotenv import load_dotenv
from pathlib import Path

from reversi import PROJECT_ROOT
from reversi.ai.selector import DifficultyLevel, make_difficulty_levels

load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_path(string: str) -> Path:
    string = string.replace("PROJECT_ROOT", str(PROJECT_ROOT))
    string = string.replace("~", str(Path.home()))
    return Path(string).resolve()


def get_preferences_path() -> Path:
    return resolve_path(
        os.getenv(
            "REVERSI_PREFERENCES_PATH", "PROJECT_ROOT/.reversi/preferences.json"
        )
    )


def get_ai_delay() -> float:
    """Seconds between the computer's turn starting and its move being shown."""
    return int(os.getenv("REVERSI_AI_DELAY_MS", "500")) / 1000


def get_difficulty_levels() -> list[DifficultyLevel]:
    raw = os.getenv("REVERSI_SEARCH_DEPTHS", "1,3,6")
    depths = [int(part) for part in raw.split(",")]
    return make_difficulty_levels(depths)


def get_log_level() -> str:
    return os.getenv("REVERSI_LOG_LEVEL", "WARNING").upper()


def configure_logging(level: str | None = None) -> None:
    logger = logging.getLogger("reversi")

    handler_exists = any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    if not handler_exists:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level or get_log_level())
    logger.propagate = False
