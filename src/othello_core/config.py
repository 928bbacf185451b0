import logging
import os
from dotenv import load_dotenv
from pathlib import Path

from othello_core import PROJECT_ROOT

ENV_FILE = Path(os.environ.get("OTHELLO_ENV_FILE", PROJECT_ROOT / ".env"))

load_dotenv(ENV_FILE)


def parse_bool(string: str) -> bool:
    return string.strip().lower() not in ["0", "false", "no", "off", ""]


def parse_log_level(string: str) -> int:
    level = logging.getLevelName(string.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f'Invalid log level "{string}"')
    return level


STRICT_BOUNDS = parse_bool(os.environ.get("OTHELLO_STRICT_BOUNDS", "1"))

LOG_LEVEL = os.environ.get("OTHELLO_LOG_LEVEL", "WARNING").upper()
