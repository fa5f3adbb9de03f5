from __future__ import annotations
import os
from pathlib import Path

# Defaults
_DEFAULT_HISTORY_FILE = Path.home() / '.eta_history'
_DEFAULT_HISTORY_SIZE = 100
_DEFAULT_PROMPT = 'eta> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def get_history_file() -> Path:
    raw = os.environ.get('ETA_HISTORY_FILE')
    return Path(raw).expanduser() if raw else _DEFAULT_HISTORY_FILE


def get_history_size() -> int:
    raw = os.environ.get('ETA_HISTORY_SIZE')
    if not raw:
        return _DEFAULT_HISTORY_SIZE
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"ETA_HISTORY_SIZE must be an integer, got {raw!r}") from None


def get_prompt() -> str:
    return os.environ.get('ETA_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return os.environ.get('ETA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
