from __future__ import annotations
import os
from typing import Optional


# Defaults
_DEFAULT_PROMPT = ">> "
_DEFAULT_LOG_LEVEL = "WARNING"


def setting_from_env(var: str, default: Optional[str]) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def get_prompt() -> str:
    return setting_from_env('LISPY_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return setting_from_env('LISPY_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()


def get_log_file() -> Optional[str]:
    # unset means log to stderr
    path = setting_from_env('LISPY_LOG_FILE', None)
    return path.strip() if path else None
