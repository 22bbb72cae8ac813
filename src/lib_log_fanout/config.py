"""Optional ``.env`` loading for the runtime's environment-driven settings.

Purpose
-------
Let CLI users and hosts keep ``MESSAGEBIRD_*`` credentials and ``LOG_*``
overrides in a ``.env`` file. Loading is opt-in (``--use-dotenv`` or
``LOG_FANOUT_USE_DOTENV=1``) and never overrides variables that are already
set in the process environment.
"""

from __future__ import annotations

import threading
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LOG_FANOUT_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}

_LOCK = threading.Lock()
_LOADED_PATH: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI flag wins over the env toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(path: str | Path | None = None) -> Path | None:
    """Load the nearest ``.env`` (searching upwards from the cwd) once.

    Returns the resolved path that was loaded, or ``None`` when no file was
    found. Existing environment variables keep precedence.
    """

    global _LOADED_PATH
    with _LOCK:
        if _LOADED_PATH is not None:
            return _LOADED_PATH
        candidate = str(path) if path is not None else find_dotenv(usecwd=True)
        if not candidate or not Path(candidate).is_file():
            return None
        resolved = Path(candidate).resolve()
        load_dotenv(resolved, override=False)
        _LOADED_PATH = resolved
        return resolved


def _reset_dotenv_state_for_testing() -> None:
    global _LOADED_PATH
    with _LOCK:
        _LOADED_PATH = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
