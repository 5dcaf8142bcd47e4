"""Library configuration: ArConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from arfluent._logging import configure_logging

__all__ = [
    'ArConfig',
    'get_config',
    'init',
]

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_TRUTHY = ('1', 'true', 'yes', 'on')
_FALSY = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class ArConfig:
    """Configuration for arfluent.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render log records as JSON rather than console output.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: ArConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from ARFLUENT_LOG_LEVEL, if set to a known level."""
    env_level = os.environ.get('ARFLUENT_LOG_LEVEL', '').strip().upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown ARFLUENT_LOG_LEVEL value '%s', logging stays off", env_level)
        return None
    return env_level


def _detect_json_logs() -> bool:
    """Read the output format from ARFLUENT_JSON_LOGS (default: JSON)."""
    env_json = os.environ.get('ARFLUENT_JSON_LOGS', '').strip().lower()
    if env_json in _FALSY:
        return False
    if env_json and env_json not in _TRUTHY:
        logging.warning("Unknown ARFLUENT_JSON_LOGS value '%s', defaulting to JSON", env_json)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> ArConfig:
    """Initialize arfluent with the given configuration.

    Arguments left as None are filled from the environment
    (``ARFLUENT_LOG_LEVEL``, ``ARFLUENT_JSON_LOGS``).

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON logs (True) or console logs (False).

    Returns:
        The ArConfig that was set.

    Example:
        ```python
        import arfluent

        arfluent.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = ArConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> ArConfig:
    """Get the current configuration.

    When ``init()`` has not been called, returns a configuration read from
    the environment without touching logging.
    """
    if _config is None:
        return ArConfig(log_level=_detect_log_level(), json_logs=_detect_json_logs())
    return _config
