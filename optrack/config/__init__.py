"""Unified configuration layer for the tracking package.

Goals
-----
* Centralize defaults (``optrack.config.defaults``).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by
       ``OPTRACK_CONFIG_FILE``; its ``tracking`` section is used
    3. Environment variables (``OPTRACK_IGNORE_SUPERSEDED``,
       ``OPTRACK_REJECTION_POLICY``, ``OPTRACK_LOG_EVENTS``)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_tracking_settings(overrides=None)``.

External Config File (Optional)
-------------------------------
```
tracking:
  ignore_superseded: true
  rejection_policy: absorb
  log_events: false
```

Failure Modes
-------------
- Unreadable or malformed files are treated as empty (logged at warning).
- Invalid values raise ``TrackingError(CONFIGURATION)`` wrapping the
  ``pydantic.ValidationError``.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import ValidationError

from ..base.dto import TrackingSettings
from ..base.errors import ErrorCode, TrackingError
from ..base.logging import get_logger, log_event
from .defaults import (
    CONFIG_FILE_SECTION,
    DEFAULT_IGNORE_SUPERSEDED,
    DEFAULT_LOG_EVENTS,
    DEFAULT_REJECTION_POLICY,
)
from .env import CONFIG_FILE_ENV, env_overrides, read_env

DEFAULTS: Dict[str, Any] = {
    "ignore_superseded": DEFAULT_IGNORE_SUPERSEDED,
    "rejection_policy": DEFAULT_REJECTION_POLICY,
    "log_events": DEFAULT_LOG_EVENTS,
}

_FILE_CACHE: Dict[str, Dict[str, Any]] = {}

logger = get_logger(__name__)


def _parse_config_text(text: str) -> Any:
    # Try JSON first; YAML is a superset but slower and looser
    try:
        return json.loads(text)
    except ValueError:
        return yaml.safe_load(text)


def _load_external_config() -> Dict[str, Any]:
    path = read_env(CONFIG_FILE_ENV)
    if not path:
        return {}
    if path in _FILE_CACHE:
        return _FILE_CACHE[path]
    p = Path(path)
    data: Any = {}
    if p.is_file():
        try:
            data = _parse_config_text(p.read_text(encoding="utf-8")) or {}
        except (OSError, ValueError, yaml.YAMLError) as exc:
            log_event(logger, "config.file_error", path=str(p), error=str(exc))
            data = {}
    section = data.get(CONFIG_FILE_SECTION) if isinstance(data, dict) else None
    result = dict(section) if isinstance(section, dict) else {}
    _FILE_CACHE[path] = result
    return result


def reset_config_cache() -> None:
    """Forget parsed config files (tests and long-lived processes)."""
    _FILE_CACHE.clear()


def get_tracking_settings(overrides: Optional[Mapping[str, Any]] = None) -> TrackingSettings:
    """Return merged, validated tracking settings.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    try:
        return TrackingSettings.model_validate(cfg)
    except ValidationError as exc:
        raise TrackingError(ErrorCode.CONFIGURATION, f"invalid tracking settings: {exc}", raw=exc) from exc


__all__ = [
    "DEFAULTS",
    "get_tracking_settings",
    "reset_config_cache",
]
