"""Persistent JSON config helpers.

Stores the default check policy, UI theme and expand-all preference.
Missing or malformed config falls back to built-in defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

import structlog
from platformdirs import user_config_dir

from ..tree_model import CheckPolicy

logger = structlog.get_logger(__name__)

APP_NAME = "lazychecklist"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("config_unreadable", path=str(CONFIG_PATH), error=str(exc))
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON; write failures are ignored."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.debug("config_write_failed", path=str(CONFIG_PATH), error=str(exc))


def load_policy() -> CheckPolicy | None:
    """Return persisted check policy, or ``None`` when unset/invalid."""
    value = load_config().get("policy")
    if not isinstance(value, str):
        return None
    try:
        return CheckPolicy.parse(value)
    except ValueError:
        return None


def save_policy(policy: CheckPolicy) -> None:
    config = load_config()
    config["policy"] = policy.value
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def load_expand_all() -> bool:
    """Only explicit booleans are accepted; anything else means ``False``."""
    value = load_config().get("expand_all")
    return value if isinstance(value, bool) else False


def save_expand_all(expand_all: bool) -> None:
    config = load_config()
    config["expand_all"] = bool(expand_all)
    save_config(config)
