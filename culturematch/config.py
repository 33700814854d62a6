"""Load settings, env configuration and the user's saved preferences."""
from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from culturematch.log import get_logger

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"
DATA_DIR: Path = ROOT_DIR / "data"
PREFERENCES_PATH: Path = DATA_DIR / "preferences.yaml"

DEFAULT_SETTINGS: dict[str, Any] = {
    "analysis": {
        "use_llm": True,
        "use_search": True,
        "seed": None,
        "request_timeout": 10,
        "homepage_chars": 5000,
        "max_insights": 6,
    },
    "server": {
        "host": "127.0.0.1",
        "port": 5000,
        "debug": False,
    },
}


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in override.items():
        if value is None:
            continue
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Defaults deep-merged with config/settings.yaml, if present."""
    path = path or SETTINGS_PATH
    if not path.exists():
        return copy.deepcopy(DEFAULT_SETTINGS)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        log.warning("Ignoring %s: expected a mapping, got %s", path.name, type(data).__name__)
        return copy.deepcopy(DEFAULT_SETTINGS)
    return _merge(DEFAULT_SETTINGS, data)


def ensure_dirs() -> None:
    for d in (CONFIG_DIR, DATA_DIR):
        d.mkdir(parents=True, exist_ok=True)


# ── Saved preferences ───────────────────────────────────────────────────


def load_preferences(path: Path | None = None) -> dict[str, Any] | None:
    """Return the last saved preference selections, or None."""
    path = path or PREFERENCES_PATH
    if not path.exists():
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        log.warning("Could not read saved preferences (%s)", exc)
        return None
    return data if isinstance(data, dict) else None


def save_preferences(preferences: dict[str, Any], path: Path | None = None) -> Path:
    path = path or PREFERENCES_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    yaml_str = yaml.dump(preferences, default_flow_style=False, sort_keys=False, allow_unicode=True)
    path.write_text(yaml_str, encoding="utf-8")
    log.debug("Preferences saved → %s", path)
    return path


def clear_preferences(path: Path | None = None) -> bool:
    path = path or PREFERENCES_PATH
    if not path.exists():
        return False
    path.unlink()
    log.info("Cleared saved preferences")
    return True
