"""Simple cross-platform settings storage for the app.

Stores a small JSON settings file in a per-user application data location
and exposes helpers to load/save settings. The owned Genre/Type selection is
kept here as two independent string lists under fixed keys.

Writes go through a temp file and an atomic replace. On POSIX systems the
settings directory and file are created with restrictive permissions where
possible.
"""

from __future__ import annotations

import json
import logging
import os
import platform
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

_APP_NAME = "ComboFinder"
_SETTINGS_FILE = "settings.json"

OWNED_GENRES_KEY = "gds_owned_genres"
OWNED_TYPES_KEY = "gds_owned_types"


def _get_user_data_dir() -> Path:
    """Return a platform-appropriate per-user data directory for the app."""
    override = os.getenv("COMBO_FINDER_HOME")
    if override:
        return Path(override)
    system = platform.system()
    home = Path.home()
    if system == "Windows":
        appdata = os.getenv("APPDATA")
        if appdata:
            return Path(appdata) / _APP_NAME
        return home / f".{_APP_NAME}"
    if system == "Darwin":
        return home / "Library" / "Application Support" / _APP_NAME
    # Linux / other: honor XDG_DATA_HOME if set
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / _APP_NAME
    return home / ".local" / "share" / _APP_NAME


def ensure_settings_dir() -> Path:
    d = _get_user_data_dir()
    d.mkdir(parents=True, exist_ok=True)
    if os.name == "posix":
        try:
            d.chmod(0o700)
        except OSError:
            logger.debug("could not restrict permissions on %s", d)
    return d


def settings_path() -> Path:
    return ensure_settings_dir() / _SETTINGS_FILE


def load_settings() -> Dict[str, Any]:
    p = settings_path()
    if not p.exists():
        return {}
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: top level is not an object", p)
        return {}
    return data


def save_settings(data: Dict[str, Any]) -> None:
    p = settings_path()
    tmp = p.with_suffix(".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        if os.name == "posix":
            try:
                tmp.chmod(0o600)
            except OSError:
                pass
        os.replace(str(tmp), str(p))
    finally:
        if tmp.exists():
            tmp.unlink()


def get_setting(key: str, default: Optional[Any] = None) -> Any:
    s = load_settings()
    return s.get(key, default)


def set_setting(key: str, value: Any) -> None:
    s = load_settings()
    s[key] = value
    save_settings(s)


def get_string_list(key: str) -> List[str]:
    """Return the string list stored under ``key``.

    A missing key means an empty list. Anything that is not a list of
    strings is dropped rather than rejected.
    """
    val = get_setting(key)
    if not isinstance(val, list):
        if val is not None:
            logger.warning("setting %r is not a list; treating as empty", key)
        return []
    return [v for v in val if isinstance(v, str)]


def set_string_list(key: str, values: Iterable[str]) -> None:
    set_setting(key, list(values))


class SettingsStore:
    """Persistence capability handed to the inventory.

    Anything with the same ``load``/``save`` pair can stand in for it
    (tests use an in-memory dict).
    """

    def load(self, key: str) -> List[str]:
        return get_string_list(key)

    def save(self, key: str, values: Iterable[str]) -> None:
        set_string_list(key, values)


def get_appearance_mode() -> str:
    val = get_setting("appearance_mode")
    if val in ("light", "dark", "system"):
        return val
    return "system"


def set_appearance_mode(mode: str) -> None:
    if mode not in ("light", "dark", "system"):
        return
    set_setting("appearance_mode", mode)
