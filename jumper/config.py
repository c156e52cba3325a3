"""Settings and persistent JSON config helpers.

Resolves the project list, history and cache locations plus picker and
label options. All config access is defensive: a missing or malformed config
file, or a wrongly typed value, falls back to the built-in default.
"""

from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "jumper"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "JUMPER_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

PROJECTS_FILENAME = ".projects"
HISTORY_FILENAME = ".projects_history"
CACHE_FILENAME = ".projects_cache"
DEFAULT_HISTORY_LIMIT = 2000
DEFAULT_PICKER_COMMAND = ("fzf", "--reverse")


@dataclass(frozen=True)
class Settings:
    home: Path
    projects_file: Path
    history_file: Path
    cache_file: Path
    alternate_root: str | None = None
    alternate_alias: str = ""
    picker_command: tuple[str, ...] = DEFAULT_PICKER_COMMAND
    history_limit: int = DEFAULT_HISTORY_LIMIT
    tmux_binary: str = "tmux"
    find_binary: str = "find"

    @classmethod
    def for_home(cls, home: Path, cache_dir: Path | None = None) -> Settings:
        """Build default settings rooted at ``home``.

        The cache lives in the shared temp directory unless ``cache_dir`` is
        given.
        """
        if cache_dir is None:
            cache_dir = Path(tempfile.gettempdir())
        return cls(
            home=home,
            projects_file=home / PROJECTS_FILENAME,
            history_file=home / HISTORY_FILENAME,
            cache_file=cache_dir / CACHE_FILENAME,
        )


def config_path(environ: dict[str, str] | None = None) -> Path:
    """Return the config file path, honoring the ``JUMPER_CONFIG`` override."""
    env = os.environ if environ is None else environ
    override = env.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_PATH


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    if path is None:
        path = config_path()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _path_value(value: object, home: Path) -> Path | None:
    if not isinstance(value, str) or not value.strip():
        return None
    raw = value.strip()
    if raw == "~":
        return home
    if raw.startswith("~/"):
        return home / raw[2:]
    return Path(raw)


def _string_value(value: object) -> str | None:
    if not isinstance(value, str) or not value:
        return None
    return value


def _picker_value(value: object) -> tuple[str, ...] | None:
    """Accept only a non-empty list of non-empty strings."""
    if not isinstance(value, list) or not value:
        return None
    if not all(isinstance(item, str) and item for item in value):
        return None
    return tuple(value)


def _positive_int_value(value: object) -> int | None:
    # Booleans are ints in Python; reject them explicitly.
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return None
    return value


def load_settings(
    home: Path | None = None,
    config: dict[str, object] | None = None,
) -> Settings:
    """Build ``Settings`` from defaults overlaid with config file values.

    ``home`` defaults to the current user's home directory and ``config`` to
    whatever ``load_config`` returns.
    """
    if home is None:
        home = Path.home()
    if config is None:
        config = load_config()

    defaults = Settings.for_home(home)
    alternate_root = _string_value(config.get("alternate_root"))
    alternate_alias = _string_value(config.get("alternate_alias")) or ""
    return Settings(
        home=home,
        projects_file=_path_value(config.get("projects_file"), home) or defaults.projects_file,
        history_file=_path_value(config.get("history_file"), home) or defaults.history_file,
        cache_file=_path_value(config.get("cache_file"), home) or defaults.cache_file,
        alternate_root=alternate_root.rstrip("/") if alternate_root else None,
        alternate_alias=alternate_alias,
        picker_command=_picker_value(config.get("picker_command")) or defaults.picker_command,
        history_limit=_positive_int_value(config.get("history_limit")) or defaults.history_limit,
    )
