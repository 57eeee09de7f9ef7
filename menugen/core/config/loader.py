"""
Configuration loader — reads menugen.yml and .menuconfig files into models.

Two kinds of YAML live in a project:

- ``menugen.yml`` at the project root: generator settings
  (asset folder, output dialect, template folder name, ...).
- ``*.menuconfig`` files anywhere in the asset store: one menu each
  (submenu label + new-file prefix).

Both are parsed with ``yaml.safe_load`` and validated with Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from menugen.core.models.menu_config import MenuConfig
from menugen.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Default settings filename
SETTINGS_FILE = "menugen.yml"

# Extension marking a menu configuration asset
MENU_CONFIG_EXTENSION = ".menuconfig"


class ConfigError(Exception):
    """Raised when settings or a menu configuration are invalid or missing."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for menugen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to menugen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(path: Path | None = None, *, required: bool = False) -> Settings:
    """Load and validate generator settings.

    Args:
        path: Explicit path to menugen.yml. If None, searches upward.
        required: Raise instead of falling back to defaults when no
            settings file can be found.

    Returns:
        Validated Settings model.

    Raises:
        ConfigError: If the file is invalid, or missing while required.
    """
    if path is None:
        path = find_settings_file()

    if path is None:
        if required:
            raise ConfigError(
                f"No {SETTINGS_FILE} found. Create one, or specify --config."
            )
        logger.debug("No %s found, using default settings", SETTINGS_FILE)
        return Settings()

    if not path.is_file():
        raise ConfigError(f"Settings file not found: {path}")

    data = _read_yaml_mapping(path, allow_empty=True)

    # The YAML may wrap everything under a "menugen" key or be flat
    if "menugen" in data and isinstance(data["menugen"], dict):
        data = data["menugen"]

    try:
        settings = Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info("Loaded settings from %s (dialect=%s)", path, settings.dialect)
    return settings


def settings_root(settings_path: Path | None) -> Path:
    """Get the project root for a settings file path (cwd when there is none)."""
    return settings_path.parent.resolve() if settings_path else Path.cwd().resolve()


def load_menu_config(file: Path, location: str) -> MenuConfig:
    """Read one ``.menuconfig`` file.

    Args:
        file: Filesystem path to read.
        location: The config's store path, recorded on the model.

    Returns:
        Validated MenuConfig. An empty file yields the defaults.

    Raises:
        ConfigError: If the file cannot be read or does not validate.
    """
    data = _read_yaml_mapping(file, allow_empty=True)

    # Accept an optional "menu:" wrapper
    if "menu" in data and isinstance(data["menu"], dict):
        data = data["menu"]

    try:
        return MenuConfig.model_validate({**data, "location": location})
    except ValidationError as e:
        raise ConfigError(f"Invalid menu config {location}: {e}") from e


def dump_menu_config(config: MenuConfig) -> str:
    """Serialize a MenuConfig to the YAML stored in its file."""
    return yaml.safe_dump(
        {
            "submenu_label": config.submenu_label,
            "new_file_prefix": config.new_file_prefix,
        },
        sort_keys=False,
        allow_unicode=True,
    )


def _read_yaml_mapping(path: Path, *, allow_empty: bool = False) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None and allow_empty:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    return data
