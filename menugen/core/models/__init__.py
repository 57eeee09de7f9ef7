"""
Domain models — Pydantic types for the menu generator.

All models are re-exported here for convenient access:

    from menugen.core.models import MenuConfig, TemplateFile, GeneratedModule
"""

from menugen.core.models.asset import AssetType, ChangeBatch, type_for_filename
from menugen.core.models.menu_config import (
    DEFAULT_NEW_FILE_PREFIX,
    DEFAULT_SUBMENU_LABEL,
    MenuConfig,
    template_root_for,
)
from menugen.core.models.settings import Settings
from menugen.core.models.template import GeneratedModule, MenuEntry, TemplateFile

__all__ = [
    # asset.py
    "AssetType",
    "ChangeBatch",
    "type_for_filename",
    # menu_config.py
    "DEFAULT_NEW_FILE_PREFIX",
    "DEFAULT_SUBMENU_LABEL",
    "MenuConfig",
    "template_root_for",
    # settings.py
    "Settings",
    # template.py
    "GeneratedModule",
    "MenuEntry",
    "TemplateFile",
]
