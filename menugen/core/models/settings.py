"""
Settings model — project-wide generator settings from menugen.yml.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Generator settings.

    Every field has a default, so a project without a ``menugen.yml``
    still works with the conventional layout.
    """

    model_config = ConfigDict(extra="forbid")

    assets_dir: str = "Assets"
    dialect: Literal["csharp", "python"] = "csharp"
    templates_folder: str = "Templates"
    example_template: str = "ScriptTemplateExample"
    menu_root: str = "Assets/Create"
    menu_priority: int = 80
    id_seed: Literal["timestamp", "zero"] = "timestamp"
    containment: Literal["segment", "prefix"] = "segment"
    sort_templates: bool = True
    poll_interval: float = Field(default=2.0, gt=0)
