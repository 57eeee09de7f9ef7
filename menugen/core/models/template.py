"""
Template and generated-module models — used by the menu generator.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from menugen.core.models.menu_config import MenuConfig


class TemplateFile(BaseModel):
    """A script template discovered under a template root.

    Attributes:
        path:      Store path of the template (``Foo.cs.txt``).
        base_name: File name without the template suffix (``Foo``).
    """

    path: str
    base_name: str


class MenuEntry(BaseModel):
    """One "create from template" command in a generated module."""

    entry_id: int
    label: str          # "<submenu>/<base name>"
    template_path: str
    new_name: str       # "<prefix><base name>"


class GeneratedModule(BaseModel):
    """A registration module produced for one menu config.

    Attributes:
        path:         Store path the module is written to.
        content:      Full source text.
        container_id: Identifier consumed by the container unit.
        entries:      One entry per discovered template, in emission order.
        config:       The config this module was generated from.
    """

    path: str
    content: str
    container_id: int
    entries: list[MenuEntry] = Field(default_factory=list)
    config: MenuConfig

    @property
    def ids(self) -> list[int]:
        """Every identifier this module consumed, container first."""
        return [self.container_id, *(e.entry_id for e in self.entries)]
