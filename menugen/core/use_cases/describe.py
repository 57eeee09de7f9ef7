"""
Describe use case — list menu configs, their roots and templates.

Read-only: nothing is created, seeded or written.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from menugen.adapters.base import AssetHost
from menugen.core.context import PassContext
from menugen.core.models.menu_config import MenuConfig
from menugen.core.models.settings import Settings
from menugen.core.models.template import TemplateFile
from menugen.core.services.generators.menu_module import MenuModuleGenerator
from menugen.core.services.template_roots import find_config_paths


@dataclass
class MenuReport:
    """One config as the generator would see it."""

    config_path: str
    config: MenuConfig | None = None
    template_root: str = ""
    root_exists: bool = False
    output_path: str = ""
    templates: list[TemplateFile] = field(default_factory=list)

    @property
    def loadable(self) -> bool:
        return self.config is not None

    def to_dict(self) -> dict:
        return {
            "config_path": self.config_path,
            "loadable": self.loadable,
            "submenu_label": self.config.submenu_label if self.config else None,
            "new_file_prefix": self.config.new_file_prefix if self.config else None,
            "template_root": self.template_root,
            "root_exists": self.root_exists,
            "output_path": self.output_path,
            "templates": [t.model_dump() for t in self.templates],
        }


def describe_menus(host: AssetHost, settings: Settings) -> list[MenuReport]:
    """Report every menu config known to the host."""
    generator = MenuModuleGenerator(host, settings)
    reports = []

    for config_path in find_config_paths(host, PassContext()):
        report = MenuReport(config_path=config_path)
        config = host.load_menu_config(config_path)
        if config is not None:
            report.config = config
            report.template_root = config.template_root(settings.templates_folder)
            report.root_exists = host.is_folder(report.template_root)
            report.output_path = config.output_path(generator.dialect.output_ext)
            if report.root_exists:
                report.templates = generator.scan_templates(report.template_root)
        reports.append(report)

    return reports
