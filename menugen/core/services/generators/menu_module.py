"""
Menu module generator — one registration module per menu config.

For every config, in discovery order:

    1. make sure its template root exists (seeding the example)
    2. find the templates below the root
    3. render a module: a container named with the next identifier, a
       shared create routine, then one entry per template, each named
       with the next identifier
    4. overwrite ``<config folder>/<config name>.<ext>`` with it

Identifiers come from the pass context, so they are unique across all
modules of one pass.  When the loop is done the host is refreshed once.
"""

from __future__ import annotations

import logging
import posixpath

from menugen.adapters.base import AssetHost
from menugen.core import store_paths
from menugen.core.context import PassContext
from menugen.core.models.asset import AssetType
from menugen.core.models.menu_config import MenuConfig
from menugen.core.models.settings import Settings
from menugen.core.models.template import GeneratedModule, MenuEntry, TemplateFile
from menugen.core.services.folder_bootstrap import FolderBootstrapper
from menugen.core.services.generators.dialects import Dialect, get_dialect

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised after a pass in which one or more modules could not be written.

    Attributes:
        failures: Output path → the error raised while writing it.
        written:  Modules of the same pass that were written.
    """

    def __init__(
        self,
        failures: dict[str, Exception],
        written: list[GeneratedModule] | None = None,
    ):
        self.failures = failures
        self.written = written or []
        first_path, first_error = next(iter(failures.items()))
        more = f" (and {len(failures) - 1} more)" if len(failures) > 1 else ""
        super().__init__(f"Cannot write {first_path}: {first_error}{more}")


class MenuModuleGenerator:
    """Scan template roots and write registration modules."""

    def __init__(self, host: AssetHost, settings: Settings, dialect: Dialect | None = None):
        self._host = host
        self._settings = settings
        self._dialect = dialect or get_dialect(settings.dialect)
        self._bootstrapper = FolderBootstrapper(host, self._dialect, settings.example_template)

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    def scan_templates(self, root: str) -> list[TemplateFile]:
        """Templates anywhere below ``root``."""
        suffix = self._dialect.template_suffix
        templates = [
            TemplateFile(
                path=path,
                base_name=self._dialect.base_name(posixpath.basename(path)),
            )
            for path in self._host.find_paths(AssetType.TEXT, f"*{suffix}", [root])
            if store_paths.ends_with(path, suffix)
        ]
        if self._settings.sort_templates:
            templates.sort(key=lambda t: (t.base_name.lower(), t.path))
        return templates

    def generate(self, config: MenuConfig, context: PassContext) -> GeneratedModule:
        """Render the module for one config (without writing it)."""
        root = config.template_root(self._settings.templates_folder)
        self._bootstrapper.ensure_template_folder(root)

        templates = self.scan_templates(root)

        container_id = context.next_id()
        entries = [
            MenuEntry(
                entry_id=context.next_id(),
                label=f"{config.submenu_label}/{t.base_name}",
                template_path=t.path,
                new_name=f"{config.new_file_prefix}{t.base_name}",
            )
            for t in templates
        ]

        content = self._dialect.render(
            source=config.location,
            container_id=container_id,
            entries=entries,
            menu_root=self._settings.menu_root,
            priority=self._settings.menu_priority,
        )
        return GeneratedModule(
            path=config.output_path(self._dialect.output_ext),
            content=content,
            container_id=container_id,
            entries=entries,
            config=config,
        )

    def generate_all(
        self,
        config_paths: list[str],
        context: PassContext,
    ) -> list[GeneratedModule]:
        """Generate and write the modules of every config.

        Configs that fail to load are skipped.  A failed write does not
        stop the pass; once every config has been tried the failures
        are raised together.

        Returns:
            The modules that were written.

        Raises:
            GenerationError: If any module could not be written.
        """
        written: list[GeneratedModule] = []
        failures: dict[str, Exception] = {}

        for config_path in config_paths:
            config = self._host.load_menu_config(config_path)
            if config is None:
                logger.warning("Skipping menu config %s: cannot be loaded", config_path)
                continue

            try:
                module = self.generate(config, context)
                self._host.write_text(module.path, module.content)
            except OSError as e:
                logger.error("Failed to generate menu for %s", config_path, exc_info=True)
                failures[config.output_path(self._dialect.output_ext)] = e
                continue

            logger.info(
                "Wrote %s (%d entr%s)",
                module.path, len(module.entries), "y" if len(module.entries) == 1 else "ies",
            )
            written.append(module)

        self._host.refresh()

        if failures:
            raise GenerationError(failures, written)
        return written
