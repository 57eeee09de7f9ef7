"""
Folder bootstrapper — make sure a template root exists before scanning.

A new root is seeded with a copy of the example template shipped in the
project (``ScriptTemplateExample.cs`` for C#), saved under the template
suffix so it is picked up as a template straight away.  An existing
root is never touched, so the example is copied at most once.
"""

from __future__ import annotations

import logging
import posixpath

from menugen.adapters.base import AssetHost
from menugen.core import store_paths
from menugen.core.models.asset import AssetType
from menugen.core.services.generators.dialects import Dialect

logger = logging.getLogger(__name__)


class FolderBootstrapper:
    """Create missing template roots and seed them with the example."""

    def __init__(self, host: AssetHost, dialect: Dialect, example_template: str):
        self._host = host
        self._dialect = dialect
        self._example_template = example_template

    def ensure_template_folder(self, root: str) -> bool:
        """Create ``root`` if needed.

        Returns:
            True if the folder was created by this call.
        """
        root = store_paths.normalize(root)
        if self._host.is_folder(root):
            return False

        self._create_with_parents(root)
        logger.info("Created template folder %s", root)

        example_path = self._find_example()
        if example_path is None:
            logger.info(
                "No %s found, leaving %s empty",
                self._dialect.example_file_name(self._example_template), root,
            )
            return True

        text = self._host.load_text(example_path)
        if text is None:
            logger.warning("Example template %s could not be read", example_path)
            return True

        target = posixpath.join(root, f"{self._example_template}{self._dialect.template_suffix}")
        self._host.write_text(target, text)
        logger.info("Seeded %s from %s", target, example_path)

        self._host.refresh()
        return True

    def _create_with_parents(self, folder: str) -> None:
        """Create ``folder`` one leaf at a time, parents first."""
        parent = posixpath.dirname(folder)
        if parent and not self._host.is_folder(parent):
            self._create_with_parents(parent)
        self._host.create_folder(parent, posixpath.basename(folder))

    def _find_example(self) -> str | None:
        wanted = self._dialect.example_file_name(self._example_template)
        for path in self._host.find_paths(AssetType.TEXT, wanted):
            if posixpath.basename(path) == wanted:
                return path
        return None
