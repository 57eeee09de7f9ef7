"""
Template root resolver — where each menu config keeps its templates.

By convention a config at ``Assets/Tools/Menu.menuconfig`` owns the
folder ``Assets/Tools/Templates``.  The resolver searches the host for
every config once per pass, derives the roots, and caches both in the
pass context.
"""

from __future__ import annotations

import logging

from menugen.adapters.base import AssetHost
from menugen.core.context import PassContext
from menugen.core.models.asset import AssetType
from menugen.core.models.menu_config import template_root_for

logger = logging.getLogger(__name__)


def find_config_paths(host: AssetHost, context: PassContext) -> list[str]:
    """All menu config paths known to the host, cached for the pass."""
    if context.config_paths is None:
        context.config_paths = host.find_paths(AssetType.MENU_CONFIG)
        logger.debug("Found %d menu config(s)", len(context.config_paths))
    return context.config_paths


class TemplateRootResolver:
    """Resolve and cache the template roots for one pass."""

    def __init__(self, host: AssetHost, context: PassContext, folder_name: str = "Templates"):
        self._host = host
        self._context = context
        self._folder_name = folder_name

    def resolve_roots(self) -> list[str] | None:
        """Ordered, de-duplicated template roots.

        Returns:
            The roots, or None when no menu config exists yet.
        """
        if self._context.template_roots:
            return self._context.template_roots

        config_paths = find_config_paths(self._host, self._context)
        if not config_paths:
            return None

        roots = self._context.template_roots
        for config_path in config_paths:
            root = template_root_for(config_path, self._folder_name)
            if root not in roots:
                roots.append(root)

        logger.debug("Template roots: %s", ", ".join(roots))
        return roots
