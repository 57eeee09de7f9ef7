"""
Change classifier — does an imported asset call for regeneration?

Two kinds of change matter:

    1. A menu config that loads.  A config that exists but fails to load
       (half-written, mid-import) is ignored until it loads.
    2. A script template (``*.cs.txt`` for C#) inside a template root.

Everything else is irrelevant.  The caller stops at the first relevant
path of a batch; one hit is enough to regenerate every module.
"""

from __future__ import annotations

import logging
from typing import Literal

from menugen.adapters.base import AssetHost
from menugen.core import store_paths
from menugen.core.models.asset import AssetType
from menugen.core.services.template_roots import TemplateRootResolver

logger = logging.getLogger(__name__)

Containment = Literal["segment", "prefix"]


class ChangeClassifier:
    """Decide relevance of single imported paths.

    Args:
        host: Asset store to query.
        resolver: Template roots of the current pass.
        template_suffix: Two-part suffix marking a template, e.g. ``.cs.txt``.
        containment: ``segment`` compares whole path segments; ``prefix``
            is a plain string-prefix test, so ``Foo/Templates`` also
            contains ``Foo/TemplatesExtra``.
    """

    def __init__(
        self,
        host: AssetHost,
        resolver: TemplateRootResolver,
        template_suffix: str,
        containment: Containment = "segment",
    ):
        self._host = host
        self._resolver = resolver
        self._suffix = template_suffix
        self._containment = containment

    def is_relevant(self, path: str) -> bool:
        asset_type = self._host.asset_type(path)

        if asset_type is None:
            relevant = False
        elif asset_type.is_a(AssetType.MENU_CONFIG):
            relevant = self._config_loads(path)
        elif asset_type.is_a(AssetType.TEXT):
            relevant = self._is_template_in_root(path)
        else:
            relevant = False

        logger.debug("%s %s (%s)", "relevant" if relevant else "ignored", path,
                     asset_type.value if asset_type else "untyped")
        return relevant

    def _config_loads(self, path: str) -> bool:
        return self._host.load_menu_config(path) is not None

    def _is_template_in_root(self, path: str) -> bool:
        if not store_paths.ends_with(path, self._suffix):
            return False

        roots = self._resolver.resolve_roots()
        if not roots:
            return False

        folder = store_paths.parent(path)
        contains = store_paths.is_within if self._containment == "segment" else store_paths.has_prefix
        return any(contains(folder, root) for root in roots)
