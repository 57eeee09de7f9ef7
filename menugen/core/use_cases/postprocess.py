"""
Postprocess use case — react to one batch of asset changes.

    batch ──► ChangeClassifier ──(first relevant path)──► MenuModuleGenerator
                    │                                        │
                    └──── TemplateRootResolver ◄─────────────┘
                               (PassContext)

Only imported paths are classified.  One relevant path regenerates the
module of *every* config.  The pass context is discarded when the batch
is done, so nothing cached leaks into the next batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from menugen.adapters.base import AssetHost
from menugen.core.context import PassContext
from menugen.core.models.asset import ChangeBatch
from menugen.core.models.settings import Settings
from menugen.core.models.template import GeneratedModule
from menugen.core.services.change_classifier import ChangeClassifier
from menugen.core.services.generators.dialects import get_dialect
from menugen.core.services.generators.menu_module import GenerationError, MenuModuleGenerator
from menugen.core.services.template_roots import TemplateRootResolver, find_config_paths

logger = logging.getLogger(__name__)


@dataclass
class PassResult:
    """Outcome of one batch."""

    relevant: bool = False
    trigger: str | None = None
    modules: list[GeneratedModule] = field(default_factory=list)
    failures: dict[str, str] = field(default_factory=dict)
    first_id: int | None = None
    last_id: int | None = None

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict:
        return {
            "relevant": self.relevant,
            "trigger": self.trigger,
            "modules": [
                {
                    "path": m.path,
                    "config": m.config.location,
                    "container_id": m.container_id,
                    "entries": [e.model_dump() for e in m.entries],
                }
                for m in self.modules
            ],
            "failures": self.failures,
            "ids": {"first": self.first_id, "last": self.last_id},
        }


class AssetPostprocessor:
    """Entry point the host calls once per batch.

    Holds no cache between batches; the only thing carried over is the
    last identifier issued, so ``timestamp`` seeding keeps increasing.
    """

    def __init__(self, host: AssetHost, settings: Settings | None = None):
        self._host = host
        self._settings = settings or Settings()
        self._dialect = get_dialect(self._settings.dialect)
        self._generator = MenuModuleGenerator(host, self._settings, self._dialect)
        self._id_floor = 0

    @property
    def host(self) -> AssetHost:
        return self._host

    @property
    def settings(self) -> Settings:
        return self._settings

    def on_assets_changed(
        self,
        imported: Iterable[str],
        deleted: Iterable[str] = (),
        moved: Iterable[str] = (),
        moved_from: Iterable[str] = (),
    ) -> PassResult:
        """Handle one batch.

        Deleted and moved paths are accepted but never classified.

        Raises:
            GenerationError: If a module could not be written.
        """
        context = self._new_context()
        result = PassResult()
        try:
            classifier = ChangeClassifier(
                self._host,
                TemplateRootResolver(self._host, context, self._settings.templates_folder),
                self._dialect.template_suffix,
                self._settings.containment,
            )
            for path in imported:
                if classifier.is_relevant(path):
                    result.relevant = True
                    result.trigger = path
                    break

            if not result.relevant:
                logger.debug("Batch has no relevant change")
                return result

            logger.info("Regenerating menus (triggered by %s)", result.trigger)
            self._run_pass(context, result)
            return result
        finally:
            context.clear()

    def on_batch(self, batch: ChangeBatch) -> PassResult:
        """``on_assets_changed`` for a ChangeBatch."""
        return self.on_assets_changed(batch.imported, batch.deleted, batch.moved, batch.moved_from)

    def regenerate(self) -> PassResult:
        """Regenerate every module without classifying anything."""
        context = self._new_context()
        result = PassResult(relevant=True)
        try:
            logger.info("Regenerating menus")
            self._run_pass(context, result)
            return result
        finally:
            context.clear()

    def _new_context(self) -> PassContext:
        return PassContext.seeded(self._settings.id_seed, floor=self._id_floor)

    def _run_pass(self, context: PassContext, result: PassResult) -> None:
        result.first_id = context.peek_id
        config_paths = find_config_paths(self._host, context)
        try:
            result.modules = self._generator.generate_all(config_paths, context)
        except GenerationError as e:
            result.modules = e.written
            result.failures = {path: str(err) for path, err in e.failures.items()}
            raise
        finally:
            result.last_id = context.last_id
            if context.last_id is None:
                result.first_id = None
            else:
                self._id_floor = context.last_id + 1
            logger.info(
                "Pass done: %d module(s) written, %d failed",
                len(result.modules), len(result.failures),
            )
