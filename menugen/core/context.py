"""
Pass context — the state of one batch, from classification to regeneration.

A ``PassContext`` is created when the host delivers a batch and dropped
when the batch has been handled, whatever the outcome.  It holds:

    - the menu config paths found by the first search of the batch
    - the resolved template roots (filled lazily by the resolver)
    - the identifier counter shared by every module generated in the pass

Nothing here is module-level: two passes never share a cache.
"""

from __future__ import annotations

import time
from typing import Literal

SeedPolicy = Literal["timestamp", "zero"]


def timestamp_seed() -> int:
    """Current time in 100ns ticks."""
    return time.time_ns() // 100


class PassContext:
    """Per-batch cache and identifier counter.

    Args:
        id_seed: First identifier handed out by ``next_id``.
    """

    def __init__(self, id_seed: int = 0):
        self._next_id = id_seed
        self._first_id = id_seed
        self.config_paths: list[str] | None = None
        self.template_roots: list[str] = []

    @classmethod
    def seeded(cls, policy: SeedPolicy, floor: int = 0) -> PassContext:
        """New context seeded per ``policy``, never below ``floor``.

        ``floor`` is one past the last identifier issued by a previous
        pass, so identifiers keep increasing from pass to pass.
        """
        if policy == "zero":
            return cls(0)
        return cls(max(timestamp_seed(), floor))

    def next_id(self) -> int:
        """Consume the current identifier and advance."""
        value = self._next_id
        self._next_id += 1
        return value

    @property
    def ids_issued(self) -> int:
        return self._next_id - self._first_id

    @property
    def last_id(self) -> int | None:
        """Last identifier handed out, or None if none was."""
        return self._next_id - 1 if self.ids_issued else None

    @property
    def peek_id(self) -> int:
        return self._next_id

    def clear(self) -> None:
        """Drop the cached configs and roots."""
        self.config_paths = None
        self.template_roots.clear()
