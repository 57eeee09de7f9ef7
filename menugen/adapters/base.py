"""
Asset host base — the contract between the generator and the asset store.

The generation pipeline never touches the filesystem directly.  Every
query it makes (find assets, load a config, check a folder, write a
file, refresh the index) goes through an ``AssetHost``.  Hosts keep an
*index* of the store: searches answer from the index, and files written
with ``write_text`` only become searchable after the next ``refresh``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from menugen.core.models.asset import AssetType, ChangeBatch
from menugen.core.models.menu_config import MenuConfig


class AssetHost(ABC):
    """Abstract base class for asset stores.

    To create a new host:
        1. Subclass AssetHost
        2. Implement the query surface below
        3. Make ``refresh`` report what changed since the previous call
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Host identifier (e.g. 'filesystem', 'mock')."""

    # ── Queries ─────────────────────────────────────────────────

    @abstractmethod
    def find_assets(
        self,
        asset_type: AssetType,
        name_pattern: str | None = None,
        folders: Iterable[str] | None = None,
    ) -> list[str]:
        """Search the index.

        Args:
            asset_type: Only assets whose type is-a ``asset_type``.
            name_pattern: Optional glob matched case-insensitively
                against the file name.
            folders: Optional folders; matches anywhere below any of
                them, at any depth.

        Returns:
            Opaque handles, in the host's own order.
        """

    @abstractmethod
    def handle_to_path(self, handle: str) -> str | None:
        """Store path for a handle returned by ``find_assets``."""

    @abstractmethod
    def asset_type(self, path: str) -> AssetType | None:
        """Declared type of the asset at ``path``, or None."""

    @abstractmethod
    def load_menu_config(self, path: str) -> MenuConfig | None:
        """Load the config at ``path``. None if it is missing or unreadable."""

    @abstractmethod
    def load_text(self, path: str) -> str | None:
        """Text content of a text asset. None if it is missing."""

    @abstractmethod
    def is_folder(self, path: str) -> bool:
        """True if ``path`` is an existing folder."""

    # ── Mutations ───────────────────────────────────────────────

    @abstractmethod
    def create_folder(self, parent: str, name: str) -> str:
        """Create a single folder ``name`` inside the existing ``parent``.

        Returns:
            The new folder's store path.

        Raises:
            FileNotFoundError: If ``parent`` does not exist.
        """

    @abstractmethod
    def write_text(self, path: str, text: str) -> None:
        """Overwrite ``path`` with ``text``.

        Raises:
            OSError: If the write fails. Nothing is rolled back.
        """

    @abstractmethod
    def refresh(self) -> ChangeBatch:
        """Re-scan the store so newly written files become visible.

        Returns:
            The changes found by this refresh. They are also queued
            for ``take_pending``.
        """

    @abstractmethod
    def take_pending(self) -> ChangeBatch:
        """Return and clear every change found by refreshes since the last call."""

    # ── Conveniences ────────────────────────────────────────────

    def find_paths(
        self,
        asset_type: AssetType,
        name_pattern: str | None = None,
        folders: Iterable[str] | None = None,
    ) -> list[str]:
        """``find_assets`` resolved to paths, dropping stale handles."""
        paths = []
        for handle in self.find_assets(asset_type, name_pattern, folders):
            path = self.handle_to_path(handle)
            if path is not None:
                paths.append(path)
        return paths

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
