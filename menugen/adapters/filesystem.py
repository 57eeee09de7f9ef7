"""
Filesystem host — an asset store backed by a project directory.

Everything below ``<project>/<assets_dir>`` is an asset.  Store paths are
relative to the project root, so with the default settings they all
start with ``Assets/``.

The host keeps an index of (type, mtime, size) per path.  ``refresh()``
walks the directory, diffs it against the index and reports the result
as a ``ChangeBatch``:

- imported: new paths, and files whose mtime or size changed
- deleted:  paths that vanished
- moved / moved_from: a vanished file and a new file with the same
  name and size in one refresh are reported as a move
"""

from __future__ import annotations

import fnmatch
import logging
import os
import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from menugen.adapters.base import AssetHost
from menugen.core import store_paths
from menugen.core.config.loader import ConfigError, load_menu_config
from menugen.core.models.asset import AssetType, ChangeBatch, type_for_filename
from menugen.core.models.menu_config import MenuConfig

logger = logging.getLogger(__name__)

_HANDLE_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "menugen:asset")


@dataclass(frozen=True)
class _IndexEntry:
    asset_type: AssetType
    mtime_ns: int = 0
    size: int = 0


def handle_for(path: str) -> str:
    """Deterministic handle for a store path."""
    return uuid.uuid5(_HANDLE_NAMESPACE, path).hex


class FilesystemAssetHost(AssetHost):
    """Asset store over a real directory tree.

    Args:
        project_root: Directory the store paths are relative to.
        assets_dir: Name of the asset folder inside ``project_root``.
    """

    def __init__(self, project_root: Path, assets_dir: str = "Assets"):
        self._root = Path(project_root).resolve()
        self._assets_dir = store_paths.normalize(assets_dir)
        self._index: dict[str, _IndexEntry] = {}
        self._handles: dict[str, str] = {}
        self._pending = ChangeBatch()

    @property
    def name(self) -> str:
        return "filesystem"

    @property
    def project_root(self) -> Path:
        return self._root

    @property
    def assets_dir(self) -> str:
        return self._assets_dir

    def to_disk(self, path: str) -> Path:
        """Filesystem location of a store path."""
        return self._root / store_paths.normalize(path)

    def to_store(self, disk_path: Path) -> str:
        """Store path of a filesystem location inside the project."""
        return Path(disk_path).resolve().relative_to(self._root).as_posix()

    # ── Queries ─────────────────────────────────────────────────

    def find_assets(
        self,
        asset_type: AssetType,
        name_pattern: str | None = None,
        folders: Iterable[str] | None = None,
    ) -> list[str]:
        folder_list = [store_paths.normalize(f) for f in folders] if folders is not None else None
        pattern = name_pattern.lower() if name_pattern else None

        handles = []
        for path, entry in self._index.items():
            if not entry.asset_type.is_a(asset_type):
                continue
            if pattern and not fnmatch.fnmatchcase(path.rsplit("/", 1)[-1].lower(), pattern):
                continue
            if folder_list is not None and not any(
                path != folder and store_paths.is_within(path, folder) for folder in folder_list
            ):
                continue
            handles.append(handle_for(path))
        return handles

    def handle_to_path(self, handle: str) -> str | None:
        return self._handles.get(handle)

    def asset_type(self, path: str) -> AssetType | None:
        entry = self._index.get(store_paths.normalize(path))
        return entry.asset_type if entry else None

    def load_menu_config(self, path: str) -> MenuConfig | None:
        path = store_paths.normalize(path)
        if self.asset_type(path) is not AssetType.MENU_CONFIG:
            return None
        try:
            return load_menu_config(self.to_disk(path), path)
        except ConfigError as e:
            logger.debug("Cannot load menu config %s: %s", path, e)
            return None

    def load_text(self, path: str) -> str | None:
        path = store_paths.normalize(path)
        asset_type = self.asset_type(path)
        if asset_type is None or not asset_type.is_a(AssetType.TEXT):
            return None
        try:
            return self.to_disk(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read text asset %s: %s", path, e)
            return None

    def is_folder(self, path: str) -> bool:
        return self.to_disk(path).is_dir()

    # ── Mutations ───────────────────────────────────────────────

    def create_folder(self, parent: str, name: str) -> str:
        parent = store_paths.normalize(parent)
        parent_dir = self.to_disk(parent)
        if not parent_dir.is_dir():
            raise FileNotFoundError(f"Parent folder does not exist: {parent}")

        path = f"{parent}/{name}" if parent else name
        self.to_disk(path).mkdir(exist_ok=True)
        self._add(path, _IndexEntry(AssetType.FOLDER))
        logger.debug("Created folder %s", path)
        return path

    def write_text(self, path: str, text: str) -> None:
        self.to_disk(path).write_text(text, encoding="utf-8")

    def refresh(self) -> ChangeBatch:
        current = self._scan()
        previous = self._index

        imported = [
            path for path, entry in current.items()
            if path not in previous or (
                entry.asset_type is not AssetType.FOLDER and entry != previous[path]
            )
        ]
        deleted = [path for path in previous if path not in current]

        moved: list[str] = []
        moved_from: list[str] = []
        for old in list(deleted):
            old_entry = previous[old]
            if old_entry.asset_type is AssetType.FOLDER:
                continue
            old_name = old.rsplit("/", 1)[-1]
            for new in imported:
                if new in previous or new in moved:
                    continue
                new_entry = current[new]
                if new.rsplit("/", 1)[-1] == old_name and new_entry.size == old_entry.size:
                    moved.append(new)
                    moved_from.append(old)
                    deleted.remove(old)
                    imported.remove(new)
                    break

        self._index = current
        self._handles = {handle_for(path): path for path in current}

        batch = ChangeBatch(
            imported=imported,
            deleted=deleted,
            moved=moved,
            moved_from=moved_from,
        )
        if not batch.is_empty:
            logger.debug(
                "Refresh: %d imported, %d deleted, %d moved",
                len(imported), len(deleted), len(moved),
            )
            self._pending = self._pending.merge(batch)
        return batch

    def take_pending(self) -> ChangeBatch:
        pending, self._pending = self._pending, ChangeBatch()
        return pending

    # ── Internals ───────────────────────────────────────────────

    def _add(self, path: str, entry: _IndexEntry) -> None:
        self._index[path] = entry
        self._handles[handle_for(path)] = path

    def _scan(self) -> dict[str, _IndexEntry]:
        """Walk the asset folder in sorted order."""
        base = self.to_disk(self._assets_dir)
        found: dict[str, _IndexEntry] = {}
        if not base.is_dir():
            return found

        if self._assets_dir:
            found[self._assets_dir] = _IndexEntry(AssetType.FOLDER)
        for dirpath, dirnames, filenames in os.walk(base):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
            rel_dir = Path(dirpath).relative_to(self._root).as_posix()
            prefix = "" if rel_dir == "." else f"{rel_dir}/"

            for d in dirnames:
                found[f"{prefix}{d}"] = _IndexEntry(AssetType.FOLDER)

            for filename in sorted(filenames):
                if filename.startswith("."):
                    continue
                asset_type = type_for_filename(filename)
                if asset_type is None:
                    continue
                try:
                    st = os.stat(os.path.join(dirpath, filename))
                except OSError:
                    continue  # vanished mid-walk
                found[f"{prefix}{filename}"] = _IndexEntry(asset_type, st.st_mtime_ns, st.st_size)
        return found
