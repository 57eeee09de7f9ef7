"""
Mock host — in-memory asset store for tests.

Holds a dict of "disk" files and a separate index that only catches up
on ``refresh()``, so tests see the same visibility rules as a real
host.  Failures can be injected per path.
"""

from __future__ import annotations

import fnmatch
from collections.abc import Iterable

import yaml
from pydantic import ValidationError

from menugen.adapters.base import AssetHost
from menugen.core import store_paths
from menugen.core.models.asset import AssetType, ChangeBatch, type_for_filename
from menugen.core.models.menu_config import MenuConfig


class MockAssetHost(AssetHost):
    """In-memory asset store.

    Files added with ``add_file`` are on "disk" but not indexed until
    ``refresh()`` (or ``add_file(..., index=True)``).  Handles are
    ``"h:<path>"``.
    """

    def __init__(self, folders: Iterable[str] = ("Assets",)):
        self._files: dict[str, str] = {}
        self._folders: set[str] = set()
        self._index: dict[str, AssetType] = {}
        self._pending = ChangeBatch()
        self._search_reversed = False
        self._unloadable: set[str] = set()
        self._write_failures: dict[str, OSError] = {}
        self._call_log: list[tuple[str, tuple]] = []
        self.refresh_count = 0

        for folder in folders:
            self.add_folder(folder)

    @property
    def name(self) -> str:
        return "mock"

    @property
    def call_log(self) -> list[tuple[str, tuple]]:
        """Every host call as (operation, args)."""
        return self._call_log

    def calls(self, operation: str) -> list[tuple]:
        """Arguments of every call to ``operation``."""
        return [args for op, args in self._call_log if op == operation]

    # ── Test setup ──────────────────────────────────────────────

    def add_folder(self, path: str, index: bool = True) -> None:
        path = store_paths.normalize(path)
        parts = path.split("/")
        for i in range(1, len(parts) + 1):
            folder = "/".join(parts[:i])
            self._folders.add(folder)
            if index:
                self._index[folder] = AssetType.FOLDER

    def add_file(self, path: str, text: str = "", index: bool = True) -> str:
        path = store_paths.normalize(path)
        self.add_folder(store_paths.parent(path), index=index)
        self._files[path] = text
        asset_type = type_for_filename(path.rsplit("/", 1)[-1])
        if index and asset_type is not None:
            self._index[path] = asset_type
        return path

    def add_menu_config(
        self,
        path: str,
        submenu_label: str | None = None,
        new_file_prefix: str | None = None,
        index: bool = True,
    ) -> str:
        data = {}
        if submenu_label is not None:
            data["submenu_label"] = submenu_label
        if new_file_prefix is not None:
            data["new_file_prefix"] = new_file_prefix
        return self.add_file(path, yaml.safe_dump(data) if data else "", index=index)

    def remove_file(self, path: str) -> None:
        self._files.pop(store_paths.normalize(path), None)

    def read_file(self, path: str) -> str | None:
        """Raw "disk" content, bypassing the index."""
        return self._files.get(store_paths.normalize(path))

    def files_under(self, folder: str) -> list[str]:
        return sorted(p for p in self._files if store_paths.is_within(p, folder) and p != folder)

    def set_unloadable(self, path: str) -> None:
        """Make ``load_menu_config`` fail for ``path``."""
        self._unloadable.add(store_paths.normalize(path))

    def set_write_failure(self, path: str, error: OSError | None = None) -> None:
        """Make ``write_text`` raise for ``path``."""
        self._write_failures[store_paths.normalize(path)] = error or PermissionError(
            f"Mock write denied: {path}"
        )

    def set_search_reversed(self, enabled: bool = True) -> None:
        """Return search results in reverse index order."""
        self._search_reversed = enabled

    # ── AssetHost ───────────────────────────────────────────────

    def find_assets(
        self,
        asset_type: AssetType,
        name_pattern: str | None = None,
        folders: Iterable[str] | None = None,
    ) -> list[str]:
        folder_list = list(folders) if folders is not None else None
        self._call_log.append(("find_assets", (asset_type, name_pattern, folder_list)))

        handles = []
        for path, path_type in self._index.items():
            if not path_type.is_a(asset_type):
                continue
            name = path.rsplit("/", 1)[-1]
            if name_pattern and not fnmatch.fnmatchcase(name.lower(), name_pattern.lower()):
                continue
            if folder_list is not None and not any(
                path != store_paths.normalize(f) and store_paths.is_within(path, f)
                for f in folder_list
            ):
                continue
            handles.append(f"h:{path}")
        return handles[::-1] if self._search_reversed else handles

    def handle_to_path(self, handle: str) -> str | None:
        path = handle[2:] if handle.startswith("h:") else None
        return path if path in self._index else None

    def asset_type(self, path: str) -> AssetType | None:
        return self._index.get(store_paths.normalize(path))

    def load_menu_config(self, path: str) -> MenuConfig | None:
        path = store_paths.normalize(path)
        self._call_log.append(("load_menu_config", (path,)))
        if path in self._unloadable or self._index.get(path) is not AssetType.MENU_CONFIG:
            return None
        text = self._files.get(path)
        if text is None:
            return None
        try:
            data = yaml.safe_load(text) or {}
            return MenuConfig.model_validate({**data, "location": path})
        except (yaml.YAMLError, TypeError, ValidationError):
            return None

    def load_text(self, path: str) -> str | None:
        path = store_paths.normalize(path)
        asset_type = self._index.get(path)
        if asset_type is None or not asset_type.is_a(AssetType.TEXT):
            return None
        return self._files.get(path)

    def is_folder(self, path: str) -> bool:
        return store_paths.normalize(path) in self._folders

    def create_folder(self, parent: str, name: str) -> str:
        parent = store_paths.normalize(parent)
        self._call_log.append(("create_folder", (parent, name)))
        if parent not in self._folders:
            raise FileNotFoundError(f"Parent folder does not exist: {parent}")
        path = f"{parent}/{name}"
        self._folders.add(path)
        self._index[path] = AssetType.FOLDER
        return path

    def write_text(self, path: str, text: str) -> None:
        path = store_paths.normalize(path)
        self._call_log.append(("write_text", (path,)))
        if path in self._write_failures:
            raise self._write_failures[path]
        if store_paths.parent(path) not in self._folders:
            raise FileNotFoundError(f"Folder does not exist: {store_paths.parent(path)}")
        self._files[path] = text

    def refresh(self) -> ChangeBatch:
        self.refresh_count += 1
        self._call_log.append(("refresh", ()))

        current: dict[str, AssetType] = {f: AssetType.FOLDER for f in sorted(self._folders)}
        for path in sorted(self._files):
            asset_type = type_for_filename(path.rsplit("/", 1)[-1])
            if asset_type is not None:
                current[path] = asset_type

        imported = [p for p in current if p not in self._index]
        deleted = [p for p in self._index if p not in current]
        self._index = current

        batch = ChangeBatch(imported=imported, deleted=deleted)
        self._pending = self._pending.merge(batch)
        return batch

    def take_pending(self) -> ChangeBatch:
        pending, self._pending = self._pending, ChangeBatch()
        return pending
