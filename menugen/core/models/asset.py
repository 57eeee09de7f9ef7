"""
Asset models — what the host's asset store reports about its files.

The host answers "what type is this asset?" with an ``AssetType``, and
delivers filesystem changes in ``ChangeBatch`` records.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class AssetType(str, Enum):
    """Declared type of an asset in the store."""

    FOLDER = "folder"
    MENU_CONFIG = "menu_config"
    TEXT = "text"
    SCRIPT = "script"   # source files are text assets too

    def is_a(self, other: AssetType) -> bool:
        """True if this type is ``other`` or derives from it."""
        if self is other:
            return True
        return other in _BASE_TYPES.get(self, ())


_BASE_TYPES: dict[AssetType, tuple[AssetType, ...]] = {
    AssetType.SCRIPT: (AssetType.TEXT,),
}


class ChangeBatch(BaseModel):
    """One batch of asset changes reported by the host.

    Only ``imported`` paths are ever classified; the rest are accepted
    for completeness.
    """

    imported: list[str] = Field(default_factory=list)
    deleted: list[str] = Field(default_factory=list)
    moved: list[str] = Field(default_factory=list)
    moved_from: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.imported or self.deleted or self.moved or self.moved_from)

    def merge(self, other: ChangeBatch) -> ChangeBatch:
        """Combine two batches, keeping first-seen order and no duplicates."""

        def _union(a: list[str], b: list[str]) -> list[str]:
            return list(dict.fromkeys([*a, *b]))

        return ChangeBatch(
            imported=_union(self.imported, other.imported),
            deleted=_union(self.deleted, other.deleted),
            moved=_union(self.moved, other.moved),
            moved_from=_union(self.moved_from, other.moved_from),
        )


# File extension → declared type, for hosts backed by plain files
_EXTENSION_TYPES: dict[str, AssetType] = {
    ".menuconfig": AssetType.MENU_CONFIG,
    ".cs": AssetType.SCRIPT,
    ".py": AssetType.SCRIPT,
    **{
        ext: AssetType.TEXT
        for ext in (
            ".txt", ".md", ".json", ".xml", ".csv",
            ".yaml", ".yml", ".html", ".htm", ".bytes",
        )
    },
}


def type_for_filename(name: str) -> AssetType | None:
    """Declared type of a file by its extension, or None when unknown."""
    dot = name.rfind(".")
    if dot <= 0:
        return None
    return _EXTENSION_TYPES.get(name[dot:].lower())
