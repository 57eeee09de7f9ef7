"""Adapters — asset store bindings for the generation pipeline.

Public re-exports for convenient access.
"""

from menugen.adapters.base import AssetHost
from menugen.adapters.filesystem import FilesystemAssetHost
from menugen.adapters.mock import MockAssetHost

__all__ = [
    "AssetHost",
    "FilesystemAssetHost",
    "MockAssetHost",
]
