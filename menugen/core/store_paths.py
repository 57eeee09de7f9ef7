"""
Store path helpers — asset paths are POSIX strings relative to the project.

Hosts on Windows report backslashes; everything is normalised to ``/``
before comparing.
"""

from __future__ import annotations

import posixpath


def normalize(path: str) -> str:
    """Forward slashes, no duplicate or trailing separators."""
    path = path.replace("\\", "/")
    if not path:
        return ""
    normalized = posixpath.normpath(path)
    return "" if normalized == "." else normalized


def parent(path: str) -> str:
    """Containing folder of a store path."""
    return posixpath.dirname(normalize(path))


def is_within(path: str, folder: str) -> bool:
    """True if ``path`` is ``folder`` or lies below it, by whole segments."""
    path, folder = normalize(path), normalize(folder)
    if not folder:
        return True
    return path == folder or path.startswith(folder + "/")


def has_prefix(path: str, folder: str) -> bool:
    """Plain string-prefix test.

    ``Foo/TemplatesExtra`` has the prefix ``Foo/Templates``.
    """
    return normalize(path).startswith(normalize(folder))


def ends_with(path: str, suffix: str) -> bool:
    """Case-insensitive suffix test."""
    return path.lower().endswith(suffix.lower())
