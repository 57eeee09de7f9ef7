"""
Menu runtime — what modules generated in the ``python`` dialect bind to.

A generated module looks like::

    class ScriptCreateMenu_42:
        @staticmethod
        @menu_item("Assets/Create/Tools/Service", priority=80)
        def create_43():
            return ScriptCreateMenu_42.create_script("Assets/.../Service.py.txt", "NewService")

Importing it registers its entries here.  A UI lists ``registered_items()``
and calls ``invoke(label)`` when one is chosen.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

SCRIPT_NAME_KEYWORD = "#SCRIPTNAME#"


@dataclass(frozen=True)
class MenuItem:
    label: str
    priority: int
    callback: Callable[[], Any]


_items: dict[str, MenuItem] = {}


def menu_item(label: str, priority: int = 80) -> Callable[[Callable[[], Any]], Callable[[], Any]]:
    """Register the decorated function under ``label``.

    A later registration for the same label replaces the earlier one,
    so re-importing a regenerated module is safe.
    """

    def decorator(fn: Callable[[], Any]) -> Callable[[], Any]:
        _items[label] = MenuItem(label=label, priority=priority, callback=fn)
        return fn

    return decorator


def registered_items() -> list[MenuItem]:
    """Registered items by priority, then label."""
    return sorted(_items.values(), key=lambda item: (item.priority, item.label))


def invoke(label: str) -> Any:
    """Run the item registered under ``label``.

    Raises:
        KeyError: If nothing is registered under ``label``.
    """
    return _items[label].callback()


def clear() -> None:
    """Forget every registered item."""
    _items.clear()


def create_script(template_path: str, script_name: str, target_dir: Path | None = None) -> Path:
    """Create a new script from a template.

    The template's extension pair ``.<lang>.txt`` gives the new file its
    extension; every ``#SCRIPTNAME#`` in the template becomes ``script_name``.

    Args:
        template_path: Template file (relative to the working directory
            or absolute).
        script_name: Name of the new script, without extension.
        target_dir: Folder to create it in (default: cwd).

    Returns:
        Path of the created file.

    Raises:
        FileExistsError: If the target file already exists.
    """
    template = Path(template_path)
    text = template.read_text(encoding="utf-8")

    language_ext = Path(template.stem).suffix  # "Foo.py.txt" → ".py"
    target = (target_dir or Path.cwd()) / f"{script_name}{language_ext}"
    if target.exists():
        raise FileExistsError(f"Script already exists: {target}")

    target.write_text(text.replace(SCRIPT_NAME_KEYWORD, script_name), encoding="utf-8")
    logger.info("Created %s from %s", target, template)
    return target
