"""
Output dialects — the source layout of a generated menu module.

Each dialect fixes three things:

    - the language extension (``cs``) and so the template suffix
      (``.cs.txt``) and the example asset name (``ScriptTemplateExample.cs``)
    - the extension of the generated file
    - the text of the module: preamble, container, shared routine, entries

Output only has to be valid source in the target language; the exact
indentation is not a contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from menugen.core.models.template import MenuEntry


class Dialect(ABC):
    """Base class for output languages."""

    name: str = ""
    language_ext: str = ""

    @property
    def output_ext(self) -> str:
        return self.language_ext

    @property
    def template_suffix(self) -> str:
        """Two-part suffix marking a template: ``.<lang>.txt``."""
        return f".{self.language_ext}.txt"

    def example_file_name(self, example_base: str) -> str:
        """Name of the example asset copied into new template roots."""
        return f"{example_base}.{self.language_ext}"

    def base_name(self, template_name: str) -> str:
        """Template file name without the template suffix."""
        if template_name.lower().endswith(self.template_suffix):
            return template_name[: -len(self.template_suffix)]
        return template_name

    @abstractmethod
    def render(
        self,
        *,
        source: str,
        container_id: int,
        entries: list[MenuEntry],
        menu_root: str,
        priority: int,
    ) -> str:
        """Full text of a generated module."""


class CSharpDialect(Dialect):
    """Unity editor script: ``[MenuItem]`` methods in a static class."""

    name = "csharp"
    language_ext = "cs"

    def render(
        self,
        *,
        source: str,
        container_id: int,
        entries: list[MenuEntry],
        menu_root: str,
        priority: int,
    ) -> str:
        lines = [
            f"// Generated by menugen from {source}. Changes will be overwritten.",
            "using UnityEditor;",
            "",
            "namespace UnityScriptTemplate_Generated",
            "{",
            f"\tpublic static partial class ScriptCreateMenu_{container_id}",
            "\t{",
            "\t\tpublic static void CreateScript(string templatePath, string scriptName)",
            "\t\t{",
            "\t\t\tProjectWindowUtil.CreateScriptAssetFromTemplateFile(",
            "\t\t\t\ttemplatePath,",
            "\t\t\t\tscriptName);",
            "\t\t}",
        ]
        for entry in entries:
            menu_path = _cs_string(f"{menu_root}/{entry.label}")
            lines += [
                "",
                f"\t\t[MenuItem({menu_path}, priority = {priority})]",
                f"\t\tpublic static void Create_{entry.entry_id}()",
                "\t\t{",
                "\t\t\tCreateScript(",
                f"\t\t\t\t{_cs_string(entry.template_path)},",
                f"\t\t\t\t{_cs_string(entry.new_name)});",
                "\t\t}",
            ]
        lines += ["\t}", "}", ""]
        return "\n".join(lines)


class PythonDialect(Dialect):
    """Python module registering entries with ``menugen.menu``."""

    name = "python"
    language_ext = "py"

    def render(
        self,
        *,
        source: str,
        container_id: int,
        entries: list[MenuEntry],
        menu_root: str,
        priority: int,
    ) -> str:
        container = f"ScriptCreateMenu_{container_id}"
        lines = [
            f"# Generated by menugen from {source}. Changes will be overwritten.",
            "from menugen.menu import create_script, menu_item",
            "",
            "",
            f"class {container}:",
            "    @staticmethod",
            "    def create_script(template_path, script_name):",
            "        return create_script(template_path, script_name)",
        ]
        for entry in entries:
            lines += [
                "",
                "    @staticmethod",
                f"    @menu_item({f'{menu_root}/{entry.label}'!r}, priority={priority})",
                f"    def create_{entry.entry_id}():",
                f"        return {container}.create_script(",
                f"            {entry.template_path!r},",
                f"            {entry.new_name!r},",
                "        )",
            ]
        lines.append("")
        return "\n".join(lines)


DIALECTS: dict[str, type[Dialect]] = {
    CSharpDialect.name: CSharpDialect,
    PythonDialect.name: PythonDialect,
}


def get_dialect(name: str) -> Dialect:
    """Dialect instance by name.

    Raises:
        KeyError: If the dialect is unknown.
    """
    try:
        return DIALECTS[name]()
    except KeyError:
        raise KeyError(f"Unknown dialect '{name}'. Valid: {', '.join(sorted(DIALECTS))}") from None


def _cs_string(value: str) -> str:
    """C# regular string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f'"{escaped}"'
