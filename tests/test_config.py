"""
Tests for configuration loading — menugen.yml and .menuconfig files.
"""

import textwrap
from pathlib import Path

import pytest

from menugen.core.config.loader import (
    ConfigError,
    dump_menu_config,
    find_settings_file,
    load_menu_config,
    load_settings,
    settings_root,
)
from menugen.core.models.menu_config import MenuConfig


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_load_valid_settings(self, tmp_path: Path):
        path = tmp_path / "menugen.yml"
        path.write_text(textwrap.dedent("""\
            assets_dir: Content
            dialect: python
            templates_folder: Stencils
            menu_priority: 10
            containment: prefix
        """))
        settings = load_settings(path)
        assert settings.assets_dir == "Content"
        assert settings.dialect == "python"
        assert settings.templates_folder == "Stencils"
        assert settings.menu_priority == 10
        assert settings.containment == "prefix"

    def test_wrapped_format(self, tmp_path: Path):
        path = tmp_path / "menugen.yml"
        path.write_text("menugen:\n  dialect: python\n")
        assert load_settings(path).dialect == "python"

    def test_missing_explicit_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.yml")

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "menugen.yml"
        path.write_text(":: invalid: yaml: [")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_non_mapping_raises(self, tmp_path: Path):
        path = tmp_path / "menugen.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_settings(path)

    def test_invalid_value_raises(self, tmp_path: Path):
        path = tmp_path / "menugen.yml"
        path.write_text("dialect: cobol\n")
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(path)

    def test_no_file_gives_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        isolated = tmp_path / "isolated"
        isolated.mkdir()
        monkeypatch.chdir(isolated)
        settings = load_settings(None)
        assert settings.dialect == "csharp"

    def test_no_file_required_raises(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        isolated = tmp_path / "isolated"
        isolated.mkdir()
        monkeypatch.chdir(isolated)
        with pytest.raises(ConfigError, match=r"No menugen\.yml found"):
            load_settings(None, required=True)


class TestFindSettingsFile:
    def test_find_in_current_dir(self, tmp_path: Path):
        (tmp_path / "menugen.yml").write_text("dialect: csharp\n")
        assert find_settings_file(tmp_path) == (tmp_path / "menugen.yml").resolve()

    def test_find_in_parent_dir(self, tmp_path: Path):
        (tmp_path / "menugen.yml").write_text("dialect: csharp\n")
        child = tmp_path / "Assets" / "Tools"
        child.mkdir(parents=True)
        assert find_settings_file(child) == (tmp_path / "menugen.yml").resolve()

    def test_settings_root(self, tmp_path: Path):
        path = tmp_path / "menugen.yml"
        assert settings_root(path) == tmp_path.resolve()


class TestLoadMenuConfig:
    def test_load_fields(self, tmp_path: Path):
        path = tmp_path / "Menu.menuconfig"
        path.write_text("submenu_label: Tools\nnew_file_prefix: My\n")
        config = load_menu_config(path, "Assets/Menu.menuconfig")
        assert config.location == "Assets/Menu.menuconfig"
        assert config.submenu_label == "Tools"
        assert config.new_file_prefix == "My"

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "Menu.menuconfig"
        path.write_text("")
        config = load_menu_config(path, "Assets/Menu.menuconfig")
        assert config.submenu_label == "My Game"
        assert config.new_file_prefix == "New"

    def test_menu_wrapper(self, tmp_path: Path):
        path = tmp_path / "Menu.menuconfig"
        path.write_text("menu:\n  submenu_label: Wrapped\n")
        assert load_menu_config(path, "Assets/Menu.menuconfig").submenu_label == "Wrapped"

    def test_half_written_file_raises(self, tmp_path: Path):
        path = tmp_path / "Menu.menuconfig"
        path.write_text("submenu_label: [unterminated\n")
        with pytest.raises(ConfigError):
            load_menu_config(path, "Assets/Menu.menuconfig")

    def test_non_utf8_file_raises(self, tmp_path: Path):
        path = tmp_path / "Menu.menuconfig"
        path.write_bytes(b"submenu_label: \xff\xfe broken\n")
        with pytest.raises(ConfigError, match="Cannot read"):
            load_menu_config(path, "Assets/Menu.menuconfig")

    def test_wrong_field_type_raises(self, tmp_path: Path):
        path = tmp_path / "Menu.menuconfig"
        path.write_text("submenu_label: [a, b]\n")
        with pytest.raises(ConfigError, match="Invalid menu config"):
            load_menu_config(path, "Assets/Menu.menuconfig")

    def test_dump_round_trip(self, tmp_path: Path):
        config = MenuConfig(location="Assets/M.menuconfig", submenu_label="Tools", new_file_prefix="X")
        path = tmp_path / "M.menuconfig"
        path.write_text(dump_menu_config(config))
        assert load_menu_config(path, "Assets/M.menuconfig") == config
