"""
Tests for the template root resolver and the change classifier.
"""

import pytest

from menugen.adapters.mock import MockAssetHost
from menugen.core.context import PassContext
from menugen.core.services.change_classifier import ChangeClassifier
from menugen.core.services.template_roots import TemplateRootResolver, find_config_paths


def _classifier(host, context=None, containment="segment"):
    context = context or PassContext()
    resolver = TemplateRootResolver(host, context)
    return ChangeClassifier(host, resolver, ".cs.txt", containment)


# ═══════════════════════════════════════════════════════════════════
#  TemplateRootResolver
# ═══════════════════════════════════════════════════════════════════


class TestTemplateRootResolver:
    def test_not_ready_without_configs(self, mock_host: MockAssetHost):
        resolver = TemplateRootResolver(mock_host, PassContext())
        assert resolver.resolve_roots() is None

    def test_one_root_per_config(self, mock_host: MockAssetHost):
        mock_host.add_menu_config("Assets/A/Menu.menuconfig")
        mock_host.add_menu_config("Assets/B/Menu.menuconfig")
        resolver = TemplateRootResolver(mock_host, PassContext())
        assert resolver.resolve_roots() == ["Assets/A/Templates", "Assets/B/Templates"]

    def test_roots_deduplicated(self, mock_host: MockAssetHost):
        mock_host.add_menu_config("Assets/A/One.menuconfig")
        mock_host.add_menu_config("Assets/A/Two.menuconfig")
        resolver = TemplateRootResolver(mock_host, PassContext())
        assert resolver.resolve_roots() == ["Assets/A/Templates"]

    def test_custom_folder_name(self, mock_host: MockAssetHost):
        mock_host.add_menu_config("Assets/A/Menu.menuconfig")
        resolver = TemplateRootResolver(mock_host, PassContext(), "Stencils")
        assert resolver.resolve_roots() == ["Assets/A/Stencils"]

    def test_cached_within_pass(self, mock_host: MockAssetHost):
        mock_host.add_menu_config("Assets/A/Menu.menuconfig")
        context = PassContext()
        resolver = TemplateRootResolver(mock_host, context)
        resolver.resolve_roots()
        mock_host.add_menu_config("Assets/B/Menu.menuconfig")
        assert resolver.resolve_roots() == ["Assets/A/Templates"]
        assert len(mock_host.calls("find_assets")) == 1

    def test_cleared_context_recomputes(self, mock_host: MockAssetHost):
        mock_host.add_menu_config("Assets/A/Menu.menuconfig")
        context = PassContext()
        TemplateRootResolver(mock_host, context).resolve_roots()
        context.clear()
        mock_host.add_menu_config("Assets/B/Menu.menuconfig")
        roots = TemplateRootResolver(mock_host, context).resolve_roots()
        assert roots == ["Assets/A/Templates", "Assets/B/Templates"]

    def test_find_config_paths_cached(self, mock_host: MockAssetHost):
        mock_host.add_menu_config("Assets/A/Menu.menuconfig")
        context = PassContext()
        assert find_config_paths(mock_host, context) == ["Assets/A/Menu.menuconfig"]
        find_config_paths(mock_host, context)
        assert len(mock_host.calls("find_assets")) == 1


# ═══════════════════════════════════════════════════════════════════
#  ChangeClassifier
# ═══════════════════════════════════════════════════════════════════


class TestClassifyConfigs:
    def test_loadable_config_relevant(self, mock_host: MockAssetHost):
        mock_host.add_menu_config("Assets/A/Menu.menuconfig")
        assert _classifier(mock_host).is_relevant("Assets/A/Menu.menuconfig")

    def test_unloadable_config_not_relevant(self, mock_host: MockAssetHost):
        mock_host.add_menu_config("Assets/A/Menu.menuconfig")
        mock_host.set_unloadable("Assets/A/Menu.menuconfig")
        assert not _classifier(mock_host).is_relevant("Assets/A/Menu.menuconfig")


class TestClassifyTemplates:
    @pytest.fixture
    def host(self, mock_host: MockAssetHost) -> MockAssetHost:
        mock_host.add_menu_config("Assets/Tools/Menu.menuconfig")
        mock_host.add_file("Assets/Tools/Templates/Foo.cs.txt")
        mock_host.add_file("Assets/Tools/Templates/Nested/Bar.CS.TXT")
        mock_host.add_file("Assets/Tools/Templates/Readme.txt")
        mock_host.add_file("Assets/Elsewhere/Foo.cs.txt")
        mock_host.add_file("Assets/Tools/TemplatesExtra/Foo.cs.txt")
        mock_host.add_file("Assets/Tools/Templates/Script.cs")
        mock_host.add_file("Assets/Tools/Templates/image.png")
        return mock_host

    def test_template_inside_root(self, host: MockAssetHost):
        assert _classifier(host).is_relevant("Assets/Tools/Templates/Foo.cs.txt")

    def test_template_in_nested_folder(self, host: MockAssetHost):
        assert _classifier(host).is_relevant("Assets/Tools/Templates/Nested/Bar.CS.TXT")

    def test_plain_text_never_relevant(self, host: MockAssetHost):
        assert not _classifier(host).is_relevant("Assets/Tools/Templates/Readme.txt")

    def test_template_outside_root(self, host: MockAssetHost):
        assert not _classifier(host).is_relevant("Assets/Elsewhere/Foo.cs.txt")

    def test_script_file_not_template(self, host: MockAssetHost):
        assert not _classifier(host).is_relevant("Assets/Tools/Templates/Script.cs")

    def test_untyped_asset(self, host: MockAssetHost):
        assert not _classifier(host).is_relevant("Assets/Tools/Templates/image.png")

    def test_unknown_path(self, host: MockAssetHost):
        assert not _classifier(host).is_relevant("Assets/Nowhere/x.cs.txt")

    def test_sibling_folder_segment_mode(self, host: MockAssetHost):
        assert not _classifier(host).is_relevant("Assets/Tools/TemplatesExtra/Foo.cs.txt")

    def test_sibling_folder_prefix_mode(self, host: MockAssetHost):
        classifier = _classifier(host, containment="prefix")
        assert classifier.is_relevant("Assets/Tools/TemplatesExtra/Foo.cs.txt")

    def test_no_configs_not_ready(self):
        host = MockAssetHost()
        host.add_file("Assets/Tools/Templates/Foo.cs.txt")
        assert not _classifier(host).is_relevant("Assets/Tools/Templates/Foo.cs.txt")
