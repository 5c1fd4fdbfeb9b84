from ckeditor_toolkit.core.generators import render_config_document, to_json
from ckeditor_toolkit.core.models import EditorConfig
from ckeditor_toolkit.core.plugins import CustomPlugin


class TestRenderConfigDocument:
    """Test the shape of the rendered editor document."""

    def test_minimal(self):
        assert render_config_document(["Essentials"], []) == {"plugins": ["Essentials"], "toolbar": []}

    def test_options_are_copied(self):
        options = EditorConfig().set_font_size(10, 12).to_dict()
        document = render_config_document(["FontSize"], ["fontSize"], options)
        document["fontSize"]["options"].append(99)
        assert options["fontSize"]["options"] == [10, 12]
        assert document["language"] == "en"

    def test_custom_plugins(self):
        document = render_config_document(["Widget"], [], custom_plugins=[CustomPlugin.of("Widget", "./w.js")])
        assert document["customPlugins"] == [{"name": "Widget", "premium": False, "importPath": "./w.js"}]

    def test_no_custom_plugins_key_when_empty(self):
        assert "customPlugins" not in render_config_document([], [])

    def test_options_toolbar_used_only_without_explicit(self):
        options = {"toolbar": ["italic"]}
        assert render_config_document([], [], options)["toolbar"] == ["italic"]
        assert render_config_document([], ["bold"], options)["toolbar"] == ["bold"]

    def test_reserved_keys_not_overridden(self):
        document = render_config_document(["Bold"], [], {"plugins": ["Evil"], "customPlugins": []})
        assert document["plugins"] == ["Bold"]
        assert "customPlugins" not in document

    def test_key_order(self):
        document = render_config_document(["Bold"], ["bold"], {"language": "en"})
        assert list(document) == ["plugins", "toolbar", "language"]
        assert to_json(document, indent=None) == '{"plugins": ["Bold"], "toolbar": ["bold"], "language": "en"}'
