import json

import pytest

from ckeditor_toolkit.core.models import (
    ButtonStyle,
    CodeBlockLanguage,
    EditorConfig,
    EditorConfigError,
    HeadingOption,
    MentionFeed,
    StyleDefinition,
    ToolbarStyle,
    UnsafeUrlError,
)


class TestGeneralOptions:
    """Test defaults and general setters."""

    def test_defaults(self):
        assert EditorConfig().to_dict() == {"placeholder": "", "language": "en"}

    def test_placeholder_none_becomes_empty(self):
        assert EditorConfig().set_placeholder(None).get("placeholder") == ""

    def test_language(self):
        assert EditorConfig().set_language(" de ").get("language") == "de"
        with pytest.raises(EditorConfigError):
            EditorConfig().set_language("")

    def test_toolbar(self):
        config = EditorConfig().set_toolbar("bold", "|", "italic")
        assert config.get("toolbar") == ["bold", "|", "italic"]

    def test_empty_toolbar_is_noop(self):
        config = EditorConfig().set_toolbar("bold").set_toolbar()
        assert config.get("toolbar") == ["bold"]

    def test_license_key(self):
        assert EditorConfig().set_license_key("GPL").get("licenseKey") == "GPL"
        with pytest.raises(EditorConfigError):
            EditorConfig().set_license_key("")

    def test_custom_key(self):
        config = EditorConfig().set("wordCount", {"displayWords": True})
        assert config.get("wordCount") == {"displayWords": True}
        with pytest.raises(EditorConfigError):
            config.set("", 1)


class TestFeatureBlocks:
    """Test per-feature option blocks."""

    def test_font_size(self):
        config = EditorConfig().set_font_size(10, 12, "default", support_all_values=True)
        assert config.get("fontSize") == {"options": [10, 12, "default"], "supportAllValues": True}

    def test_font_family(self):
        assert EditorConfig().set_font_family("Arial").get("fontFamily") == {"options": ["Arial"]}

    def test_font_colors(self):
        config = (EditorConfig()
                  .set_font_color(["red"], columns=5)
                  .set_font_color(["yellow"], background=True))
        assert config.get("fontColor") == {"colors": ["red"], "columns": 5}
        assert config.get("fontBackgroundColor") == {"colors": ["yellow"]}

    def test_link(self):
        assert EditorConfig().set_link("https://", True).get("link") == {
            "defaultProtocol": "https://",
            "addTargetToExternalLinks": True,
        }

    def test_image_and_table(self):
        config = EditorConfig().set_image(["imageTextAlternative"]).set_table(["tableColumn"])
        assert config.get("image") == {"toolbar": ["imageTextAlternative"], "styles": []}
        assert config.get("table") == {"contentToolbar": ["tableColumn"]}

    def test_code_block(self):
        config = EditorConfig().set_code_block("    ", CodeBlockLanguage.of("python", "Python"))
        assert config.get("codeBlock") == {
            "indentSequence": "    ",
            "languages": [{"language": "python", "label": "Python"}],
        }

    def test_media_embed_and_mention(self):
        config = EditorConfig().set_media_embed(True).set_mention(MentionFeed.users("alice", "bob"))
        assert config.get("mediaEmbed") == {"previewsInData": True}
        assert config.get("mention") == {
            "feeds": [{"marker": "@", "feed": ["alice", "bob"], "minimumCharacters": 0}]
        }
        assert MentionFeed.tags("x").marker == "#"

    def test_autosave(self):
        assert EditorConfig().set_autosave(0).get("autosave") == {"waitingTime": 0}
        with pytest.raises(EditorConfigError):
            EditorConfig().set_autosave(-1)

    def test_html_support(self):
        allow = EditorConfig().set_html_support(True).get("htmlSupport")["allow"]
        assert allow[0]["name"] == {"pattern": ".*"}
        assert EditorConfig().set_html_support(False).get("htmlSupport") == {"allow": []}

    def test_style(self):
        config = EditorConfig().set_style(
            StyleDefinition.block("Lead", "p", "lead"),
            StyleDefinition.inline("Marker", "marker"),
            StyleDefinition.code_block("Dark code", "dark"),
        )
        assert [d["element"] for d in config.get("style")["definitions"]] == ["p", "span", "pre"]

    def test_heading(self):
        config = EditorConfig().set_heading(
            HeadingOption.paragraph("Paragraph", "ck-heading_paragraph"),
            HeadingOption.heading(2, "Heading 2", "ck-heading_heading2"),
        )
        assert config.get("heading")["options"] == [
            {"model": "paragraph", "title": "Paragraph", "class": "ck-heading_paragraph"},
            {"model": "heading2", "title": "Heading 2", "class": "ck-heading_heading2", "view": "h2"},
        ]

    @pytest.mark.parametrize("level", [0, 7])
    def test_heading_level_range(self, level):
        with pytest.raises(EditorConfigError):
            HeadingOption.heading(level, "H", "h")

    def test_toolbar_style(self):
        style = ToolbarStyle(background="#fff", border_color="#ccc",
                             button_styles={"bold": ButtonStyle(icon_color="red")})
        config = EditorConfig().set_toolbar_style(style)
        assert config.get("toolbarStyle") == {
            "background": "#fff",
            "borderColor": "#ccc",
            "buttonStyles": {"bold": {"iconColor": "red"}},
        }
        assert config.set_toolbar_style(None).get("toolbarStyle") is None


class TestSimpleUpload:
    """Test upload URL handling."""

    def test_valid_url(self):
        config = EditorConfig().set_simple_upload("https://example.com/upload", {"X-Token": "t"})
        assert config.get_simple_upload_url() == "https://example.com/upload"
        assert config.get("simpleUpload")["headers"] == {"X-Token": "t"}

    @pytest.mark.parametrize("url", ["http://localhost/upload", "ftp://example.com/upload"])
    def test_unsafe_url(self, url):
        with pytest.raises(UnsafeUrlError):
            EditorConfig().set_simple_upload(url)

    def test_no_upload_url(self):
        assert EditorConfig().get_simple_upload_url() is None

    def test_generic_set_validates_url(self):
        with pytest.raises(UnsafeUrlError):
            EditorConfig().set("simpleUpload", {"uploadUrl": "http://127.0.0.1/"})

    def test_generic_set_keeps_headers(self):
        config = EditorConfig().set("simpleUpload", {"uploadUrl": "https://example.com/u",
                                                     "headers": {"X-Token": "t"}})
        assert config.get("simpleUpload") == {"uploadUrl": "https://example.com/u",
                                              "headers": {"X-Token": "t"}}

    def test_generic_set_rejects_non_mapping(self):
        with pytest.raises(EditorConfigError) as exc_info:
            EditorConfig().set("simpleUpload", "https://example.com/u")
        assert exc_info.value.key == "simpleUpload"


class TestOutput:
    """Test rendering and round trips."""

    def test_get_configs_is_read_only(self):
        configs = EditorConfig().get_configs()
        with pytest.raises(TypeError):
            configs["language"] = "de"  # type: ignore[index]

    def test_to_dict_is_a_copy(self):
        config = EditorConfig().set_font_size(10)
        data = config.to_dict()
        data["fontSize"]["options"].append(99)
        assert config.get("fontSize") == {"options": [10]}

    def test_to_json(self):
        text = EditorConfig().set_placeholder("Schreiben Sie hier…").to_json()
        assert "Schreiben Sie hier…" in text
        assert json.loads(text)["language"] == "en"

    def test_from_dict(self):
        config = EditorConfig.from_dict({
            "language": "fr",
            "toolbar": ["bold"],
            "simpleUpload": {"uploadUrl": "https://example.com/u"},
            "wordCount": {"displayWords": False},
        })
        assert config.get("toolbar") == ["bold"]
        assert config.get_simple_upload_url() == "https://example.com/u"
        assert config.get("wordCount") == {"displayWords": False}

    def test_from_dict_validates_upload_url(self):
        with pytest.raises(UnsafeUrlError):
            EditorConfig.from_dict({"simpleUpload": {"uploadUrl": "http://10.0.0.1/u"}})
