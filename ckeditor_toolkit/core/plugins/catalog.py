from __future__ import annotations

"""Catalog of the editor plugins known to the toolkit.

Each :class:`CKEditorPlugin` member carries the JavaScript export name used
on the wire, a descriptive :class:`Category`, the toolbar buttons it
contributes and two loading-policy flags:

``embeddable``
    False for plugins that are bundled inside another plugin and cannot be
    loaded on their own in this embedding (the conflict filter drops them).
``requires_configuration``
    True for plugins that need manual setup (a server endpoint, a DOM
    container, a document structure) before they are safe to enable.

The catalog is closed: members are never created at runtime. Plugins that
are not listed here are custom plugins (see :mod:`.custom`).
"""

from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

__all__ = [
    "Category",
    "CKEditorPlugin",
    "CORE_PLUGINS",
    "sort_by_catalog_order",
]


class Category(Enum):
    """Descriptive grouping of catalog plugins."""

    CORE = "Core"
    BASIC_STYLES = "Basic Styles"
    FONT = "Font"
    PARAGRAPH = "Paragraph"
    LIST = "List"
    LINK = "Link"
    IMAGE = "Image"
    TABLE = "Table"
    MEDIA = "Media"
    CODE = "Code"
    HTML = "HTML"
    SPECIAL_CHARACTERS = "Special Characters"
    EDITING = "Editing"
    DOCUMENT = "Document"
    UPLOAD = "Upload"
    CUSTOM = "Custom"

    @property
    def display_name(self) -> str:
        return self.value


class CKEditorPlugin(Enum):
    """Known editor plugins.

    Member values are ``(js_name, category, toolbar_items, embeddable,
    requires_configuration)`` tuples; use the properties rather than
    ``.value``.
    """

    # Core
    ESSENTIALS = ("Essentials", Category.CORE)
    PARAGRAPH = ("Paragraph", Category.CORE)
    UNDO = ("Undo", Category.CORE, ("undo", "redo"))
    CLIPBOARD = ("Clipboard", Category.CORE)
    SELECT_ALL = ("SelectAll", Category.CORE, ("selectAll",))
    WIDGET = ("Widget", Category.CORE)
    TYPING = ("Typing", Category.CORE, (), False)
    ENTER = ("Enter", Category.CORE, (), False)
    SHIFT_ENTER = ("ShiftEnter", Category.CORE, (), False)

    # Basic styles
    BOLD = ("Bold", Category.BASIC_STYLES, ("bold",))
    ITALIC = ("Italic", Category.BASIC_STYLES, ("italic",))
    UNDERLINE = ("Underline", Category.BASIC_STYLES, ("underline",))
    STRIKETHROUGH = ("Strikethrough", Category.BASIC_STYLES, ("strikethrough",))
    CODE = ("Code", Category.BASIC_STYLES, ("code",))
    SUBSCRIPT = ("Subscript", Category.BASIC_STYLES, ("subscript",))
    SUPERSCRIPT = ("Superscript", Category.BASIC_STYLES, ("superscript",))

    # Font
    FONT_SIZE = ("FontSize", Category.FONT, ("fontSize",))
    FONT_FAMILY = ("FontFamily", Category.FONT, ("fontFamily",))
    FONT_COLOR = ("FontColor", Category.FONT, ("fontColor",))
    FONT_BACKGROUND_COLOR = ("FontBackgroundColor", Category.FONT, ("fontBackgroundColor",))

    # Paragraph
    HEADING = ("Heading", Category.PARAGRAPH, ("heading",))
    ALIGNMENT = ("Alignment", Category.PARAGRAPH, ("alignment",))
    INDENT = ("Indent", Category.PARAGRAPH, ("outdent", "indent"))
    INDENT_BLOCK = ("IndentBlock", Category.PARAGRAPH)
    BLOCK_QUOTE = ("BlockQuote", Category.PARAGRAPH, ("blockQuote",))
    HORIZONTAL_LINE = ("HorizontalLine", Category.PARAGRAPH, ("horizontalLine",))
    PAGE_BREAK = ("PageBreak", Category.PARAGRAPH, ("pageBreak",))

    # Lists
    LIST = ("List", Category.LIST, ("bulletedList", "numberedList"))
    LIST_PROPERTIES = ("ListProperties", Category.LIST)
    LIST_FORMATTING = ("ListFormatting", Category.LIST)
    ADJACENT_LISTS_SUPPORT = ("AdjacentListsSupport", Category.LIST)
    TODO_LIST = ("TodoList", Category.LIST, ("todoList",))

    # Links
    LINK = ("Link", Category.LINK, ("link",))
    AUTO_LINK = ("AutoLink", Category.LINK)
    LINK_IMAGE = ("LinkImage", Category.LINK)

    # Images
    IMAGE = ("Image", Category.IMAGE)
    IMAGE_TOOLBAR = ("ImageToolbar", Category.IMAGE)
    IMAGE_CAPTION = ("ImageCaption", Category.IMAGE, ("toggleImageCaption",))
    IMAGE_STYLE = ("ImageStyle", Category.IMAGE)
    IMAGE_RESIZE = ("ImageResize", Category.IMAGE)
    IMAGE_UPLOAD = ("ImageUpload", Category.IMAGE, ("uploadImage",))
    IMAGE_INSERT = ("ImageInsert", Category.IMAGE, ("insertImage",))
    IMAGE_BLOCK = ("ImageBlock", Category.IMAGE)
    IMAGE_INLINE = ("ImageInline", Category.IMAGE)
    AUTO_IMAGE = ("AutoImage", Category.IMAGE)

    # Tables
    TABLE = ("Table", Category.TABLE, ("insertTable",))
    TABLE_TOOLBAR = ("TableToolbar", Category.TABLE)
    TABLE_PROPERTIES = ("TableProperties", Category.TABLE, ("tableProperties",))
    TABLE_CELL_PROPERTIES = ("TableCellProperties", Category.TABLE, ("tableCellProperties",))
    TABLE_CAPTION = ("TableCaption", Category.TABLE, ("toggleTableCaption",))
    TABLE_COLUMN_RESIZE = ("TableColumnResize", Category.TABLE)

    # Media
    MEDIA_EMBED = ("MediaEmbed", Category.MEDIA, ("mediaEmbed",))
    HTML_EMBED = ("HtmlEmbed", Category.MEDIA, ("htmlEmbed",))

    # Code
    CODE_BLOCK = ("CodeBlock", Category.CODE, ("codeBlock",))

    # HTML support
    GENERAL_HTML_SUPPORT = ("GeneralHtmlSupport", Category.HTML)
    HTML_COMMENT = ("HtmlComment", Category.HTML)
    STYLE = ("Style", Category.HTML, ("style",))
    SOURCE_EDITING = ("SourceEditing", Category.HTML, ("sourceEditing",))

    # Special characters
    SPECIAL_CHARACTERS = ("SpecialCharacters", Category.SPECIAL_CHARACTERS, ("specialCharacters",))
    SPECIAL_CHARACTERS_ESSENTIALS = ("SpecialCharactersEssentials", Category.SPECIAL_CHARACTERS)
    SPECIAL_CHARACTERS_ARROWS = ("SpecialCharactersArrows", Category.SPECIAL_CHARACTERS)
    SPECIAL_CHARACTERS_CURRENCY = ("SpecialCharactersCurrency", Category.SPECIAL_CHARACTERS)
    SPECIAL_CHARACTERS_LATIN = ("SpecialCharactersLatin", Category.SPECIAL_CHARACTERS)
    SPECIAL_CHARACTERS_MATHEMATICAL = ("SpecialCharactersMathematical", Category.SPECIAL_CHARACTERS)
    SPECIAL_CHARACTERS_TEXT = ("SpecialCharactersText", Category.SPECIAL_CHARACTERS)

    # Editing
    AUTOFORMAT = ("Autoformat", Category.EDITING)
    TEXT_TRANSFORMATION = ("TextTransformation", Category.EDITING)
    FIND_AND_REPLACE = ("FindAndReplace", Category.EDITING, ("findAndReplace",))
    REMOVE_FORMAT = ("RemoveFormat", Category.EDITING, ("removeFormat",))
    HIGHLIGHT = ("Highlight", Category.EDITING, ("highlight",))
    MENTION = ("Mention", Category.EDITING)
    SHOW_BLOCKS = ("ShowBlocks", Category.EDITING, ("showBlocks",))
    EMOJI = ("Emoji", Category.EDITING)
    EMOJI_PICKER = ("EmojiPicker", Category.EDITING, ("emoji",))
    RESTRICTED_EDITING_MODE = ("RestrictedEditingMode", Category.EDITING, ("restrictedEditing",))
    STANDARD_EDITING_MODE = ("StandardEditingMode", Category.EDITING, ("restrictedEditingException",))

    # Document
    WORD_COUNT = ("WordCount", Category.DOCUMENT)
    TITLE = ("Title", Category.DOCUMENT, (), True, True)
    AUTOSAVE = ("Autosave", Category.DOCUMENT)
    PASTE_FROM_OFFICE = ("PasteFromOffice", Category.DOCUMENT)
    MINIMAP = ("Minimap", Category.DOCUMENT, (), True, True)

    # Upload adapters and cloud services
    SIMPLE_UPLOAD_ADAPTER = ("SimpleUploadAdapter", Category.UPLOAD)
    BASE64_UPLOAD_ADAPTER = ("Base64UploadAdapter", Category.UPLOAD)
    CLOUD_SERVICES_CORE = ("CloudServicesCore", Category.UPLOAD)
    CLOUD_SERVICES = ("CloudServices", Category.UPLOAD, (), True, True)
    CLOUD_SERVICES_UPLOAD_ADAPTER = ("CloudServicesUploadAdapter", Category.UPLOAD, (), True, True)
    EASY_IMAGE = ("EasyImage", Category.UPLOAD, (), True, True)

    def __init__(self, js_name: str, category: Category,
                 toolbar_items: Tuple[str, ...] = (),
                 embeddable: bool = True,
                 requires_configuration: bool = False) -> None:
        self._js_name = js_name
        self._category = category
        self._toolbar_items = tuple(toolbar_items)
        self._embeddable = embeddable
        self._requires_configuration = requires_configuration

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    @property
    def js_name(self) -> str:
        """Export name of the plugin in the editor bundle."""
        return self._js_name

    @property
    def category(self) -> Category:
        return self._category

    @property
    def toolbar_items(self) -> Tuple[str, ...]:
        """Toolbar button names contributed by the plugin, in display order."""
        return self._toolbar_items

    @property
    def embeddable(self) -> bool:
        return self._embeddable

    @property
    def requires_configuration(self) -> bool:
        return self._requires_configuration

    @property
    def is_premium(self) -> bool:
        """Catalog plugins ship with the open-source bundle.

        Premium features are declared as custom plugins instead.
        """
        return False

    def __str__(self) -> str:
        return self._js_name

    # ------------------------------------------------------------------
    # Lookup helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_js_name(cls, js_name: str) -> Optional["CKEditorPlugin"]:
        """Return the member exported as *js_name*, or None if not catalogued."""
        return _BY_JS_NAME.get(js_name)

    @classmethod
    def by_category(cls, category: Category) -> FrozenSet["CKEditorPlugin"]:
        return frozenset(p for p in cls if p.category is category)

    @classmethod
    def js_names(cls) -> List[str]:
        """All catalogued export names in declaration order."""
        return [p.js_name for p in cls]


_BY_JS_NAME: Dict[str, CKEditorPlugin] = {p.js_name: p for p in CKEditorPlugin}
_ORDINALS: Dict[CKEditorPlugin, int] = {p: i for i, p in enumerate(CKEditorPlugin)}

# Always part of a resolved set unless resolution is asked to skip them.
CORE_PLUGINS: Tuple[CKEditorPlugin, ...] = (CKEditorPlugin.ESSENTIALS, CKEditorPlugin.PARAGRAPH)


def sort_by_catalog_order(plugins: Iterable[CKEditorPlugin]) -> List[CKEditorPlugin]:
    """Return *plugins* ordered by catalog declaration order."""
    return sorted(plugins, key=_ORDINALS.__getitem__)
