from __future__ import annotations

"""Editor presets: named plugin bundles with a default toolbar."""

from enum import Enum
from typing import Tuple

from .catalog import CKEditorPlugin as P

__all__ = ["EditorPreset"]

_SEP = "|"

_BASIC = (
    P.ESSENTIALS, P.PARAGRAPH, P.BOLD, P.ITALIC, P.UNDERLINE, P.LINK, P.LIST,
    P.BLOCK_QUOTE, P.UNDO,
)

_STANDARD = (
    P.ESSENTIALS, P.PARAGRAPH, P.UNDO,
    P.BOLD, P.ITALIC, P.UNDERLINE, P.STRIKETHROUGH, P.CODE,
    P.HEADING, P.ALIGNMENT, P.BLOCK_QUOTE, P.INDENT, P.INDENT_BLOCK,
    P.LIST, P.TODO_LIST,
    P.LINK, P.AUTO_LINK,
    P.IMAGE, P.IMAGE_TOOLBAR, P.IMAGE_CAPTION, P.IMAGE_STYLE, P.IMAGE_RESIZE,
    P.IMAGE_INSERT, P.IMAGE_UPLOAD, P.BASE64_UPLOAD_ADAPTER,
    P.TABLE, P.TABLE_TOOLBAR,
    P.MEDIA_EMBED,
    P.HORIZONTAL_LINE,
    P.AUTOFORMAT, P.FIND_AND_REPLACE, P.PASTE_FROM_OFFICE,
)

_FULL = (
    P.ESSENTIALS, P.PARAGRAPH, P.UNDO,
    P.BOLD, P.ITALIC, P.UNDERLINE, P.STRIKETHROUGH, P.CODE, P.SUPERSCRIPT, P.SUBSCRIPT,
    P.FONT_SIZE, P.FONT_FAMILY, P.FONT_COLOR, P.FONT_BACKGROUND_COLOR,
    P.HEADING, P.ALIGNMENT, P.BLOCK_QUOTE, P.INDENT, P.INDENT_BLOCK,
    P.LIST, P.TODO_LIST,
    P.LINK, P.AUTO_LINK,
    P.IMAGE, P.IMAGE_TOOLBAR, P.IMAGE_CAPTION, P.IMAGE_STYLE, P.IMAGE_INSERT,
    P.IMAGE_UPLOAD, P.BASE64_UPLOAD_ADAPTER,
    P.TABLE, P.TABLE_TOOLBAR,
    P.MEDIA_EMBED,
    P.CODE_BLOCK,
    P.HORIZONTAL_LINE,
    P.AUTOFORMAT, P.FIND_AND_REPLACE, P.REMOVE_FORMAT, P.HIGHLIGHT,
    P.PASTE_FROM_OFFICE,
)

_COLLABORATIVE = (
    P.ESSENTIALS, P.PARAGRAPH, P.UNDO, P.CLIPBOARD, P.SELECT_ALL,
    P.BOLD, P.ITALIC, P.UNDERLINE, P.STRIKETHROUGH, P.SUPERSCRIPT, P.SUBSCRIPT,
    P.FONT_SIZE, P.FONT_FAMILY, P.FONT_COLOR, P.FONT_BACKGROUND_COLOR,
    P.HEADING, P.ALIGNMENT, P.BLOCK_QUOTE, P.INDENT, P.INDENT_BLOCK,
    P.LIST, P.TODO_LIST,
    P.LINK, P.AUTO_LINK,
    P.IMAGE, P.IMAGE_TOOLBAR, P.IMAGE_CAPTION, P.IMAGE_STYLE, P.IMAGE_RESIZE,
    P.IMAGE_INSERT, P.IMAGE_UPLOAD, P.BASE64_UPLOAD_ADAPTER,
    P.TABLE, P.TABLE_TOOLBAR, P.TABLE_PROPERTIES, P.TABLE_CELL_PROPERTIES,
    P.HORIZONTAL_LINE, P.PAGE_BREAK,
    P.AUTOFORMAT, P.FIND_AND_REPLACE, P.REMOVE_FORMAT,
    P.WORD_COUNT, P.PASTE_FROM_OFFICE, P.AUTOSAVE,
)

# The document preset is the collaborative base plus a title field.
_DOCUMENT = _COLLABORATIVE[:-2] + (P.TITLE, P.PASTE_FROM_OFFICE, P.AUTOSAVE)

_DOCUMENT_TOOLBAR = (
    "undo", "redo", _SEP,
    "heading", _SEP,
    "fontFamily", "fontSize", _SEP,
    "bold", "italic", "underline", _SEP,
    "fontColor", "fontBackgroundColor", _SEP,
    "link", "insertImage", "insertTable", _SEP,
    "bulletedList", "numberedList", _SEP,
    "alignment", "outdent", "indent", _SEP,
    "pageBreak", _SEP,
    "findAndReplace",
)


class EditorPreset(Enum):
    """Ready-made plugin bundles.

    Values are ``(display_name, plugins, default_toolbar, estimated_size_kb)``.
    The collaborative preset only carries the base plugins; collaboration
    features are premium custom plugins added on top.
    """

    BASIC = (
        "Basic Editor",
        _BASIC,
        ("undo", "redo", _SEP, "bold", "italic", "underline", _SEP, "link", _SEP,
         "bulletedList", "numberedList", _SEP, "blockQuote"),
        300,
    )
    STANDARD = (
        "Standard Editor",
        _STANDARD,
        ("undo", "redo", _SEP, "heading", _SEP,
         "bold", "italic", "underline", "strikethrough", "code", _SEP,
         "link", "insertImage", "insertTable", "mediaEmbed", _SEP,
         "bulletedList", "numberedList", "todoList", _SEP,
         "alignment", "outdent", "indent", _SEP,
         "blockQuote", "horizontalLine", _SEP,
         "findAndReplace"),
        600,
    )
    FULL = (
        "Full Editor",
        _FULL,
        ("undo", "redo", _SEP, "heading", _SEP,
         "fontFamily", "fontSize", "fontColor", "fontBackgroundColor", _SEP,
         "bold", "italic", "underline", "strikethrough", "code", "subscript", "superscript", _SEP,
         "removeFormat", _SEP,
         "link", "insertImage", "insertTable", "mediaEmbed", _SEP,
         "bulletedList", "numberedList", "todoList", _SEP,
         "alignment", "outdent", "indent", _SEP,
         "blockQuote", "codeBlock", "horizontalLine", _SEP,
         "highlight", _SEP,
         "findAndReplace"),
        700,
    )
    DOCUMENT = ("Document Editor", _DOCUMENT, _DOCUMENT_TOOLBAR, 800)
    COLLABORATIVE = (
        "Collaborative Editor",
        _COLLABORATIVE,
        ("undo", "redo", _SEP, "heading", _SEP,
         "fontFamily", "fontSize", _SEP,
         "bold", "italic", "underline", _SEP,
         "fontColor", "fontBackgroundColor", _SEP,
         "link", "insertImage", "insertTable", _SEP,
         "bulletedList", "numberedList", "todoList", _SEP,
         "alignment", "outdent", "indent", _SEP,
         "pageBreak", _SEP,
         "findAndReplace"),
        850,
    )
    EMPTY = ("Empty Editor", (P.ESSENTIALS, P.PARAGRAPH), (), 100)

    def __init__(self, display_name: str, plugins: Tuple[P, ...],
                 default_toolbar: Tuple[str, ...], estimated_size: int) -> None:
        self.display_name = display_name
        self.plugins = tuple(dict.fromkeys(plugins))
        self.default_toolbar = tuple(default_toolbar)
        self.estimated_size = estimated_size

    def has_plugin(self, plugin: P) -> bool:
        return plugin in self.plugins
