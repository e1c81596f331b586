"""
bigtext: print text in its ascii-art form

Every character is drawn as five rows of a glyph looked up in a glyph table.
Characters without a glyph are printed as blanks.
"""

from .base import BigText
from .charmaps import (
    CATEGORIES,
    Glyph,
    GlyphTable,
    digits,
    from_json,
    letters,
    load_category,
    load_glyph_file,
    merge_tables,
    printables,
    punctuation,
    whitespace,
)
from .exceptions import (
    BigTextError,
    ConfigError,
    GlyphSourceError,
    InvalidKey,
    InvalidRowValue,
    MalformedSource,
    SinkWriteFailure,
    UnknownCharset,
)
from .version import __version__


def big_text(text: str, glyph_table: GlyphTable = None) -> str:
    """
    Render text as ASCII art.

    :param text: Text to convert
    :param glyph_table: Glyphs to use (default: all printables)
    :return: Five newline-terminated rows
    """
    return BigText(text, glyph_table).render_to_string()


def print_big_text(text: str, glyph_table: GlyphTable = None) -> None:
    """
    Print ASCII art text directly to standard output.

    :param text: Text to convert and print
    :param glyph_table: Glyphs to use (default: all printables)
    """
    BigText(text, glyph_table).render()


__all__ = [
    'BigText',
    'big_text',
    'print_big_text',
    'Glyph',
    'GlyphTable',
    'CATEGORIES',
    'letters',
    'digits',
    'punctuation',
    'whitespace',
    'printables',
    'load_category',
    'load_glyph_file',
    'from_json',
    'merge_tables',
    'BigTextError',
    'GlyphSourceError',
    'MalformedSource',
    'InvalidKey',
    'InvalidRowValue',
    'SinkWriteFailure',
    'UnknownCharset',
    'ConfigError',
    '__version__',
]
