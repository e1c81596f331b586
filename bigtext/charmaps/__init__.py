"""
Glyph tables: parsing of JSON glyph sources and the built-in character sets.
"""

from .loader import (
    BLANK_ROW,
    GLYPH_HEIGHT,
    Glyph,
    GlyphTable,
    build_glyph,
    from_entries,
    from_json,
    load_glyph_file,
    merge_tables,
)
from .fonts import (
    CATEGORIES,
    digits,
    letters,
    load_category,
    printables,
    punctuation,
    whitespace,
)

__all__ = [
    'BLANK_ROW',
    'GLYPH_HEIGHT',
    'Glyph',
    'GlyphTable',
    'build_glyph',
    'from_entries',
    'from_json',
    'load_glyph_file',
    'merge_tables',
    'CATEGORIES',
    'letters',
    'digits',
    'punctuation',
    'whitespace',
    'printables',
    'load_category',
]
