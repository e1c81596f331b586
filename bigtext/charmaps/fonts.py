"""
Built-in glyph tables.

Each category loader parses its bundled JSON source on every call, so
callers that render repeatedly should load a table once and keep it.
"""

from importlib import resources
from typing import Callable, Dict

from ..config import logger
from ..exceptions import UnknownCharset
from .loader import GlyphTable, from_json, merge_tables


def _load_builtin(name: str) -> GlyphTable:
    source = resources.files(__package__).joinpath("data", f"{name}.json").read_text(encoding="utf-8")
    table = from_json(source)
    logger.debug(f"Loaded {len(table)} built-in {name} glyphs")
    return table


def letters() -> GlyphTable:
    """Glyphs for the upper-case ASCII letters ``A`` to ``Z``."""
    return _load_builtin("letters")


def digits() -> GlyphTable:
    """Glyphs for the digits ``0`` to ``9``."""
    return _load_builtin("digits")


def punctuation() -> GlyphTable:
    """Glyphs for ``! @ # $ % ^ & * ( ) [ ] ; \\ , . ?`` and the double quote."""
    return _load_builtin("punctuation")


def whitespace() -> GlyphTable:
    """Glyph for the space character."""
    return _load_builtin("whitespace")


def printables() -> GlyphTable:
    """
    Every built-in glyph.

    Categories are merged in the order letters, digits, punctuation,
    whitespace.
    """
    return merge_tables(letters(), digits(), punctuation(), whitespace())


CATEGORIES: Dict[str, Callable[[], GlyphTable]] = {
    "letters": letters,
    "digits": digits,
    "punctuation": punctuation,
    "whitespace": whitespace,
    "printables": printables,
}


def load_category(name: str) -> GlyphTable:
    """
    Load a built-in table by name.

    :param name: One of the keys of ``CATEGORIES`` (case-insensitive)
    :raises UnknownCharset: If no such table exists
    """
    loader = CATEGORIES.get(str(name).strip().lower())
    if loader is None:
        raise UnknownCharset(name, CATEGORIES)
    return loader()
