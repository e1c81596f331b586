"""
Parsing of declarative glyph definitions into glyph tables.

A glyph source is a JSON object whose keys are single characters and whose
values are arrays of up to five strings, one per row from top to bottom::

    {"A": [" *** ", "*   *", "*****", "*   *", "*   *"]}
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

from ..config import logger
from ..exceptions import InvalidKey, InvalidRowValue, MalformedSource

GLYPH_HEIGHT = 5
BLANK_ROW = " " * 5

Glyph = List[str]
GlyphTable = Dict[str, Glyph]


class _Pairs(list):
    """Decoded JSON object kept as ordered pairs so duplicate keys survive."""


def build_glyph(key: str, rows: Any) -> Glyph:
    """
    Turn one source entry into a five-row glyph.

    :param key: Character the glyph belongs to (for error messages)
    :param rows: List or tuple of up to five row strings
    :return: List of exactly five rows, missing rows filled with blanks
    """
    if not isinstance(rows, (list, tuple)) or isinstance(rows, _Pairs):
        kind = "object" if isinstance(rows, _Pairs) else type(rows).__name__
        raise MalformedSource(f"Glyph {key!r} must be an array of strings, got {kind}")
    if len(rows) > GLYPH_HEIGHT:
        raise MalformedSource(
            f"Glyph {key!r} has {len(rows)} rows, at most {GLYPH_HEIGHT} are allowed"
        )
    glyph: Glyph = []
    for index in range(GLYPH_HEIGHT):
        if index >= len(rows):
            glyph.append(BLANK_ROW)
            continue
        row = rows[index]
        if not isinstance(row, str):
            raise InvalidRowValue(key, index, row)
        glyph.append(row)
    return glyph


def from_entries(entries: Iterable[Tuple[str, Any]]) -> GlyphTable:
    """
    Build a glyph table from ``(key, rows)`` pairs.

    Later pairs overwrite earlier ones that map to the same character.
    """
    table: GlyphTable = {}
    for key, rows in entries:
        if not isinstance(key, str) or not key:
            raise InvalidKey(key, "Glyph keys must be non-empty strings")
        char = key[0]
        if len(key) > 1:
            logger.trace(f"Glyph key {key!r} truncated to {char!r}")
        table[char] = build_glyph(char, rows)
    return table


def from_json(source: Union[str, bytes]) -> GlyphTable:
    """
    Parse a JSON glyph source into a glyph table.

    :param source: JSON text (str, or UTF-8 encoded bytes)
    :return: Mapping from character to its five rows
    :raises MalformedSource: If the text is not an object of string arrays
    :raises InvalidKey: If a key is the empty string
    :raises InvalidRowValue: If a row is not a string
    """
    if isinstance(source, (bytes, bytearray)):
        try:
            source = source.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedSource(f"Glyph source is not valid UTF-8: {e}") from e
    try:
        data = json.loads(source, object_pairs_hook=_Pairs)
    except (json.JSONDecodeError, RecursionError) as e:
        raise MalformedSource(f"Glyph source is not valid JSON: {e}") from e
    if not isinstance(data, _Pairs):
        raise MalformedSource("Glyph source must be a JSON object")
    return from_entries(data)


def load_glyph_file(path: Union[str, Path]) -> GlyphTable:
    """
    Load a glyph table from a JSON file on disk.

    :param path: Path to a UTF-8 JSON glyph source
    :return: Parsed glyph table
    """
    path = Path(path).expanduser()
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedSource(f"Cannot read glyph file {path}: {e}") from e
    table = from_json(source)
    logger.debug(f"Loaded {len(table)} glyphs from {path}")
    return table


def merge_tables(*tables: GlyphTable) -> GlyphTable:
    """Union of the given tables; on collision the later table wins."""
    merged: GlyphTable = {}
    for table in tables:
        merged.update(table)
    return merged
