"""
BigText: renders a string as five rows of block-letter glyphs.
"""
import io
import sys
from typing import IO, Iterator, Optional

from .charmaps import GLYPH_HEIGHT, GlyphTable, from_entries, printables
from .exceptions import SinkWriteFailure

SEPARATOR = " "
# a character with no glyph occupies a blank 5-wide glyph plus the separator
MISSING = " " * 6


class BigText:
    """
    Holds a text and a glyph table and prints the text in its ascii-art form.

    Characters without a glyph in the table are printed as blanks.

    Example:
        >>> printer = BigText("HI")
        >>> printer.render()
    """

    def __init__(self, text: str = "", glyph_table: Optional[GlyphTable] = None) -> None:
        """
        :param text: Text to print
        :param glyph_table: Glyphs to print with (default: ``printables()``)
        """
        self._text: str = text
        self._glyph_table: GlyphTable = {}
        self._supported_characters: str = ""
        self.set_glyph_table(printables() if glyph_table is None else glyph_table)

    @property
    def text(self) -> str:
        """The text currently stored."""
        return self._text

    @text.setter
    def text(self, text: str) -> None:
        self._text = text

    def set_text(self, text: str) -> "BigText":
        """
        Replace the stored text.

        :param text: Any string, including the empty string
        :return: This instance, so calls can be chained
        """
        self._text = text
        return self

    @property
    def glyph_table(self) -> GlyphTable:
        """The glyph table used when printing."""
        return self._glyph_table

    @glyph_table.setter
    def glyph_table(self, glyph_table: GlyphTable) -> None:
        self.set_glyph_table(glyph_table)

    def set_glyph_table(self, glyph_table: GlyphTable) -> "BigText":
        """
        Replace the glyph table and refresh the supported characters.

        Every glyph is copied and padded to five rows, so later changes to
        the passed mapping are not seen.

        :raises MalformedSource: If a glyph is not a sequence of at most five rows
        :raises InvalidRowValue: If a row is not a string
        """
        self._glyph_table = from_entries(glyph_table.items())
        self._supported_characters = "".join(self._glyph_table)
        return self

    @property
    def supported_characters(self) -> str:
        """Every character with a glyph, in table order."""
        return self._supported_characters

    def is_supported(self, char: str) -> bool:
        return char in self._glyph_table

    def _cells(self, row: int) -> Iterator[str]:
        for char in self._text:
            glyph = self._glyph_table.get(char)
            if glyph is None:
                yield MISSING
            else:
                yield glyph[row] + SEPARATOR

    def render(self, sink: Optional[IO] = None) -> None:
        """
        Write the stored text to ``sink`` as five newline-terminated rows.

        :param sink: Text or binary stream (default: ``sys.stdout``)
        :raises SinkWriteFailure: If the sink rejects a write; output already
            written is left in place
        """
        sink = sys.stdout if sink is None else sink
        binary = _is_binary(sink)
        for row in range(GLYPH_HEIGHT):
            for cell in self._cells(row):
                _write(sink, cell, binary)
            _write(sink, "\n", binary)

    def render_to_string(self) -> str:
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.render_to_string()

    def __repr__(self) -> str:
        return f"<BigText text={self._text!r} glyphs={len(self._glyph_table)}>"


def _is_binary(sink) -> bool:
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    if isinstance(sink, io.TextIOBase):
        return False
    return "b" in str(getattr(sink, "mode", ""))


def _write(sink, data: str, binary: bool) -> None:
    try:
        sink.write(data.encode("utf-8") if binary else data)
    except (OSError, ValueError, TypeError) as e:
        raise SinkWriteFailure(f"Failed to write to {sink!r}: {e}") from e
