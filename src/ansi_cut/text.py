"""
String wrapper exposing visible-character slicing of styled text.
"""

from .chunker import Chunks
from .cutter import cut_segments, visible_total
from .parsing.segmenter import segment


class AnsiText:
    """A string with ANSI escapes, indexed by its visible characters.

    ``len()`` gives the number of visible characters and slicing cuts the text
    while keeping its colors::

        >>> text = AnsiText("\\x1b[30;47mWhen the night has come\\x1b[0m")
        >>> len(text)
        23
        >>> text[5:]
        '\\x1b[30;47mthe night has come\\x1b[0m'
    """

    def __init__(self, text: str):
        self.raw = text
        self.segments = segment(text)

    def __str__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        return f"AnsiText({self.raw!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, AnsiText):
            return self.raw == other.raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.raw)

    def __len__(self) -> int:
        return visible_total(self.segments)

    def __getitem__(self, index: int | slice) -> str:
        if isinstance(index, slice):
            return cut_segments(self.segments, index)
        length = len(self)
        if index < 0:
            index += length
        if not 0 <= index < length:
            raise IndexError("AnsiText index out of range")
        return cut_segments(self.segments, index, index + 1)

    @property
    def plain(self) -> str:
        """The visible characters without any escape sequence."""
        return "".join(seg.plain for seg in self.segments)

    def cut(self, start: int | None = None, end: int | None = None) -> str:
        return cut_segments(self.segments, start, end)

    def chunks(self, width: int) -> Chunks:
        return Chunks(self.segments, width)


def strip_ansi(text: str) -> str:
    """Remove every escape sequence from ``text``."""
    return AnsiText(text).plain


def visible_length(text: str) -> int:
    """Number of visible characters (code points) in ``text``."""
    return len(AnsiText(text))
