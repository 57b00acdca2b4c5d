"""
Splitting of styled strings into fixed-width chunks.
"""

import logging
from collections.abc import Iterator, Sequence

from .cutter import cut_segments, visible_total
from .errors import InvalidArgumentError
from .parsing.segmenter import Segment, segment

logger = logging.getLogger(__name__)


class Chunks(Sequence[str]):
    """Lazy, re-iterable sequence of styled chunks.

    Segments are computed once; each chunk is cut on demand, and every call to
    ``iter()`` starts again from the first chunk.
    """

    def __init__(self, segments: Sequence[Segment], width: int):
        if isinstance(width, bool) or not isinstance(width, int):
            raise InvalidArgumentError(f"Chunk width must be an int, got {width!r}")
        if width < 1:
            raise InvalidArgumentError(f"Chunk width must be at least 1, got {width}")
        self.segments = tuple(segments)
        self.width = width
        self.length = visible_total(self.segments)
        logger.debug(f"Prepared {len(self)} chunks of width {width}")

    def __len__(self) -> int:
        return -(-self.length // self.width)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        count = len(self)
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError("chunk index out of range")
        start = index * self.width
        return cut_segments(self.segments, start, min(start + self.width, self.length))

    def __iter__(self) -> Iterator[str]:
        for index in range(len(self)):
            yield self[index]

    def __repr__(self) -> str:
        return f"Chunks(width={self.width}, count={len(self)})"


def chunks(text: str, width: int) -> Chunks:
    """Split ``text`` into chunks of ``width`` visible characters.

    Every chunk carries the styles active over its characters and ends with a
    reset when it is styled. The last chunk may be shorter.

    Raises:
        InvalidArgumentError: If ``width`` is not a positive int
    """
    return Chunks(segment(text), width)
