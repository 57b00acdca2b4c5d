"""
Cutting of styled strings by visible character range.
"""

import logging
from bisect import bisect_left, bisect_right
from collections.abc import Sequence

from .errors import InvalidArgumentError
from .parsing.segmenter import Segment, segment
from .parsing.style import RESET

logger = logging.getLogger(__name__)


def visible_total(segments: Sequence[Segment]) -> int:
    """Number of visible characters covered by ``segments``."""
    return segments[-1].end if segments else 0


def resolve_bounds(
    start: int | slice | None, end: int | None, length: int
) -> tuple[int, int]:
    """Turn cut bounds into a clamped ``(start, end)`` pair.

    Bounds follow slice conventions: ``None`` is open-ended and negative
    values count from the end. ``start`` may also be a ``slice`` (with
    ``end`` left out).

    Raises:
        InvalidArgumentError: If a slice with a step other than 1 is given
    """
    if isinstance(start, slice):
        if start.step not in (None, 1):
            raise InvalidArgumentError(f"Slice step must be 1, got {start.step}")
        if end is not None:
            raise InvalidArgumentError("end cannot be combined with a slice")
        bounds = start
    else:
        bounds = slice(start, end)
    lower, upper, _ = bounds.indices(length)
    return lower, upper


def _piece_offset(piece) -> int:
    return piece.offset


def _segment_end(seg: Segment) -> int:
    return seg.end


def _segment_text(seg: Segment, lower: int, upper: int, length: int) -> str:
    pieces = seg.pieces
    first = bisect_left(pieces, lower, key=_piece_offset)
    if upper == length:
        # keeps trailing escapes, which sit at offset == length
        last = len(pieces)
    else:
        last = bisect_left(pieces, upper, lo=first, key=_piece_offset)
    return "".join(piece.text for piece in pieces[first:last])


def cut_segments(
    segments: Sequence[Segment], start: int | slice | None = None, end: int | None = None
) -> str:
    """Cut already segmented text.

    Args:
        segments: Segments as returned by ``segment``
        start: First visible character to keep, or a slice
        end: Visible character to stop before

    Returns:
        str: The visible characters in range, each preceded by the escape
        codes restoring its original style, followed by a reset if any style
        was emitted
    """
    length = visible_total(segments)
    lower, upper = resolve_bounds(start, end, length)
    if lower >= upper:
        logger.debug(f"Empty cut range {lower}:{upper} of {length} characters")
        return ""

    out: list[str] = []
    previous_styled = False
    styled = False
    for index in range(bisect_right(segments, lower, key=_segment_end), len(segments)):
        seg = segments[index]
        if seg.start >= upper:
            break
        out.append(seg.style.to_sgr(reset=previous_styled))
        out.append(_segment_text(seg, lower, upper, length))
        previous_styled = bool(seg.style)
        styled = styled or previous_styled

    if styled:
        out.append(RESET)
    return "".join(out)


def cut(text: str, start: int | slice | None = None, end: int | None = None) -> str:
    """Cut ``text`` to a range of visible characters, keeping its colors.

    Example:
        >>> cut("\\x1b[31mTEXT\\x1b[0m", 1, 3)
        '\\x1b[31mEX\\x1b[0m'
    """
    return cut_segments(segment(text), start, end)
