"""
Grouping of scanned tokens into styled segments.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .scanner import scan
from .style import EMPTY_STATE, StyleState
from .tokens import CharToken, Token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Piece:
    """A visible character or an opaque escape, at a visible offset.

    Opaque escapes take no visible room; their offset is the one of the
    character that follows them.
    """

    text: str
    offset: int
    visible: bool


@dataclass(frozen=True)
class Segment:
    """A maximal run of visible characters sharing one style state.

    ``start`` and ``end`` delimit the half-open range of visible offsets the
    run covers.
    """

    style: StyleState
    pieces: tuple[Piece, ...]
    start: int
    end: int

    @property
    def text(self) -> str:
        return "".join(piece.text for piece in self.pieces)

    @property
    def plain(self) -> str:
        return "".join(piece.text for piece in self.pieces if piece.visible)

    def __len__(self) -> int:
        return self.end - self.start


def segment_tokens(tokens: Iterable[Token]) -> tuple[Segment, ...]:
    """Fold a token stream into segments.

    The running offset and style state are local to the call, so segmenting
    the same input from several places never interferes.

    Args:
        tokens: Tokens in source order

    Returns:
        tuple: Segments ordered by start offset, covering every visible
        character exactly once
    """
    segments: list[Segment] = []
    offset = 0
    style = EMPTY_STATE
    run_style: StyleState | None = None
    run_start = 0
    run: list[Piece] = []
    pending: list[Piece] = []

    for token in tokens:
        if isinstance(token, CharToken):
            if run_style != style:
                if run_style is not None:
                    segments.append(Segment(run_style, tuple(run), run_start, offset))
                run_style, run_start, run = style, offset, []
            run.extend(pending)
            pending = []
            run.append(Piece(token.char, offset, True))
            offset += 1
        elif token.is_sgr:
            style = style.apply(token.params)
        else:
            pending.append(Piece(token.raw, offset, False))

    if run_style is not None:
        run.extend(pending)
        segments.append(Segment(run_style, tuple(run), run_start, offset))

    logger.debug(f"Segmented {offset} visible characters into {len(segments)} segments")
    return tuple(segments)


def segment(text: str) -> tuple[Segment, ...]:
    """Scan and segment ``text``."""
    return segment_tokens(scan(text))
