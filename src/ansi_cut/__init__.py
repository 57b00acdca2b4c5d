"""
ansi_cut package.

Cut and chunk strings containing ANSI color codes by visible character while
keeping every character's style.
"""

from .chunker import Chunks, chunks
from .cutter import cut, cut_segments
from .errors import AnsiCutError, InvalidArgumentError
from .parsing import Segment, StyleState, scan, segment
from .text import AnsiText, strip_ansi, visible_length

__version__ = "0.1.0"

__all__ = [
    "AnsiCutError",
    "AnsiText",
    "Chunks",
    "InvalidArgumentError",
    "Segment",
    "StyleState",
    "chunks",
    "cut",
    "cut_segments",
    "scan",
    "segment",
    "strip_ansi",
    "visible_length",
]
