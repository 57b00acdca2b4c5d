"""
Parsing of ANSI escape sequences into styled segments.
"""

from .scanner import scan
from .segmenter import Piece, Segment, segment, segment_tokens
from .style import StyleCategory, StyleEntry, StyleState
from .tokens import CharToken, EscapeToken

__all__ = [
    "CharToken",
    "EscapeToken",
    "Piece",
    "Segment",
    "StyleCategory",
    "StyleEntry",
    "StyleState",
    "scan",
    "segment",
    "segment_tokens",
]
