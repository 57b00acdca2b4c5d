"""
Scanner splitting a string into visible characters and escape sequences.
"""

import logging
import re
from collections.abc import Iterator

from .tokens import ESC, CharToken, EscapeToken, Token

logger = logging.getLogger(__name__)

# CSI: ESC [ params intermediates final
# OSC: ESC ] ... (BEL | ESC \)
# anything else: ESC followed by one byte in 0x30-0x7E, except [ and ]
ESCAPE_RE = re.compile(
    r"""
    \x1b\[(?P<params>[0-?]*)(?P<inter>[\ -/]*)(?P<final>[@-~])
    | \x1b\][^\x07\x1b]*(?:\x07|\x1b\\)
    | \x1b[0-Z\\^-~]
    """,
    re.VERBOSE,
)
SGR_PARAMS_RE = re.compile(r"[0-9;]*")


def parse_sgr_params(params: str) -> tuple[int, ...]:
    """Parse the parameter string of an SGR sequence.

    Empty parameters stand for 0, so ``""`` and ``";1"`` give ``(0,)`` and
    ``(0, 1)``.
    """
    if not params:
        return (0,)
    return tuple(int(part) if part else 0 for part in params.split(";"))


def _escape_token(match: re.Match) -> EscapeToken:
    raw = match.group(0)
    params = match.group("params")
    if (
        match.group("final") == "m"
        and not match.group("inter")
        and SGR_PARAMS_RE.fullmatch(params)
    ):
        try:
            return EscapeToken(raw, match.span(), parse_sgr_params(params))
        except ValueError:
            # int() refuses oversized digit strings
            logger.debug(f"Unparsable SGR parameters at index {match.start()}, kept opaque")
    return EscapeToken(raw, match.span())


def scan(text: str) -> Iterator[Token]:
    """Yield the tokens of ``text`` in source order.

    Every index of ``text`` is covered by exactly one token. An ESC that does
    not start a complete escape sequence is yielded as a plain character.
    """
    pos = 0
    length = len(text)
    while pos < length:
        esc = text.find(ESC, pos)
        stop = length if esc == -1 else esc
        for i in range(pos, stop):
            yield CharToken(text[i], (i, i + 1))
        if esc == -1:
            return

        match = ESCAPE_RE.match(text, esc)
        if match:
            yield _escape_token(match)
            pos = match.end()
        else:
            logger.debug(f"Malformed escape sequence at index {esc}, kept as text")
            yield CharToken(ESC, (esc, esc + 1))
            pos = esc + 1
