"""
Token types produced by the scanner.
"""

from dataclasses import dataclass

ESC = "\x1b"


@dataclass(frozen=True)
class CharToken:
    """A single visible character (one code point)."""

    char: str
    span: tuple[int, int]


@dataclass(frozen=True)
class EscapeToken:
    """An escape sequence found in the input.

    ``params`` holds the numeric parameters of an SGR sequence. It is ``None``
    for every other escape, which is kept verbatim but has no effect on style.
    """

    raw: str
    span: tuple[int, int]
    params: tuple[int, ...] | None = None

    @property
    def is_sgr(self) -> bool:
        return self.params is not None


Token = CharToken | EscapeToken
