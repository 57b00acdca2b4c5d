"""
Tracking of the active SGR (Select Graphic Rendition) state.

A ``StyleState`` is an immutable, ordered collection of the SGR codes in
effect at some position of a string. New states are derived with
``StyleState.apply`` so the state can be threaded through a fold without any
shared mutable field.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

RESET = "\x1b[0m"


class StyleCategory(Enum):
    """Category of an SGR entry, deciding whether it replaces or accumulates."""

    ATTRIBUTE = "attribute"  # accumulates, one entry per code
    FONT = "font"  # replaces
    FOREGROUND = "foreground"  # replaces
    BACKGROUND = "background"  # replaces
    UNDERLINE_COLOR = "underline_color"  # replaces
    UNKNOWN = "unknown"  # accumulates, never deduplicated


ATTRIBUTE_CODES = frozenset(
    [1, 2, 3, 4, 5, 6, 7, 8, 9, 20, 21, 26, 51, 52, 53, 60, 61, 62, 63, 64, 73, 74]
)

# Turn-off code -> attributes it cancels
ATTRIBUTE_OFF_CODES = {
    22: (1, 2),
    23: (3, 20),
    24: (4, 21),
    25: (5, 6),
    27: (7,),
    28: (8,),
    29: (9,),
    50: (26,),
    54: (51, 52),
    55: (53,),
    65: (60, 61, 62, 63, 64),
    75: (73, 74),
}

# Extended color introducer -> category it sets
EXTENDED_COLOR_CODES = {
    38: StyleCategory.FOREGROUND,
    48: StyleCategory.BACKGROUND,
    58: StyleCategory.UNDERLINE_COLOR,
}

# Code clearing a whole replacing category
CATEGORY_OFF_CODES = {
    10: StyleCategory.FONT,
    39: StyleCategory.FOREGROUND,
    49: StyleCategory.BACKGROUND,
    59: StyleCategory.UNDERLINE_COLOR,
}


def classify(code: int) -> StyleCategory:
    """Return the category a single (non extended) SGR code belongs to."""
    if code in ATTRIBUTE_CODES:
        return StyleCategory.ATTRIBUTE
    if 11 <= code <= 19:
        return StyleCategory.FONT
    if 30 <= code <= 37 or 90 <= code <= 97:
        return StyleCategory.FOREGROUND
    if 40 <= code <= 47 or 100 <= code <= 107:
        return StyleCategory.BACKGROUND
    return StyleCategory.UNKNOWN


def _extended_color_length(params: tuple[int, ...], index: int) -> int | None:
    """Length of the extended color starting at ``params[index]``, if complete."""
    remaining = len(params) - index
    if remaining >= 3 and params[index + 1] == 5:
        return 3
    if remaining >= 5 and params[index + 1] == 2:
        return 5
    return None


@dataclass(frozen=True)
class StyleEntry:
    """One active entry of a style state."""

    category: StyleCategory
    key: object
    params: tuple[int, ...]


@dataclass(frozen=True)
class StyleState:
    """Ordered set of active SGR entries."""

    entries: tuple[StyleEntry, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def codes(self) -> tuple[int, ...]:
        """All active parameters, flattened in insertion order."""
        return tuple(code for entry in self.entries for code in entry.params)

    def apply(self, params: Iterable[int]) -> "StyleState":
        """Return the state after applying the parameters of one SGR sequence.

        Args:
            params: Numeric SGR parameters, empty meaning reset

        Returns:
            StyleState: The new state (``self`` is left untouched)
        """
        params = tuple(params) or (0,)
        active = {(entry.category, entry.key): entry for entry in self.entries}
        unknown = sum(1 for entry in self.entries if entry.category is StyleCategory.UNKNOWN)

        def store(category: StyleCategory, key: object, values: tuple[int, ...]) -> None:
            # dict assignment keeps the position of a replaced category
            active[(category, key)] = StyleEntry(category, key, values)

        i = 0
        while i < len(params):
            code = params[i]
            if code == 0:
                active.clear()
                unknown = 0
            elif code in ATTRIBUTE_OFF_CODES:
                for target in ATTRIBUTE_OFF_CODES[code]:
                    active.pop((StyleCategory.ATTRIBUTE, target), None)
            elif code in CATEGORY_OFF_CODES:
                active.pop((CATEGORY_OFF_CODES[code], None), None)
            elif code in EXTENDED_COLOR_CODES:
                length = _extended_color_length(params, i)
                if length is None:
                    # Incomplete color: keep the rest verbatim
                    store(StyleCategory.UNKNOWN, unknown, params[i:])
                    unknown += 1
                    break
                store(EXTENDED_COLOR_CODES[code], None, params[i : i + length])
                i += length
                continue
            else:
                category = classify(code)
                if category is StyleCategory.ATTRIBUTE:
                    store(category, code, (code,))
                elif category is StyleCategory.UNKNOWN:
                    store(category, unknown, (code,))
                    unknown += 1
                else:
                    store(category, None, (code,))
            i += 1

        return StyleState(tuple(active.values()))

    def to_sgr(self, reset: bool = False) -> str:
        """Render the escape sequence reopening this state.

        Args:
            reset: Prefix the parameters with 0 so that previously active
                codes are cleared first

        Returns:
            str: The SGR sequence, or an empty string when there is nothing
            to emit
        """
        codes = self.codes
        if reset:
            codes = (0,) + codes
        if not codes:
            return ""
        return "\x1b[" + ";".join(str(code) for code in codes) + "m"


EMPTY_STATE = StyleState()
