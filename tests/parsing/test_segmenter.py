"""
Tests for the segmenter.
"""

import pytest

from ansi_cut.parsing.segmenter import segment
from ansi_cut.parsing.style import EMPTY_STATE

SAMPLES = [
    "",
    "plain",
    "\x1b[31mAB\x1b[32mCD",
    "\x1b[30mTEXT\x1b[39m \x1b[31mTEXT\x1b[39m",
    "a\x1b[1mb\x1b[2Jc\x1b[0md\x1b[K",
    "\x1b[31m\U0001f9d1\u200d\U0001f3ed\x1b[0m!",
]


class TestSegment:
    """Tests for segment."""

    def test_plain_text(self):
        """Test that unstyled text is a single segment."""
        (seg,) = segment("plain")
        assert seg.style == EMPTY_STATE
        assert (seg.start, seg.end) == (0, 5)
        assert seg.text == "plain"
        assert len(seg) == 5

    def test_no_visible_characters(self):
        """Test that escapes alone produce no segments."""
        assert segment("") == ()
        assert segment("\x1b[31m\x1b[39m") == ()

    def test_style_changes_open_segments(self):
        """Test that each style change starts a new segment."""
        first, second = segment("\x1b[31mAB\x1b[32mCD")
        assert first.style.codes == (31,)
        assert (first.start, first.end, first.text) == (0, 2, "AB")
        assert second.style.codes == (32,)
        assert (second.start, second.end, second.text) == (2, 4, "CD")

    @pytest.mark.parametrize(
        "text",
        ["\x1b[31mA\x1b[31mB", "\x1b[31mA\x1b[39m\x1b[31mB", "\x1b[1mA\x1b[22;1mB"],
    )
    def test_segments_are_maximal(self, text):
        """Test that an unchanged effective style does not split the run."""
        (seg,) = segment(text)
        assert seg.plain == "AB"

    def test_opaque_escape_joins_next_character(self):
        """Test that opaque escapes stay in the text at their position."""
        (seg,) = segment("A\x1b[2JB")
        assert seg.text == "A\x1b[2JB"
        assert seg.plain == "AB"
        escape = seg.pieces[1]
        assert (escape.offset, escape.visible) == (1, False)

    def test_opaque_escape_after_style_change(self):
        """Test that an escape between a style change and text goes to the new run."""
        first, second = segment("A\x1b[31m\x1b[2JB")
        assert first.text == "A"
        assert second.text == "\x1b[2JB"

    def test_trailing_opaque_escape(self):
        """Test that trailing escapes attach to the last segment."""
        (seg,) = segment("AB\x1b[K")
        assert seg.text == "AB\x1b[K"
        assert seg.end == 2

    @pytest.mark.parametrize("text", SAMPLES)
    def test_segments_partition_visible_text(self, text):
        """Test that segments cover every visible offset without gaps."""
        segments = segment(text)
        position = 0
        for seg in segments:
            assert seg.start == position
            assert seg.end == seg.start + len(seg.plain)
            position = seg.end
        for left, right in zip(segments, segments[1:]):
            assert left.style != right.style
