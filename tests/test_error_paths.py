"""Tests for the exception hierarchy and invariant checking."""

import pytest

from lumenmark import InvariantError, LumenmarkError, RenderError
from lumenmark.spans import InlineCategory, InlineSpan, LiteralRun, TokenCategory, TokenSpan, check_segments


class TestHierarchy:
    """All library errors share one base."""

    @pytest.mark.parametrize("error_cls", [InvariantError, RenderError])
    def test_subclass_of_base(self, error_cls: type[Exception]) -> None:
        assert issubclass(error_cls, LumenmarkError)

    def test_invariant_error_message(self) -> None:
        error = InvariantError("inline", "gap before segment", 4)
        assert str(error) == "inline at offset 4: gap before segment"
        assert error.engine == "inline"
        assert error.offset == 4

    def test_invariant_error_without_offset(self) -> None:
        assert str(InvariantError("block", "overlap")) == "block: overlap"


class TestCheckSegments:
    """check_segments rejects malformed segment lists."""

    def test_valid(self) -> None:
        check_segments([TokenSpan(0, 2, TokenCategory.KEYWORD, "if"), LiteralRun(2, 4, " x")], "if x", "highlight")

    def test_gap(self) -> None:
        with pytest.raises(InvariantError, match="gap"):
            check_segments([LiteralRun(1, 3, "bc")], "abc", "highlight")

    def test_overlap(self) -> None:
        segments = [LiteralRun(0, 2, "ab"), LiteralRun(1, 3, "bc")]
        with pytest.raises(InvariantError, match="overlap"):
            check_segments(segments, "abc", "highlight")

    def test_empty_segment(self) -> None:
        with pytest.raises(InvariantError, match="empty"):
            check_segments([LiteralRun(0, 0, "")], "abc", "highlight")

    def test_text_mismatch(self) -> None:
        with pytest.raises(InvariantError, match="does not match"):
            check_segments([LiteralRun(0, 3, "xyz")], "abc", "highlight")

    def test_short_tail(self) -> None:
        with pytest.raises(InvariantError, match="before end"):
            check_segments([LiteralRun(0, 2, "ab")], "abc", "highlight")

    def test_link_child_outside_label(self) -> None:
        link = InlineSpan(
            0, 6, InlineCategory.LINK, "[a](b)", content="a", url="b", children=(LiteralRun(0, 1, "["),)
        )
        with pytest.raises(InvariantError, match="link label"):
            check_segments([link], "[a](b)", "inline")
