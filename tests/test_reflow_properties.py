"""Property tests for the reflow core."""

import math
import re

from hypothesis import given, settings, strategies as st

from nwrap.core import count_chars, format_text, normalize_line_breaks

BREAKS = ["\r\n", "\r", "\n", "\u2028", "\u2029"]
ANY_BREAK = re.compile(r"\r\n|[\r\n\u2028\u2029]")

# Text with every recognized break style mixed into arbitrary code points.
text_with_breaks = st.lists(
    st.one_of(st.text(max_size=12), st.sampled_from(BREAKS)), max_size=12
).map("".join)
widths = st.integers(min_value=1, max_value=20)
NO_BREAKS = st.characters(exclude_characters="\r\n\u2028\u2029")


def _strip_breaks(text: str) -> str:
    return ANY_BREAK.sub("", text)


@given(text=text_with_breaks, n=widths)
@settings(max_examples=200, deadline=500)
def test_property_no_code_point_lost_or_reordered(text, n):
    """Property: only line breaks are added or removed."""
    assert _strip_breaks(format_text(text, n)) == _strip_breaks(text)


@given(text=text_with_breaks, n=widths)
@settings(max_examples=200, deadline=500)
def test_property_each_line_split_into_full_chunks(text, n):
    """Property: a line of length L becomes ceil(L/n) chunks of n, last shorter."""
    for line in normalize_line_breaks(text).split("\n"):
        segments = format_text(line, n).split("\n")
        length = len(line)
        if length == 0:
            assert segments == [""]
            continue
        assert len(segments) == math.ceil(length / n)
        assert all(len(segment) == n for segment in segments[:-1])
        expected_last = length % n or n
        assert len(segments[-1]) == expected_last


@given(text=st.text(alphabet=NO_BREAKS, min_size=1), n=widths)
@settings(max_examples=200, deadline=500)
def test_property_no_empty_or_trailing_synthetic_break(text, n):
    """Property: a single non-empty line never yields an empty segment."""
    formatted = format_text(text, n)
    assert "\n\n" not in formatted
    assert not formatted.endswith("\n")


@given(text=text_with_breaks, n=widths)
@settings(max_examples=200, deadline=500)
def test_property_zero_width_only_normalizes(text, n):
    """Property: width 0 only normalizes, and normalization is idempotent."""
    normalized = normalize_line_breaks(text)
    assert format_text(text, 0) == normalized
    assert normalize_line_breaks(format_text(text, n)) == format_text(text, n)


@given(text=text_with_breaks)
@settings(max_examples=200, deadline=500)
def test_property_count_matches_stripped_length(text):
    """Property: count equals the code points left after stripping breaks."""
    assert count_chars(text) == len(_strip_breaks(text))


@given(
    parts=st.lists(
        st.text(alphabet=NO_BREAKS),
        min_size=1,
        max_size=6,
    ),
    separator=st.sampled_from(BREAKS),
)
@settings(max_examples=100, deadline=500)
def test_property_count_invariant_under_break_style(parts, separator):
    """Property: the count does not depend on which break style joins lines."""
    assert count_chars(separator.join(parts)) == count_chars("\n".join(parts))


@given(text=text_with_breaks, n=widths)
@settings(max_examples=100, deadline=500)
def test_property_deterministic(text, n):
    assert format_text(text, n) == format_text(text, n)
    assert count_chars(text) == count_chars(text)
