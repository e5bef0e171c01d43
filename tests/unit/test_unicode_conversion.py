#!/usr/bin/env python3
"""Tests for converting characters to the hex form used by the codepoint index.

Each codepoint becomes an 8 digit block and only the leading zeros of the
whole string are stripped, so compound emoji keep the padding between their
codepoints. The expected strings below pin that behavior.
"""

import pytest

from twemoji_tags.core.exceptions import EmojiLookupError
from twemoji_tags.resolver import unicode_from_utf8


@pytest.mark.parametrize(
    "char, expected",
    [
        ("😀", "1f600"),
        ("🔥", "1f525"),
        ("©", "a9"),
        ("™", "2122"),
        ("\u2764", "2764"),
        ("A", "41"),
    ],
)
def test_single_codepoint(char, expected):
    assert unicode_from_utf8(char) == expected


@pytest.mark.parametrize(
    "char, expected",
    [
        # Flag: two regional indicators
        ("\U0001f1fa\U0001f1f8", "1f1fa0001f1f8"),
        # Skin tone modifier
        ("\U0001f44d\U0001f3fd", "1f44d0001f3fd"),
        # Variation selector
        ("\u2764\ufe0f", "27640000fe0f"),
        # Keycap: "#", VS16, combining enclosing keycap
        ("#\ufe0f\u20e3", "230000fe0f000020e3"),
        # ZWJ sequence
        ("\U0001f468\u200d\U0001f4bb", "1f4680000200d0001f4bb"),
    ],
)
def test_multi_codepoint_keeps_inner_padding(char, expected):
    assert unicode_from_utf8(char) == expected


def test_bytes_are_decoded_as_utf8():
    assert unicode_from_utf8("\U0001f1fa\U0001f1f8".encode("utf-8")) == "1f1fa0001f1f8"


def test_empty_string():
    assert unicode_from_utf8("") == ""


def test_multi_codepoint_does_not_match_dataset_form(resolver):
    # The dataset separates codepoints with "-", so compound characters
    # resolve by name only.
    assert resolver.unicode_for_name(":us:") != resolver.unicode_for_utf8("\U0001f1fa\U0001f1f8")
    assert resolver.unicode_for_utf8("\U0001f1fa\U0001f1f8") not in resolver.unicode_index


def test_invalid_utf8_bytes():
    with pytest.raises(EmojiLookupError) as exc_info:
        unicode_from_utf8(b"\xff")
    assert exc_info.value.key == "ff"
    assert exc_info.value.index == "character"
