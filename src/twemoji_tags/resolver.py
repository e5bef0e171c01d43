#!/usr/bin/env python3
"""Resolve emoji names and characters to twemoji images.

Usage:
    from twemoji_tags import TwemojiResolver

    resolver = TwemojiResolver(icon_size=36)
    resolver.get_url(":smile:")              # "//twemoji.maxcdn.com/36x36/1f604.png"
    resolver.get_image("😀", by_name=False)  # '<img src="..." alt="grinning face" class="">'
    resolver.parse_text("Hi :smile: there", class_names=["emoji", "inline"])
"""
from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from enum import IntEnum
from typing import TextIO

from .core.config import MISSING_POLICIES, SUPPORTED_ICON_SIZES, ConfigLoader, get_config
from .core.exceptions import ConfigurationError, EmojiLookupError
from .core.logging import get_logger
from .index import CodepointIndex, NameIndex, build_indexes, load_records
from .patterns import TWEMOJI_PATTERN, format_image_tag, format_url
from .schemas import EmojiRecord

logger = get_logger(__name__)

ClassNames = str | list[str] | tuple[str, ...]


class IconSize(IntEnum):
    """Pixel sizes the CDN serves twemoji images in."""

    SMALL = 16
    MEDIUM = 36
    LARGE = 72

    @classmethod
    def validate(cls, value: int) -> IconSize:
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(str(size) for size in SUPPORTED_ICON_SIZES)
            raise ConfigurationError(f"Icon must be of size {allowed}; got {value!r}") from None


def unicode_from_utf8(char: str | bytes) -> str:
    """Return the hex form of a character as used by the codepoint index.

    Every codepoint is written as 8 hex digits (UTF-32 big endian), the
    blocks are concatenated and leading zeros of the whole string are
    stripped. Only the first block loses its padding, so multi-codepoint
    sequences keep zero runs between codepoints:
    "🇺🇸" becomes "1f1fa0001f1f8", not "1f1fa-1f1f8".

    Raises:
        EmojiLookupError: If ``char`` is bytes that are not valid UTF-8.
    """
    if isinstance(char, bytes):
        try:
            char = char.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EmojiLookupError(char.hex(), "character") from e
    return char.encode("utf-32-be").hex().lstrip("0")


class TwemojiResolver:
    """Lookups and image markup over the twemoji name and codepoint indexes.

    The indexes are built once in the constructor and never change, so one
    instance can be shared between threads.
    """

    def __init__(
        self,
        icon_size: int | None = None,
        records: Iterable[EmojiRecord] | None = None,
        config: ConfigLoader | None = None,
        on_missing: str | None = None,
    ) -> None:
        self._config = config or get_config()

        self._icon_size = IconSize.validate(self._config.icon_size if icon_size is None else icon_size)

        self._on_missing = self._config.on_missing if on_missing is None else on_missing
        if self._on_missing not in MISSING_POLICIES:
            raise ConfigurationError(
                f"on_missing must be one of {', '.join(MISSING_POLICIES)}, got {self._on_missing!r}"
            )

        if records is None:
            records = load_records(self._config.index_path)
        self._twemoji_index: NameIndex
        self._unicode_index: CodepointIndex
        self._twemoji_index, self._unicode_index = build_indexes(records, self._config.on_duplicate)

    @property
    def icon_size(self) -> IconSize:
        return self._icon_size

    @property
    def supported_icon_sizes(self) -> tuple[int, ...]:
        return SUPPORTED_ICON_SIZES

    @property
    def twemoji_index(self) -> NameIndex:
        return self._twemoji_index

    @property
    def unicode_index(self) -> CodepointIndex:
        return self._unicode_index

    def __len__(self) -> int:
        return len(self._twemoji_index)

    def __contains__(self, token: object) -> bool:
        return token in self._twemoji_index

    # Lookups

    def unicode_for_name(self, token: str) -> str:
        """Return the unicode string of a ":name:" token."""
        try:
            return self._twemoji_index[token].unicode
        except KeyError:
            raise EmojiLookupError(token, "name") from None

    def unicode_for_utf8(self, char: str | bytes) -> str:
        return unicode_from_utf8(char)

    def description_for_name(self, token: str) -> str:
        try:
            return self._twemoji_index[token].description
        except KeyError:
            raise EmojiLookupError(token, "name") from None

    def description_for_utf8(self, char: str | bytes) -> str:
        unicode = unicode_from_utf8(char)
        try:
            return self._unicode_index[unicode].description
        except KeyError:
            raise EmojiLookupError(unicode, "codepoint") from None

    def get_description(self, emoji: str, by_name: bool = True) -> str:
        return self.description_for_name(emoji) if by_name else self.description_for_utf8(emoji)

    def name_for_unicode(self, unicode: str) -> str:
        """Return the ":name:" token indexed under a unicode string."""
        try:
            return self._unicode_index[unicode].twemoji
        except KeyError:
            raise EmojiLookupError(unicode, "codepoint") from None

    def name_for_utf8(self, char: str | bytes) -> str:
        return self.name_for_unicode(unicode_from_utf8(char))

    # Rendering

    def get_url(self, emoji: str, by_name: bool = True) -> str:
        """Return the CDN url of an emoji given as ":name:" token or as a character."""
        unicode = self.unicode_for_name(emoji) if by_name else self.unicode_for_utf8(emoji)
        return format_url(int(self._icon_size), unicode)

    def get_image(self, emoji: str, by_name: bool = True, class_names: ClassNames = "") -> str:
        """Return an ``<img>`` tag for an emoji.

        Args:
            emoji: ":name:" token, or a character when ``by_name`` is False
            by_name: Resolve through the name index instead of the codepoints
            class_names: Class attribute value, or a list joined with spaces

        Raises:
            EmojiLookupError: If the emoji is not in the dataset.

        """
        return format_image_tag(
            self.get_url(emoji, by_name),
            self.get_description(emoji, by_name),
            class_names,
        )

    def image(
        self,
        emoji: str,
        class_names: ClassNames = "",
        by_name: bool = True,
        stream: TextIO | None = None,
    ) -> None:
        """Write the image tag of an emoji to ``stream`` (stdout by default)."""
        (stream or sys.stdout).write(self.get_image(emoji, by_name, class_names))

    def parse_text(
        self,
        text: str,
        by_name: bool = True,
        class_names: ClassNames = "",
        on_missing: str | None = None,
    ) -> str:
        """Replace every ":name:" token in text with its image tag.

        Tokens are matched left to right without overlap and replacements
        are not scanned again. A token the dataset does not know is kept
        verbatim under the "keep" policy; under "raise" the whole call
        fails with EmojiLookupError and nothing is returned.
        """
        policy = self._on_missing if on_missing is None else on_missing
        if policy not in MISSING_POLICIES:
            raise ConfigurationError(f"on_missing must be one of {', '.join(MISSING_POLICIES)}, got {policy!r}")

        def replace(match: re.Match[str]) -> str:
            token = match.group(1)
            try:
                return self.get_image(token, by_name, class_names)
            except EmojiLookupError:
                if policy == "raise":
                    raise
                logger.debug(f"No emoji for {token!r}, leaving it in place")
                return token

        return TWEMOJI_PATTERN.sub(replace, text)


_resolver: TwemojiResolver | None = None


def get_resolver() -> TwemojiResolver:
    """Get the global resolver built from the global config"""
    global _resolver
    if _resolver is None:
        _resolver = TwemojiResolver()
    return _resolver
