#!/usr/bin/env python3
"""Custom exceptions for twemoji-tags.

This module defines the exception hierarchy for resolver, dataset and
configuration errors.
"""


class TwemojiError(Exception):
    """Base exception for twemoji-tags errors."""


class ConfigurationError(TwemojiError, ValueError):
    """Exception for invalid icon sizes and configuration values."""


class DatasetError(TwemojiError):
    """Exception for unreadable, malformed or conflicting emoji datasets."""


class EmojiLookupError(TwemojiError, LookupError):
    """Exception for names or codepoints missing from an index."""

    def __init__(self, key: str, index: str = "name") -> None:
        self.key = key
        self.index = index
        super().__init__(f"Unknown emoji {index} {key!r}")
