"""Emoji dataset loading and lookup tables."""

from .loader import DEFAULT_INDEX_PATH, CodepointIndex, NameIndex, build_indexes, load_records

__all__ = ["DEFAULT_INDEX_PATH", "CodepointIndex", "NameIndex", "build_indexes", "load_records"]
