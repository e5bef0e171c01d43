#!/usr/bin/env python3
"""Dataset loading and index construction.

The dataset is a JSON array of ``{name, unicode, description}`` objects.
It is read once, validated, and turned into two read-only lookup tables:
``:name:`` token to :class:`NameEntry` and unicode string to
:class:`CodepointEntry`.
"""
from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import TypeAdapter, ValidationError

from ..core.config import DUPLICATE_POLICIES
from ..core.exceptions import ConfigurationError, DatasetError
from ..core.logging import get_logger
from ..schemas import CodepointEntry, EmojiRecord, NameEntry

logger = get_logger(__name__)

DEFAULT_INDEX_PATH = Path(__file__).resolve().parent.parent / "data" / "twemoji-index.json"

NameIndex = Mapping[str, NameEntry]
CodepointIndex = Mapping[str, CodepointEntry]

_RECORDS_ADAPTER = TypeAdapter(list[EmojiRecord])


def load_records(path: str | Path | None = None) -> list[EmojiRecord]:
    """Read and validate every record of a dataset file.

    Args:
        path: JSON dataset to read. Defaults to the bundled twemoji index.

    Returns:
        Records in file order.

    Raises:
        DatasetError: If the file cannot be read, is not a JSON array, or
            an entry is missing a field.

    """
    dataset_path = Path(path) if path is not None else DEFAULT_INDEX_PATH

    try:
        with open(dataset_path, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise DatasetError(f"Cannot read emoji dataset {dataset_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Emoji dataset {dataset_path} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise DatasetError(f"Emoji dataset {dataset_path} must contain a JSON array, got {type(raw).__name__}")

    try:
        records = _RECORDS_ADAPTER.validate_python(raw)
    except ValidationError as e:
        raise DatasetError(f"Emoji dataset {dataset_path} has invalid entries: {e}") from e

    logger.debug(f"Loaded {len(records)} emoji records from {dataset_path}")
    return records


def build_indexes(
    records: Iterable[EmojiRecord],
    on_duplicate: str = "warn",
) -> tuple[NameIndex, CodepointIndex]:
    """Build the name and codepoint indexes in a single pass.

    A later record with an already indexed name or unicode replaces the
    earlier one. ``on_duplicate`` chooses whether that is logged ("warn"),
    rejected ("error") or silent ("ignore").
    """
    if on_duplicate not in DUPLICATE_POLICIES:
        raise ConfigurationError(
            f"on_duplicate must be one of {', '.join(DUPLICATE_POLICIES)}, got {on_duplicate!r}"
        )

    name_index: dict[str, NameEntry] = {}
    codepoint_index: dict[str, CodepointEntry] = {}

    for record in records:
        token = record.token
        duplicates = []
        if token in name_index:
            duplicates.append(f"name {token}")
        if record.unicode in codepoint_index:
            duplicates.append(f"unicode {record.unicode}")

        if duplicates:
            message = f"Duplicate emoji {' and '.join(duplicates)} in dataset, keeping the last entry"
            if on_duplicate == "error":
                raise DatasetError(f"Duplicate emoji {' and '.join(duplicates)} in dataset")
            if on_duplicate == "warn":
                logger.warning(message)

        name_index[token] = NameEntry(unicode=record.unicode, description=record.description)
        codepoint_index[record.unicode] = CodepointEntry(twemoji=token, description=record.description)

    return MappingProxyType(name_index), MappingProxyType(codepoint_index)
