"""
Shared fixtures for twemoji-tags tests.

Every test gets an isolated config: TWEMOJI_CONFIG points at a path that
does not exist, so a developer's ~/.twemoji/config.toml never leaks in.
"""

import json

import pytest

from twemoji_tags.core import config as config_module
from twemoji_tags.core.config import ConfigLoader
from twemoji_tags.resolver import TwemojiResolver
from twemoji_tags.schemas import EmojiRecord

SAMPLE_RECORDS = [
    {"name": "grinning", "unicode": "1f600", "description": "grinning face"},
    {"name": "smile", "unicode": "1f604", "description": "smiling face with open mouth and smiling eyes"},
    {"name": "a", "unicode": "1f170", "description": "negative squared latin capital letter a"},
    {"name": "b", "unicode": "1f171", "description": "negative squared latin capital letter b"},
    {"name": "us", "unicode": "1f1fa-1f1f8", "description": "regional indicator symbol letters us"},
]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("TWEMOJI_CONFIG", str(tmp_path / "absent-config.toml"))
    monkeypatch.delenv("TWEMOJI_ICON_SIZE", raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def sample_records():
    return [EmojiRecord(**entry) for entry in SAMPLE_RECORDS]


@pytest.fixture
def dataset_file(tmp_path):
    path = tmp_path / "index.json"
    path.write_text(json.dumps(SAMPLE_RECORDS), encoding="utf-8")
    return path


@pytest.fixture
def write_config(tmp_path):
    """Write a [twemoji] TOML table and return a loader for it."""

    def _write(body: str) -> ConfigLoader:
        path = tmp_path / "config.toml"
        path.write_text(f"[twemoji]\n{body}\n", encoding="utf-8")
        return ConfigLoader(path)

    return _write


@pytest.fixture
def resolver():
    """Resolver over the bundled dataset at the default icon size."""
    return TwemojiResolver()


@pytest.fixture
def sample_resolver(sample_records):
    return TwemojiResolver(records=sample_records)
