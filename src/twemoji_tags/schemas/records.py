from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator

# Hex codepoint groups joined by "-", e.g. "1f600" or "1f1fa-1f1f8".
UNICODE_SEQUENCE_PATTERN = re.compile(r"^[0-9a-fA-F]+(?:-[0-9a-fA-F]+)*$")


class EmojiRecord(BaseModel):
    """One entry of the emoji dataset."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    unicode: str
    description: str

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("name must not be empty")
        return value

    @field_validator("unicode")
    @classmethod
    def _unicode_is_hex(cls, value: str) -> str:
        if not UNICODE_SEQUENCE_PATTERN.match(value):
            raise ValueError(f"unicode must be hex codepoints separated by '-', got {value!r}")
        return value

    @property
    def token(self) -> str:
        return f":{self.name}:"


class NameEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    unicode: str
    description: str


class CodepointEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    twemoji: str
    description: str
