"""twemoji-tags - render ":name:" emoji codes as twemoji image tags."""

from importlib import import_module, metadata
from pathlib import Path
import tomllib
from typing import TYPE_CHECKING


def _get_version() -> str:
    try:
        return metadata.version("twemoji-tags")
    except metadata.PackageNotFoundError:
        pass

    try:
        pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
        return str(data["project"]["version"])
    except (OSError, KeyError, tomllib.TOMLDecodeError):
        return "unknown"


__version__ = _get_version()

if TYPE_CHECKING:
    from .core.config import ConfigLoader, get_config
    from .core.exceptions import ConfigurationError, DatasetError, EmojiLookupError, TwemojiError
    from .index import build_indexes, load_records
    from .resolver import IconSize, TwemojiResolver, get_resolver, unicode_from_utf8
    from .schemas import EmojiRecord

_LAZY_EXPORTS = {
    "TwemojiResolver": (".resolver", "TwemojiResolver"),
    "IconSize": (".resolver", "IconSize"),
    "get_resolver": (".resolver", "get_resolver"),
    "unicode_from_utf8": (".resolver", "unicode_from_utf8"),
    "EmojiRecord": (".schemas", "EmojiRecord"),
    "load_records": (".index", "load_records"),
    "build_indexes": (".index", "build_indexes"),
    "ConfigLoader": (".core.config", "ConfigLoader"),
    "get_config": (".core.config", "get_config"),
    "ConfigurationError": (".core.exceptions", "ConfigurationError"),
    "DatasetError": (".core.exceptions", "DatasetError"),
    "EmojiLookupError": (".core.exceptions", "EmojiLookupError"),
    "TwemojiError": (".core.exceptions", "TwemojiError"),
}


def __getattr__(name):
    if name in {"core", "index", "schemas"}:
        module = import_module(f".{name}", __name__)
        globals()[name] = module
        return module

    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attr_name = _LAZY_EXPORTS[name]
    module = import_module(module_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


__all__ = [
    "TwemojiResolver",
    "IconSize",
    "get_resolver",
    "unicode_from_utf8",
    "EmojiRecord",
    "load_records",
    "build_indexes",
    "ConfigLoader",
    "get_config",
    "ConfigurationError",
    "DatasetError",
    "EmojiLookupError",
    "TwemojiError",
]
