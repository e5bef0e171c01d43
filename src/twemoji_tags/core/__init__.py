"""Core package exports."""

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import ConfigLoader, get_config
    from .exceptions import ConfigurationError, DatasetError, EmojiLookupError, TwemojiError

__all__ = ["ConfigLoader", "get_config", "ConfigurationError", "DatasetError", "EmojiLookupError", "TwemojiError"]

_LAZY_EXPORTS = {
    "ConfigLoader": (".config", "ConfigLoader"),
    "get_config": (".config", "get_config"),
    "ConfigurationError": (".exceptions", "ConfigurationError"),
    "DatasetError": (".exceptions", "DatasetError"),
    "EmojiLookupError": (".exceptions", "EmojiLookupError"),
    "TwemojiError": (".exceptions", "TwemojiError"),
}


def __getattr__(name):
    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attr_name = _LAZY_EXPORTS[name]
    module = import_module(module_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
