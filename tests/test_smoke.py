#!/usr/bin/env python3
"""Smoke tests - "Does it still work?" tests

These tests detect when the package is fundamentally broken:
- Import errors
- Missing bundled dataset
- Public exports
"""

import pytest


class TestImports:
    def test_public_exports(self):
        import twemoji_tags

        for name in twemoji_tags.__all__:
            assert getattr(twemoji_tags, name) is not None

    def test_unknown_attribute(self):
        import twemoji_tags

        with pytest.raises(AttributeError):
            twemoji_tags.not_a_real_export

    def test_version(self):
        import twemoji_tags

        assert isinstance(twemoji_tags.__version__, str)
        assert twemoji_tags.__version__

    def test_exception_hierarchy(self):
        from twemoji_tags import ConfigurationError, DatasetError, EmojiLookupError, TwemojiError

        assert issubclass(ConfigurationError, TwemojiError)
        assert issubclass(DatasetError, TwemojiError)
        assert issubclass(EmojiLookupError, TwemojiError)
        assert issubclass(EmojiLookupError, LookupError)


class TestDefaultResolver:
    def test_get_resolver_is_cached(self, monkeypatch):
        from twemoji_tags import resolver as resolver_module

        monkeypatch.setattr(resolver_module, "_resolver", None)
        assert resolver_module.get_resolver() is resolver_module.get_resolver()

    def test_renders_with_bundled_data(self, monkeypatch):
        from twemoji_tags import resolver as resolver_module

        monkeypatch.setattr(resolver_module, "_resolver", None)
        html = resolver_module.get_resolver().parse_text("Ship it :rocket:")
        assert html == 'Ship it <img src="//twemoji.maxcdn.com/16x16/1f680.png" alt="rocket" class="">'
