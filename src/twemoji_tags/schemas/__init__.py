from .records import CodepointEntry, EmojiRecord, NameEntry

__all__ = ["CodepointEntry", "EmojiRecord", "NameEntry"]
