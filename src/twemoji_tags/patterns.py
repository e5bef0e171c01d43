#!/usr/bin/env python3
"""Fixed templates and the token pattern used to render emoji markup.

Generated markup is consumed by existing pages, so the templates below are
reproduced exactly and must not change.
"""

import re
from typing import Final

# CDN location of a twemoji PNG: icon size (used twice) and unicode string.
TWEMOJI_URL: Final = "//twemoji.maxcdn.com/{size}x{size}/{unicode}.png"

# The class attribute is always present, empty when no classes are given.
IMAGE_TAG: Final = '<img src="{src}" alt="{alt}" class="{classes}">'

# A ":name:" token. The name may be empty, so "::" is a token too.
TWEMOJI_PATTERN: Final = re.compile(r"(:[a-zA-Z0-9_]*:)")


def format_url(size: int, unicode: str) -> str:
    return TWEMOJI_URL.format(size=size, unicode=unicode)


def format_image_tag(src: str, alt: str, class_names: str | list[str] | tuple[str, ...] = "") -> str:
    classes = " ".join(class_names) if isinstance(class_names, (list, tuple)) else class_names
    return IMAGE_TAG.format(src=src, alt=alt, classes=classes)
