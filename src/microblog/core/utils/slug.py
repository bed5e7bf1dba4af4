"""Heading anchor ids"""

import re


_drop_re = re.compile(r"[^\w\s-]")
_sep_re = re.compile(r"[\s_-]+")

FALLBACK_SLUG = "heading"


def slugify(text: str) -> str:
    """'Hello, World!' -> 'hello-world'. Headings with no word characters get FALLBACK_SLUG."""
    text = _drop_re.sub("", text.lower())
    return _sep_re.sub("-", text).strip("-") or FALLBACK_SLUG
