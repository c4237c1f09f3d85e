from __future__ import annotations

import re

_DISALLOWED = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def slugify(value: str | None) -> str:
    """URL segment for a display string: ``"Saint Ives!!"`` -> ``"saint-ives"``.

    Hyphens and punctuation are dropped rather than kept, so
    ``"Bexhill-on-Sea"`` becomes ``"bexhillonsea"``.
    """
    if not value:
        return ""
    cleaned = _DISALLOWED.sub("", value.lower())
    # Leading and trailing whitespace become hyphens as well.
    return _WHITESPACE.sub("-", cleaned).strip()


def with_suffix(slug: str, suffix: str) -> str:
    if not suffix:
        return slug
    if not slug:
        return suffix
    return f"{slug}-{suffix}"
