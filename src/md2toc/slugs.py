"""Heading anchor slugs."""

from __future__ import annotations


def sanitize_anchor_name(text: str) -> str:
    """Turn heading text into an anchor slug.

    Letters and digits are lower-cased and kept; any run of other characters
    becomes a single ``-`` between words and is dropped at either end.

    >>> sanitize_anchor_name("First section")
    'first-section'
    >>> sanitize_anchor_name("  What's new? (v2.0)  ")
    'what-s-new-v2-0'
    """
    chars: list[str] = []
    pending_dash = False
    for char in text:
        if char.isalnum():
            if pending_dash and chars:
                chars.append("-")
            pending_dash = False
            chars.append(char.lower())
        else:
            pending_dash = True
    return "".join(chars)


class SlugRegistry:
    """Hand out unique slugs within one document.

    The first occurrence keeps the plain slug; repeats get ``-1``, ``-2``, ...
    """

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def unique(self, text: str) -> str:
        slug = sanitize_anchor_name(text)
        if slug not in self._seen:
            self._seen[slug] = 0
            return slug
        count = self._seen[slug]
        while True:
            count += 1
            candidate = f"{slug}-{count}"
            if candidate not in self._seen:
                break
        self._seen[slug] = count
        self._seen[candidate] = 0
        return candidate
