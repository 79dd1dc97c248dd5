"""Anchor identifiers derived from heading text."""

from __future__ import annotations

import re

# ASCII-only so that exotic Unicode spaces are dropped rather than hyphenated.
_WHITESPACE_RE = re.compile(r"\s", re.ASCII)
_DISALLOWED_RE = re.compile(r"[^a-z\-]")


def slugify(text: str) -> str:
    """Return the anchor identifier for ``text``.

    Lowercases, turns every whitespace character into a hyphen (runs are not
    collapsed), then drops everything outside ``[a-z-]``. May return ``""``.
    """
    slug = _WHITESPACE_RE.sub("-", text.lower())
    return _DISALLOWED_RE.sub("", slug)
