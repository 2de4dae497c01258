"""Slug normalizer: turns a free-text title into a filename-safe slug."""

import re

_EDGE_SYMBOLS_RE = re.compile(r'^\W*|\W*$')
_INNER_SYMBOLS_RE = re.compile(r'\W+\b|\b\W+')


def normalize(text: str) -> str:
    """Convert text into a lowercase, dash-separated slug.

    Example: "Use *normalized* filenames!" -> "use-normalized-filenames"
    """
    text = _EDGE_SYMBOLS_RE.sub('', text)
    text = _INNER_SYMBOLS_RE.sub('-', text)
    return text.lower()
