"""
URL utilities for article links.

Submitted article URLs are stored with an explicit scheme. Anything that does
not already start with http:// or https:// (any case) gets https:// prepended.
"""
from __future__ import annotations

import re

DEFAULT_SCHEME = "https://"

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


def has_http_scheme(url: str) -> bool:
    return bool(_SCHEME_RE.match(url))


def normalize_article_url(url: str) -> str:
    """Return ``url`` with a leading scheme, adding https:// when missing.

    Raises ValueError for empty or whitespace-only input.
    """
    u = (url or "").strip()
    if not u:
        raise ValueError("url must not be empty")
    if has_http_scheme(u):
        return u
    return f"{DEFAULT_SCHEME}{u}"


def strip_trailing_slash(url: str) -> str:
    return url[:-1] if url.endswith("/") else url
