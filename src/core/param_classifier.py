"""Query-string parameter classification.

Splits a raw query string into ordered parameters and flags the ones whose
name matches a tracking prefix. Matching always uses the raw, undecoded name;
decoding only affects the value shown to the user.
"""

from __future__ import annotations

from typing import Iterable
from urllib.parse import unquote_plus

from .constants import TRUNCATION_MARKER
from .models import QueryParam


def split_query(query_string: str) -> list[tuple[str, str]]:
    """Split a raw query string into (name, raw_value) pairs, keeping order."""
    pairs = []
    for token in query_string.split("&"):
        if not token:
            continue
        name, _, value = token.partition("=")
        pairs.append((name, value))
    return pairs


def is_tracking_param(name: str, prefixes: Iterable[str]) -> bool:
    """Return True if ``name`` equals or starts with any of ``prefixes``."""
    return any(prefix and name.startswith(prefix) for prefix in prefixes)


def truncate(text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters, appending a marker if cut."""
    if max_length < 0 or len(text) <= max_length:
        return text
    return text[:max_length] + TRUNCATION_MARKER


def decode_value(raw_value: str) -> str:
    """Percent-decode a value for display."""
    return unquote_plus(raw_value, errors="replace")


def classify(
    query_string: str,
    blacklist_prefixes: Iterable[str],
    max_value_len: int,
) -> list[QueryParam]:
    """
    Classify every parameter of a query string.

    Args:
        query_string: Raw query string, without the leading '?'
        blacklist_prefixes: Tracking prefixes; a name matches if it equals or
            starts with one of them
        max_value_len: Maximum decoded value length before truncation

    Returns:
        One QueryParam per non-empty token, in input order
    """
    prefixes = tuple(blacklist_prefixes)
    return [
        QueryParam(
            name=name,
            value=truncate(decode_value(raw_value), max_value_len),
            is_tracking=is_tracking_param(name, prefixes),
        )
        for name, raw_value in split_query(query_string)
    ]
