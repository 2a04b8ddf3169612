"""URL summary for the selection prompt."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable
from urllib.parse import urlsplit

from .models import DisplaySettings, QueryParam
from .param_classifier import classify, is_tracking_param, split_query, truncate

_AUTHORITY_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://([^/?#]*)")


@dataclass
class UrlAnalysis:
    """What the prompt shows about a URL, already cut to the display limits."""

    url: str
    domain: str
    display_domain: str
    display_url: str
    params: list[QueryParam] = field(default_factory=list)
    max_normal_params: int = 10
    max_blacklisted_params: int = 5

    @property
    def normal_params(self) -> list[QueryParam]:
        return [p for p in self.params if not p.is_tracking]

    @property
    def tracking_params(self) -> list[QueryParam]:
        return [p for p in self.params if p.is_tracking]

    @property
    def visible_params(self) -> list[QueryParam]:
        """Parameters to list, in URL order, capped per category."""
        visible = []
        normal = tracking = 0
        for param in self.params:
            if param.is_tracking:
                tracking += 1
                if tracking <= self.max_blacklisted_params:
                    visible.append(param)
            else:
                normal += 1
                if normal <= self.max_normal_params:
                    visible.append(param)
        return visible

    @property
    def hidden_count(self) -> int:
        return len(self.params) - len(self.visible_params)

    @property
    def has_tracking(self) -> bool:
        return any(p.is_tracking for p in self.params)


def _split_raw(url: str) -> tuple[str, str, str]:
    """Split a link into (base, query, fragment) without validating it."""
    rest, _, fragment = url.partition("#")
    base, _, query = rest.partition("?")
    return base, query, fragment


def extract_domain(url: str) -> str:
    """Return the host part of a URL, or an empty string if there is none."""
    try:
        return urlsplit(url).netloc
    except ValueError:
        # e.g. an unbalanced IPv6 bracket
        match = _AUTHORITY_RE.match(url)
        return match.group(1) if match else ""


def query_of(url: str) -> str:
    """Return the raw query string of a URL, without the fragment."""
    try:
        return urlsplit(url).query
    except ValueError:
        return _split_raw(url)[1]


def analyze_url(
    url: str,
    tracking_prefixes: Iterable[str],
    display: DisplaySettings,
) -> UrlAnalysis:
    """Build the display summary for ``url``."""
    domain = extract_domain(url)
    return UrlAnalysis(
        url=url,
        domain=domain,
        display_domain=truncate(domain, display.max_domain_length),
        display_url=truncate(url, display.max_url_length),
        params=classify(query_of(url), tracking_prefixes, display.max_param_value_length),
        max_normal_params=display.max_normal_params,
        max_blacklisted_params=display.max_blacklisted_params,
    )


def strip_tracking_params(url: str, tracking_prefixes: Iterable[str]) -> tuple[str, int]:
    """
    Remove tracking parameters from a URL.

    Normal parameters are kept byte-for-byte and in order; the fragment is
    preserved. The link is split as text, so it need not be a valid URL.

    Returns:
        Tuple of (new_url, number_of_removed_params)
    """
    prefixes = tuple(tracking_prefixes)
    base, query, fragment = _split_raw(url)
    if not query:
        return url, 0

    kept = []
    removed = 0
    for token in query.split("&"):
        if not token:
            continue
        name = split_query(token)[0][0]
        if is_tracking_param(name, prefixes):
            removed += 1
        else:
            kept.append(token)

    if not removed:
        return url, 0
    new_url = base
    if kept:
        new_url += "?" + "&".join(kept)
    if "#" in url:
        new_url += "#" + fragment
    return new_url, removed
