"""
Short display labels for note links.

Each rule pairs a cheap applicability test with a pattern-based formatter.
Rules are tried in order and the first applicable one decides the label.
When that rule's pattern does not fit the URL, the URL itself is returned.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .logging_setup import get_logger
from .rules import PROFILE_DOMAIN, SOCIAL_DOMAINS

logger = get_logger(__name__)

SOCIAL_THREAD_RE = re.compile(r"https?://([^/]+)/([^/]+)/[^/]+")
PROFILE_RE = re.compile(r"https?://(\w+\.\w+)/profile/(\w+)", re.ASCII)
DEFAULT_HOST_RE = re.compile(
    r"^(?:https?://)?(?:[^@/\n]+@)?(?:www\.)?([^:/?\n]+)",
    re.IGNORECASE | re.MULTILINE,
)


@dataclass(frozen=True)
class SocialThread:
    """threads.net / threads.com / x.com posts: ``host/account``."""

    domains: Tuple[str, ...] = SOCIAL_DOMAINS
    name: str = "social_thread"

    def applies(self, url: str) -> bool:
        # raw containment against the whole string, query included
        return any(domain in url for domain in self.domains)

    def label(self, url: str) -> Optional[str]:
        match = SOCIAL_THREAD_RE.search(url)
        if match is None:
            return None
        return f"{match.group(1)}/{match.group(2)}"


@dataclass(frozen=True)
class ProfileStyle:
    """bsky.app profile links: ``host/@handle``."""

    domain: str = PROFILE_DOMAIN
    name: str = "profile_style"

    def applies(self, url: str) -> bool:
        return self.domain in url

    def label(self, url: str) -> Optional[str]:
        match = PROFILE_RE.search(url)
        if match is None:
            return None
        return f"{match.group(1)}/@{match.group(2)}"


@dataclass(frozen=True)
class Default:
    """Anything else: the bare host."""

    name: str = "default"

    def applies(self, url: str) -> bool:
        return True

    def label(self, url: str) -> Optional[str]:
        # split keeps the captured host as the element after the leading prefix
        parts: List[str] = DEFAULT_HOST_RE.split(url)
        if len(parts) < 2:
            return None
        return parts[1]


RULES = (SocialThread(), ProfileStyle(), Default())


def pick_rule(url: str):
    return next(rule for rule in RULES if rule.applies(url))


def shorten_link(full_url: str) -> str:
    """
    Return a compact label for ``full_url``.

    Never raises: a URL the chosen rule cannot format comes back unchanged.
    """
    if not isinstance(full_url, str):
        return full_url

    rule = pick_rule(full_url)
    short = rule.label(full_url)
    if short is None:
        logger.warning(f"No {rule.name} label for {full_url!r}, using the URL as is")
        return full_url
    return short
