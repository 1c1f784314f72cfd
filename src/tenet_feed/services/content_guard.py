"""Content guard for posts, replies and source links.

Rules run in order and the first failure wins:

1. trimmed text longer than the maximum length -> ``"too long"``
2. profanity lexicon hit -> ``"profanity"``
3. source title without link, or link without title -> ``"source title and link must both be set"``
4. profanity in the source title -> ``"profanity"``
5. blocked or malformed source link -> ``"unsafe link"``

``is_postable`` layers the minimum substance threshold on top for posts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlsplit

from better_profanity import Profanity

from tenet_feed.core.settings import settings

REASON_TOO_LONG = "too long"
REASON_TOO_SHORT = "too short"
REASON_EMPTY = "empty"
REASON_PROFANITY = "profanity"
REASON_SOURCE_PAIR = "source title and link must both be set"
REASON_UNSAFE_LINK = "unsafe link"

# Characters a URL parser refuses inside a host.
_FORBIDDEN_HOST_CHARS = frozenset(" \t\r\n#%/<>?@[\\]^|")
_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)


@dataclass(frozen=True)
class GuardResult:
    """Outcome of a content guard check."""

    allowed: bool
    reason: str | None = None

    @classmethod
    def ok(cls) -> GuardResult:
        return cls(True)

    @classmethod
    def rejected(cls, reason: str) -> GuardResult:
        return cls(False, reason)


@lru_cache(maxsize=8)
def _lexicon(extra_words: tuple[str, ...]) -> Profanity:
    lexicon = Profanity()
    words = [w.strip().lower() for w in extra_words if w.strip()]
    if words:
        lexicon.add_censor_words(words)
    return lexicon


def contains_profanity(text: str) -> bool:
    """Return True if ``text`` contains a word from the profanity lexicon."""
    if not text:
        return False
    return _lexicon(tuple(settings.profanity_extra_words)).contains_profanity(text)


def validate(text: str, max_length: int | None = None, min_length: int = 0) -> GuardResult:
    """Validate post or reply text.

    Args:
        text: Raw user input; it is trimmed before any check.
        max_length: Maximum trimmed length, defaults to ``CONTENT_MAX_LENGTH``.
        min_length: Minimum trimmed length. Pass 1 to reject empty input.

    Returns:
        ``GuardResult`` describing the first failing rule, if any.
    """
    if max_length is None:
        max_length = settings.content_max_length
    trimmed = (text or "").strip()

    if len(trimmed) > max_length:
        return GuardResult.rejected(REASON_TOO_LONG)
    if contains_profanity(trimmed):
        return GuardResult.rejected(REASON_PROFANITY)
    if len(trimmed) < min_length:
        return GuardResult.rejected(REASON_EMPTY if not trimmed else REASON_TOO_SHORT)
    return GuardResult.ok()


def normalize_url(url: str) -> str:
    """Prefix ``https://`` when the URL carries no http(s) scheme."""
    if not _SCHEME_RE.match(url):
        return f"https://{url}"
    return url


def _is_blocked_host(hostname: str) -> bool:
    for blocked in settings.blocked_domains:
        entry = blocked.strip().lower()
        if not entry:
            continue
        if re.search(rf"(^|\.){re.escape(entry)}($|\.)", hostname):
            return True
    return False


def is_safe_url(url: str) -> bool:
    """Return False for blocked domains and for anything that is not a parseable http(s) URL.

    Internationalised hosts are compared in their punycode form.
    """
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
    except ValueError:
        return False
    if parts.scheme.lower() not in ("http", "https") or not hostname:
        return False
    if _FORBIDDEN_HOST_CHARS.intersection(hostname):
        return False
    try:
        ascii_host = hostname.encode("idna").decode("ascii")
    except UnicodeError:
        return False
    return not _is_blocked_host(ascii_host.lower())


def validate_source_pair(title: str | None, url: str | None) -> GuardResult:
    """Validate the optional source title and link attached to a post."""
    title = (title or "").strip()
    url = (url or "").strip()

    if bool(title) != bool(url):
        return GuardResult.rejected(REASON_SOURCE_PAIR)
    if not title:
        return GuardResult.ok()
    if contains_profanity(title):
        return GuardResult.rejected(REASON_PROFANITY)
    if not is_safe_url(normalize_url(url)):
        return GuardResult.rejected(REASON_UNSAFE_LINK)
    return GuardResult.ok()


def validate_post(
    content: str,
    source_title: str | None = None,
    source_url: str | None = None,
) -> GuardResult:
    """Apply every post rule, including the minimum substance threshold."""
    result = validate(content)
    if not result.allowed:
        return result
    result = validate_source_pair(source_title, source_url)
    if not result.allowed:
        return result
    # Content must be strictly longer than the minimum to be postable.
    if len((content or "").strip()) <= settings.content_min_length:
        return GuardResult.rejected(REASON_TOO_SHORT)
    return GuardResult.ok()


def is_postable(
    content: str,
    source_title: str | None = None,
    source_url: str | None = None,
) -> bool:
    """Return True when a post with these fields may be submitted."""
    return validate_post(content, source_title, source_url).allowed
