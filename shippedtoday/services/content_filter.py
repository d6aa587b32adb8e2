"""
Content filtering

Stateless helpers applied to submitted text: id generation, sanitization,
spam pattern matching and the content hash used for duplicate detection.
"""

import hashlib
import re
import secrets
import string
import time
from typing import Iterable, List, Sequence

from shippedtoday.core.constants import DEFAULT_SPAM_PATTERNS
from shippedtoday.core.exceptions import ContentTooShortError

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ANGLE_BRACKETS = re.compile(r"[<>]")
_WHITESPACE = re.compile(r"\s+")


def generate_launch_id() -> str:
    """``launch_<epoch millis>_<9 random base36 chars>``"""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"launch_{int(time.time() * 1000)}_{suffix}"


def clean_text(value: str, max_length: int) -> str:
    """Trim, drop angle brackets, collapse whitespace and truncate"""
    cleaned = _ANGLE_BRACKETS.sub("", value.strip())
    cleaned = _WHITESPACE.sub(" ", cleaned)
    return cleaned[:max_length]


def sanitize_text(value: str, min_length: int = 10, max_length: int = 1000) -> str:
    """Clean free text and reject it if too little is left"""
    sanitized = clean_text(value, max_length)
    if len(sanitized) < min_length:
        raise ContentTooShortError()
    return sanitized


def sanitize_tags(tags: Iterable[str], max_length: int = 50) -> List[str]:
    """Clean each tag, dropping the ones that end up empty"""
    cleaned = (clean_text(tag, max_length) for tag in tags)
    return [tag for tag in cleaned if tag]


def compile_spam_patterns(patterns: Sequence[str] = DEFAULT_SPAM_PATTERNS) -> List[re.Pattern]:
    return [re.compile(pattern, re.IGNORECASE) for pattern in patterns]


def detect_spam(title: str, description: str, url: str, patterns: Sequence[re.Pattern]) -> bool:
    """True if any spam pattern occurs in the combined submission text"""
    content = f"{title} {description} {url}".lower()
    return any(pattern.search(content) for pattern in patterns)


def content_hash(title: str, description: str, url: str) -> str:
    """Hash identifying a submission regardless of case and outer whitespace"""
    normalized = "|".join(part.strip().lower() for part in (title, description, url))
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()


def contains_script_scheme(*values: str) -> bool:
    return any("javascript:" in value.lower() for value in values)
