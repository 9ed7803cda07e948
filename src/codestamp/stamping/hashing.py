"""Deterministic hash computation for stamps."""

import hashlib
import json
import re
from functools import lru_cache
from typing import Iterable

from .constants import HASH_LENGTH


@lru_cache(maxsize=1024)
def get_hash(text: str) -> str:
    """Return the truncated SHA-256 hex digest of ``text``."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:HASH_LENGTH]


_SURROGATES = re.compile("[\ud800-\udbff][\udc00-\udfff]|[\ud800-\udfff]")


def _escape_surrogate(match: "re.Match") -> str:
    text = match.group(0)
    if len(text) == 2:
        high, low = ord(text[0]), ord(text[1])
        return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))
    return f"\\u{ord(text):04x}"


def serialize_hash_input(items: Iterable[str]) -> str:
    """Serialize an ordered list of strings into the canonical hash input.

    The encoding matches a JavaScript ``JSON.stringify`` of a string array
    (no whitespace, non-ASCII kept as-is), so element boundaries and order are
    both part of the hashed bytes. Surrogate pairs are joined into the
    character they encode and lone surrogates are written as ``\\udxxx``
    escapes, so the result always encodes to UTF-8.
    """
    serialized = json.dumps(list(items), ensure_ascii=False, separators=(",", ":"))
    return _SURROGATES.sub(_escape_surrogate, serialized)


def compute_stamp_hash(dependency_content_list: Iterable[str], content: str) -> str:
    """Compute the stamp hash for ``content`` given its dependency contents.

    Args:
        dependency_content_list: Contents of dependencies, in order.
        content: Target content, already holding the placeholder stamp and
            passed through any hashing transform.

    Returns:
        str: Lowercase hex hash of ``HASH_LENGTH`` characters.
    """
    return get_hash(serialize_hash_input([*dependency_content_list, content]))
