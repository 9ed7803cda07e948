"""Shared constants for stamp rendering and detection.

A stamp is ``CodeStamp<<`` + lowercase hex hash + ``>>``. While a stamp is
being placed or hashed, the placeholder stamp stands in for the real one. It
has the same length as a final stamp, so the hash is computed over content of
the exact shape of the output and never depends on itself.
"""

import hashlib
import re

STAMP_PREFIX = "CodeStamp<<"
STAMP_SUFFIX = ">>"
HASH_LENGTH = 32

STAMP_REGEX = re.compile(
    rf"(?P<left>{re.escape(STAMP_PREFIX)})(?P<hash>[a-f0-9]+)(?P<right>{re.escape(STAMP_SUFFIX)})"
)

# Hash of a fixed sentinel, computed directly to keep this module import-light
PLACEHOLDER_HASH = hashlib.sha256("placeholder".encode("utf-8")).hexdigest()[:HASH_LENGTH]
PLACEHOLDER_STAMP = f"{STAMP_PREFIX}{PLACEHOLDER_HASH}{STAMP_SUFFIX}"

# Template placer tokens
STAMP_TOKEN = "%STAMP%"
CONTENT_TOKEN = "%CONTENT%"

DEFAULT_BANNER_TEMPLATE = "/* @generated {stamp} */\n"
