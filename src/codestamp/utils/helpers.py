"""Helper utility functions for codestamp."""

import json
from typing import Any, NoReturn


def assert_never(value: Any) -> NoReturn:
    """Fail loudly on a result variant no branch handled."""
    raise AssertionError(f"Unexpected value: {value!r}")


def undo_unescape(raw: str) -> str:
    """Interpret JSON string escapes in command-line input.

    ``'# %STAMP%\\n%CONTENT%'`` typed in a shell becomes a two-line
    template. Input that is not a valid JSON string body is returned as-is.

    Args:
        raw (str): Raw text as received from the command line.

    Returns:
        str: Unescaped text.
    """
    try:
        return json.loads(f'"{raw}"')
    except ValueError:
        return raw
