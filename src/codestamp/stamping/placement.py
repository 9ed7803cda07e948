"""Stamp placers: where a stamp goes the first time content is stamped.

A placer is either a callable taking ``content`` and ``stamp`` positional
arguments, or a template string containing ``%STAMP%`` and ``%CONTENT%``.
Both forms resolve to a single callable before reconciliation runs.
"""

import inspect
from typing import Any, Callable, Optional, Tuple, Union

from .constants import (
    CONTENT_TOKEN,
    DEFAULT_BANNER_TEMPLATE,
    PLACEHOLDER_STAMP,
    STAMP_REGEX,
    STAMP_TOKEN,
)
from .models import StampPlacerError

PlacerFunction = Callable[..., str]
StampPlacer = Union[PlacerFunction, str]

PLACER_NAME = "initial_stamp_placer"


def default_stamp_placer(content: str, stamp: str) -> str:
    """Prepend a ``/* @generated <stamp> */`` banner line."""
    return DEFAULT_BANNER_TEMPLATE.format(stamp=stamp) + content


def get_stamp_placer_from_template(template: str) -> PlacerFunction:
    """Build a placer from a ``%STAMP%``/``%CONTENT%`` template.

    The stamp token is substituted before the content token, so a literal
    ``%STAMP%`` inside the content is never replaced.
    """
    def _place(content: str, stamp: str) -> str:
        return template.replace(STAMP_TOKEN, stamp).replace(CONTENT_TOKEN, content)

    return _place


def describe_placer(placer: Any) -> str:
    """Render a placer as text for diagnostics."""
    if isinstance(placer, str):
        return placer
    if callable(placer):
        try:
            return inspect.getsource(placer).strip()
        except (OSError, TypeError):
            return repr(placer)
    return str(placer)


def resolve_stamp_placer(
    placer: Optional[StampPlacer],
) -> Tuple[Optional[PlacerFunction], Optional[StampPlacerError]]:
    """Normalize a user supplied placer into a callable.

    Returns:
        (placer_function, None) on success, or (None, error) when the placer
        is neither a string nor a callable.
    """
    if placer is None:
        return default_stamp_placer, None
    if isinstance(placer, str):
        return get_stamp_placer_from_template(placer), None
    if callable(placer):
        return placer, None
    return None, StampPlacerError(
        error_description=f"`{PLACER_NAME}` is not a string or a function.",
        placer=describe_placer(placer),
        placer_return_value=None,
    )


def place_stamp(
    placer_function: PlacerFunction,
    placer: Optional[StampPlacer],
    content: str,
) -> Tuple[Optional[str], Optional[StampPlacerError]]:
    """Apply a resolved placer with the placeholder stamp and validate it.

    Args:
        placer_function: Resolved placer callable.
        placer: The placer as the caller supplied it, used for diagnostics.
        content: Content to place the stamp into.

    Returns:
        (placed_content, None), or (None, error) when the output is not a
        string or holds zero or several stamps.
    """
    return_value = placer_function(content, PLACEHOLDER_STAMP)

    if not isinstance(return_value, str):
        description = f"`{PLACER_NAME}` is not a string or a function."
    else:
        stamp_count = len(STAMP_REGEX.findall(return_value))
        if stamp_count == 1:
            return return_value, None
        if stamp_count == 0:
            description = f"`{PLACER_NAME}` didn't return a stamp."
        else:
            description = f"`{PLACER_NAME}` returned multiple stamps."

    return None, StampPlacerError(
        error_description=description,
        placer=describe_placer(placer if placer is not None else placer_function),
        placer_return_value=return_value,
    )


def remove_default_stamp(content: str) -> str:
    """Strip the default banner (holding the placeholder stamp) if present.

    Only the first occurrence is removed. Content that was placed by a custom
    placer is returned unchanged.
    """
    banner = default_stamp_placer(content="", stamp=PLACEHOLDER_STAMP)
    return content.replace(banner, "", 1)
