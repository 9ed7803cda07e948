"""Stamp reconciliation engine.

Pure functions over strings: locate the stamp in a target, compute the
expected stamp from the target and its dependencies, and produce the
reconciled content. No I/O happens here.
"""

import json
from typing import Callable, List, Optional, Sequence

from .constants import PLACEHOLDER_HASH, PLACEHOLDER_STAMP, STAMP_PREFIX, STAMP_REGEX, STAMP_SUFFIX
from .hashing import compute_stamp_hash
from .models import (
    ApplyStampResult,
    MultipleStampsError,
    StampNew,
    StampOk,
    StampUpdate,
    VerifyStampResult,
)
from .placement import StampPlacer, place_stamp, remove_default_stamp, resolve_stamp_placer

ContentTransformer = Callable[..., str]

MULTIPLE_STAMPS_DESCRIPTION = (
    "Found multiple stamps. This is likely because the content was manually updated. "
    "`codestamp` needs to bail out because it cannot guarantee a deterministic update. "
    "Please regenerate the file."
)


def extract_stamps(content: str) -> List[str]:
    """Return every stamp in ``content``, left to right."""
    return [match.group(0) for match in STAMP_REGEX.finditer(content)]


def update_hash_only(content: str, new_hash: str) -> str:
    """Replace the hash of the first stamp in ``content``, leaving the rest intact."""
    return STAMP_REGEX.sub(
        lambda match: f"{match.group('left')}{new_hash}{match.group('right')}",
        content,
        count=1,
    )


def _hash_placed_content(
    dependency_content_list: Sequence[str],
    content_with_placeholder: str,
    content_transformer_for_hashing: Optional[ContentTransformer],
) -> str:
    hashing_content = content_with_placeholder
    if content_transformer_for_hashing is not None:
        hashing_content = content_transformer_for_hashing(content_with_placeholder, PLACEHOLDER_STAMP)
    return compute_stamp_hash(dependency_content_list, hashing_content)


def apply_stamp(
    dependency_content_list: Sequence[str],
    target_content: str,
    initial_stamp_placer: Optional[StampPlacer] = None,
    content_transformer_for_hashing: Optional[ContentTransformer] = None,
) -> ApplyStampResult:
    """Add or update the stamp in ``target_content``.

    Args:
        dependency_content_list: Contents of dependencies. Order matters.
        target_content: The content to stamp.
        initial_stamp_placer: Callable ``(content, stamp) -> str`` or a
            ``%STAMP%``/``%CONTENT%`` template. Used when the target has no
            stamp, or when it carries the default banner and should move to
            this placement. Defaults to a ``/* @generated ... */`` banner.
        content_transformer_for_hashing: Callable ``(content, stamp) -> str``
            applied to the content before hashing only, e.g. to ignore
            formatting. The output text is never affected.

    Returns:
        ApplyStampResult: StampOk, StampNew, StampUpdate, or an error result.
        A placer of the wrong type is reported before the target's stamps
        are counted.
    """
    placer_function, placer_error = resolve_stamp_placer(initial_stamp_placer)
    if placer_error is not None:
        return placer_error

    stamp_list = extract_stamps(target_content)

    if len(stamp_list) > 1:
        return MultipleStampsError(
            error_description=MULTIPLE_STAMPS_DESCRIPTION,
            stamp_list=stamp_list,
        )

    if not stamp_list:
        placed_content, placer_error = place_stamp(
            placer_function, initial_stamp_placer, target_content
        )
        if placer_error is not None:
            return placer_error
    else:
        placed_content = update_hash_only(target_content, PLACEHOLDER_HASH)

        if initial_stamp_placer is not None:
            # Only the default banner can be located reliably; a custom
            # placement is kept as-is and only its hash gets updated.
            content_without_default_stamp = remove_default_stamp(placed_content)
            if content_without_default_stamp != placed_content:
                placed_content, placer_error = place_stamp(
                    placer_function, initial_stamp_placer, content_without_default_stamp
                )
                if placer_error is not None:
                    return placer_error

    new_hash = _hash_placed_content(
        dependency_content_list, placed_content, content_transformer_for_hashing
    )
    new_content = update_hash_only(placed_content, new_hash)
    new_stamp = f"{STAMP_PREFIX}{new_hash}{STAMP_SUFFIX}"

    if not stamp_list:
        return StampNew(new_stamp=new_stamp, new_content=new_content)

    if new_content == target_content:
        return StampOk(stamp=stamp_list[0])

    return StampUpdate(old_stamp=stamp_list[0], new_stamp=new_stamp, new_content=new_content)


def verify_stamp(
    dependency_content_list: Sequence[str],
    target_content: str,
    content_transformer_for_hashing: Optional[ContentTransformer] = None,
) -> VerifyStampResult:
    """Check the stamp in ``target_content`` without rewriting anything."""
    matches = list(STAMP_REGEX.finditer(target_content))

    if not matches:
        return VerifyStampResult(
            success=False,
            message=f"Unable to find stamp in {json.dumps(target_content, ensure_ascii=False)}",
        )
    if len(matches) > 1:
        stamps = ", ".join(json.dumps(match.group(0)) for match in matches)
        return VerifyStampResult(
            success=False,
            message=f"{MULTIPLE_STAMPS_DESCRIPTION}\nStamps: {stamps}",
        )

    received = matches[0].group("hash")
    expected = _hash_placed_content(
        dependency_content_list,
        update_hash_only(target_content, PLACEHOLDER_HASH),
        content_transformer_for_hashing,
    )

    if received != expected:
        return VerifyStampResult(
            success=False,
            message=(
                "Stamps don't match.\n"
                f"Expected: {json.dumps(expected)}\n"
                f"Received: {json.dumps(received)}"
            ),
            expected=expected,
            received=received,
        )

    return VerifyStampResult(success=True, expected=expected, received=received)
