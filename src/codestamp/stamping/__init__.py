"""Stamp computation and reconciliation."""

from .constants import PLACEHOLDER_HASH, PLACEHOLDER_STAMP, STAMP_REGEX
from .engine import apply_stamp, verify_stamp, extract_stamps, update_hash_only
from .hashing import get_hash, compute_stamp_hash, serialize_hash_input
from .models import (
    ApplyStampResult,
    MultipleStampsError,
    StampError,
    StampErrorType,
    StampNew,
    StampOk,
    StampPlacerError,
    StampStatus,
    StampUpdate,
    VerifyStampResult,
    has_new_content,
)
from .placement import (
    StampPlacer,
    default_stamp_placer,
    get_stamp_placer_from_template,
    resolve_stamp_placer,
)

__all__ = [
    # Engine
    'apply_stamp',
    'verify_stamp',
    'extract_stamps',
    'update_hash_only',

    # Hashing
    'get_hash',
    'compute_stamp_hash',
    'serialize_hash_input',

    # Placement
    'StampPlacer',
    'default_stamp_placer',
    'get_stamp_placer_from_template',
    'resolve_stamp_placer',

    # Results
    'ApplyStampResult',
    'StampError',
    'StampOk',
    'StampNew',
    'StampUpdate',
    'MultipleStampsError',
    'StampPlacerError',
    'StampStatus',
    'StampErrorType',
    'VerifyStampResult',
    'has_new_content',

    # Constants
    'PLACEHOLDER_HASH',
    'PLACEHOLDER_STAMP',
    'STAMP_REGEX',
]
