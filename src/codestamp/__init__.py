"""codestamp: stamp generated files with a hash of their content and dependencies."""

from .runner import runner, RunnerResult
from .stamping import (
    ApplyStampResult,
    MultipleStampsError,
    StampErrorType,
    StampNew,
    StampOk,
    StampPlacer,
    StampPlacerError,
    StampStatus,
    StampUpdate,
    VerifyStampResult,
    apply_stamp,
    verify_stamp,
)
from .version import __version__

__all__ = [
    'apply_stamp',
    'verify_stamp',
    'runner',
    'RunnerResult',
    'ApplyStampResult',
    'StampOk',
    'StampNew',
    'StampUpdate',
    'MultipleStampsError',
    'StampPlacerError',
    'StampStatus',
    'StampErrorType',
    'StampPlacer',
    'VerifyStampResult',
    '__version__',
]
