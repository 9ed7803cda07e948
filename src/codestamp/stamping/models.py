"""Result models for stamp reconciliation and verification."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union


class StampStatus(Enum):
    """Outcome of reconciling a target against its expected stamp."""
    OK = "OK"
    NEW = "NEW"
    UPDATE = "UPDATE"
    ERROR = "ERROR"


class StampErrorType(Enum):
    """Types of unrecoverable stamping errors."""
    MULTIPLE_STAMPS = "MULTIPLE_STAMPS"
    STAMP_PLACER = "STAMP_PLACER"


@dataclass(frozen=True)
class StampOk:
    """The stamp is present and valid."""
    status: StampStatus = field(default=StampStatus.OK, init=False)
    stamp: str


@dataclass(frozen=True)
class StampNew:
    """No stamp was present; one was added."""
    status: StampStatus = field(default=StampStatus.NEW, init=False)
    new_stamp: str
    new_content: str


@dataclass(frozen=True)
class StampUpdate:
    """A stale stamp was present and has been replaced."""
    status: StampStatus = field(default=StampStatus.UPDATE, init=False)
    old_stamp: str
    new_stamp: str
    new_content: str


@dataclass(frozen=True)
class MultipleStampsError:
    """More than one stamp was found in the target content."""
    status: StampStatus = field(default=StampStatus.ERROR, init=False)
    error_type: StampErrorType = field(default=StampErrorType.MULTIPLE_STAMPS, init=False)
    error_description: str
    stamp_list: List[str]


@dataclass(frozen=True)
class StampPlacerError:
    """The stamp placer was invalid or produced invalid output.

    ``placer_return_value`` is None when the placer could not be called.
    """
    status: StampStatus = field(default=StampStatus.ERROR, init=False)
    error_type: StampErrorType = field(default=StampErrorType.STAMP_PLACER, init=False)
    error_description: str
    placer: str
    placer_return_value: Any = None


ApplyStampResult = Union[StampOk, StampNew, StampUpdate, MultipleStampsError, StampPlacerError]
StampError = Union[MultipleStampsError, StampPlacerError]


def has_new_content(result: ApplyStampResult) -> bool:
    """Check whether the result carries rewritten content (NEW or UPDATE)."""
    return result.status in (StampStatus.NEW, StampStatus.UPDATE)


@dataclass
class VerifyStampResult:
    """Result of read-only stamp verification."""
    success: bool
    message: str = ""
    expected: Optional[str] = None
    received: Optional[str] = None

    def __bool__(self) -> bool:
        return self.success
