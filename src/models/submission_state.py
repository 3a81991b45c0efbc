"""States of one add-product submission attempt.

Each state is a frozen dataclass; SubmissionState is the union of all of them.
Allowed moves between states are listed in ALLOWED_TRANSITIONS.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from src.models.product import ProductRecord


class FailureStage(str, Enum):
    """Where a submission attempt failed."""

    MISSING_IMAGE = "missing_image"
    UPLOAD = "upload"
    WRITE = "write"


@dataclass(frozen=True)
class Idle:
    """No submission in flight."""


@dataclass(frozen=True)
class Validating:
    """Checking the draft before any side effect."""


@dataclass(frozen=True)
class Uploading:
    """Image transfer to object storage in progress."""

    path: str
    progress: float = 0.0  # 0.0 .. 1.0


@dataclass(frozen=True)
class Writing:
    """Image stored; product record is being written."""

    image_url: str


@dataclass(frozen=True)
class Succeeded:
    """Record written and draft reset."""

    record: ProductRecord


@dataclass(frozen=True)
class Failed:
    """Attempt aborted; the draft is kept for a retry."""

    stage: FailureStage
    reason: str
    error: Optional[str] = None


SubmissionState = Union[Idle, Validating, Uploading, Writing, Succeeded, Failed]

TERMINAL_STATES: frozenset[type] = frozenset({Succeeded, Failed})

ALLOWED_TRANSITIONS: dict[type, frozenset[type]] = {
    Idle: frozenset({Validating}),
    Validating: frozenset({Uploading, Failed}),
    Uploading: frozenset({Uploading, Writing, Failed}),
    Writing: frozenset({Succeeded, Failed}),
    Succeeded: frozenset({Idle}),
    Failed: frozenset({Idle}),
}


def is_terminal(state: SubmissionState) -> bool:
    return type(state) in TERMINAL_STATES


def can_transition(current: SubmissionState, target: SubmissionState) -> bool:
    """Whether moving from current to target is a legal step."""
    return type(target) in ALLOWED_TRANSITIONS[type(current)]
