"""Exception types raised by dinicflow.

All domain errors derive from ``ValueError`` so callers that already guard
against bad input with ``except ValueError`` keep working.
"""

from __future__ import annotations


class DinicFlowError(ValueError):
    """Base class for dinicflow errors."""


class InvalidTopology(DinicFlowError):
    """Node index out of range, or source equal to sink."""


class InvalidCapacity(DinicFlowError):
    """Non-positive or non-integer capacity on a user-inserted edge."""


class FlowInvariantError(DinicFlowError):
    """An augmentation would break ``0 <= flow <= capacity``."""


class NetworkFrozenError(DinicFlowError):
    """The network was modified after solving started."""


class EdgeListFormatError(DinicFlowError):
    """A textual edge-list description could not be parsed.

    Attributes:
        line_no: 1-based line number of the offending line, when known.
    """

    def __init__(self, message: str, line_no: int | None = None) -> None:
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no
