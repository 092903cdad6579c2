"""
Queue type definitions.

Defines the unified operation outcome, the outward return conventions and the
type guards applied at the queue's API boundary.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, List, Optional


class Convention(str, Enum):
    """How a queue reports the outcome of an operation."""
    BOOLEAN = "boolean"
    RESULT = "result"


SUCCESS_MESSAGE = "Success."
FROZEN_MESSAGE = "Queue is frozen."
NOT_FOUND_MESSAGE = "Unable to locate item."

# Immutable scalars compare by value; everything else by identity
SCALAR_TYPES = (str, bytes, int, float, complex, bool, type(None))


@dataclass(frozen=True)
class QueueResult:
    """
    Outcome of a queue operation.

    Attributes:
        success: Whether the operation took effect
        message: Human readable outcome
        items: Items removed by the operation (if any)
    """
    success: bool
    message: str
    items: Optional[List[Any]] = None

    @classmethod
    def ok(cls, items: Optional[List[Any]] = None) -> 'QueueResult':
        """Create a success result, optionally carrying removed items."""
        return cls(success=True, message=SUCCESS_MESSAGE, items=items)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict, omitting None values."""
        return {k: v for k, v in asdict(self).items() if v is not None}


FROZEN_RESULT = QueueResult(success=False, message=FROZEN_MESSAGE)
NOT_FOUND_RESULT = QueueResult(success=False, message=NOT_FOUND_MESSAGE)


def is_sequence(value: Any) -> bool:
    """Check that value can serve as the queue's backing list."""
    return isinstance(value, list)


def is_callback(value: Any) -> bool:
    """Check that value can be invoked as a frozen callback."""
    return callable(value)


def is_flag(value: Any) -> bool:
    """Check that value is a real boolean (0 and 1 are rejected)."""
    return isinstance(value, bool)


def strictly_equal(a: Any, b: Any) -> bool:
    """
    Compare two queue items strictly.

    Objects match only when they are the same object. Immutable scalars of the
    same type also match on value, so ``2`` finds ``2`` but ``True`` does not
    find ``1`` and ``{"a": 1}`` does not find a different ``{"a": 1}``.

    Args:
        a: Item stored in the queue
        b: Item being looked up

    Returns:
        True if the items are strictly equal
    """
    if a is b:
        return True
    if type(a) is not type(b) or not isinstance(a, SCALAR_TYPES):
        return False
    return a == b
