"""Queue configuration exceptions."""

from typing import List
from dataclasses import dataclass


@dataclass
class ValidationError:
    """Single configuration error."""
    message: str
    path: str = ""


class QueueConfigError(Exception):
    """Raised when a queue configuration fails validation.

    Queue operations never raise for misuse; only building a queue from an
    invalid configuration does.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Validation error at '{error.path}': {error.message}")
            else:
                messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))
