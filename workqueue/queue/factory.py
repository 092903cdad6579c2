"""
Queue construction from configuration.

Picks the outward return convention and applies the configured defaults.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Union

from ..exceptions import ValidationError, QueueConfigError
from .basic import BasicQueue
from .engine import QueueEngine, FrozenCallback
from .result import ResultQueue
from .types import Convention, is_flag

logger = logging.getLogger(__name__)

QUEUE_CLASSES = {
    Convention.BOOLEAN: BasicQueue,
    Convention.RESULT: ResultQueue,
}


@dataclass
class QueueConfig:
    """
    Queue configuration.

    Attributes:
        convention: Outward return convention
        frozen: Whether new queues start frozen
        freeze_during_splice: Hold the frozen flag during mid-queue removals
            (None keeps the convention's default)
    """
    convention: Convention = Convention.RESULT
    frozen: bool = False
    freeze_during_splice: Optional[bool] = None

    def __post_init__(self):
        # Accept the plain string values, leave anything else for validate()
        if not isinstance(self.convention, Convention):
            try:
                self.convention = Convention(self.convention)
            except ValueError:
                pass

    def validate(self) -> List[str]:
        """
        Validate queue configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not isinstance(self.convention, Convention):
            errors.append(f"Unknown convention '{self.convention}'")

        if not is_flag(self.frozen):
            errors.append(f"'frozen' must be a boolean, got {type(self.frozen).__name__}")

        if self.freeze_during_splice is not None and not is_flag(self.freeze_during_splice):
            errors.append(
                f"'freeze_during_splice' must be a boolean, "
                f"got {type(self.freeze_during_splice).__name__}"
            )

        return errors


def create_queue(initial_contents: Optional[List[Any]] = None,
                 frozen_callback: Optional[FrozenCallback] = None,
                 config: Optional[QueueConfig] = None,
                 convention: Optional[Union[Convention, str]] = None) -> QueueEngine:
    """Create a queue for the configured convention.

    Args:
        initial_contents: List adopted as the queue's backing store
        frozen_callback: Called with the queue when used while frozen
        config: Queue configuration (defaults to QueueConfig())
        convention: Overrides config.convention when given

    Returns:
        BasicQueue or ResultQueue

    Raises:
        QueueConfigError: If the configuration or convention is invalid
    """
    config = config or QueueConfig()
    errors = [ValidationError(message) for message in config.validate()]

    chosen = config.convention
    if convention is not None:
        try:
            chosen = Convention(convention)
        except ValueError:
            errors.append(ValidationError(f"Unknown convention '{convention}'", "convention"))

    if errors:
        raise QueueConfigError(errors)

    queue_class = QUEUE_CLASSES[chosen]
    if config.freeze_during_splice is None:
        queue = queue_class(initial_contents, frozen_callback)
    else:
        queue = queue_class(initial_contents, frozen_callback, config.freeze_during_splice)

    if config.frozen:
        queue.freeze()

    logger.debug(f"Created {queue_class.__name__} (frozen={queue.frozen})")
    return queue
