"""workqueue - ordered work item queue with a freeze guard."""

from .queue import (
    Convention,
    QueueResult,
    FROZEN_RESULT,
    NOT_FOUND_RESULT,
    QueueEngine,
    BasicQueue,
    ResultQueue,
    QueueConfig,
    create_queue,
)
from .exceptions import ValidationError, QueueConfigError
from .loader import QueueConfigLoader, load_queue_config

__version__ = "1.0.0"

__all__ = [
    "Convention",
    "QueueResult",
    "FROZEN_RESULT",
    "NOT_FOUND_RESULT",
    "QueueEngine",
    "BasicQueue",
    "ResultQueue",
    "QueueConfig",
    "create_queue",
    "ValidationError",
    "QueueConfigError",
    "QueueConfigLoader",
    "load_queue_config",
]
