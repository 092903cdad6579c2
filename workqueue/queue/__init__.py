"""In-process ordered queue with a cooperative frozen state.

Two outward conventions share one engine: BasicQueue answers with booleans and
lists, ResultQueue answers with QueueResult objects.
"""

from .types import (
    Convention,
    QueueResult,
    FROZEN_RESULT,
    NOT_FOUND_RESULT,
    is_sequence,
    is_callback,
    is_flag,
    strictly_equal,
)
from .engine import QueueEngine
from .basic import BasicQueue
from .result import ResultQueue
from .factory import QueueConfig, create_queue

__all__ = [
    'Convention',
    'QueueResult',
    'FROZEN_RESULT',
    'NOT_FOUND_RESULT',
    'is_sequence',
    'is_callback',
    'is_flag',
    'strictly_equal',
    'QueueEngine',
    'BasicQueue',
    'ResultQueue',
    'QueueConfig',
    'create_queue',
]
