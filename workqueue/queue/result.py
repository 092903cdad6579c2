"""Queue reporting outcomes as QueueResult objects."""

from typing import Any, List, Optional

from .engine import QueueEngine, FrozenCallback


class ResultQueue(QueueEngine):
    """Result-object queue.

    Every operation returns a QueueResult. Removed items travel in
    ``result.items``; a frozen queue answers with FROZEN_RESULT and a missing
    removal target with NOT_FOUND_RESULT.

    Removals starting anywhere but the head or the tail item hold the frozen
    flag for their duration unless ``freeze_during_splice`` is turned off.
    """

    def __init__(self,
                 initial_contents: Optional[List[Any]] = None,
                 frozen_callback: Optional[FrozenCallback] = None,
                 freeze_during_splice: bool = True):
        super().__init__(initial_contents, frozen_callback, freeze_during_splice)
