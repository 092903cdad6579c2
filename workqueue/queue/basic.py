"""Queue reporting outcomes as plain booleans and lists."""

from typing import Any, List, Optional, Union

from .engine import QueueEngine, FrozenCallback
from .types import QueueResult


class BasicQueue(QueueEngine):
    """Boolean-signaling queue.

    Mutating operations return True on success and False otherwise. Fetching
    operations return the removed items, or False while the queue is frozen.
    ``remove_by_value`` returns False both when frozen and when the item is
    missing; check ``frozen`` to tell the two apart.
    """

    def __init__(self,
                 initial_contents: Optional[List[Any]] = None,
                 frozen_callback: Optional[FrozenCallback] = None,
                 freeze_during_splice: bool = False):
        super().__init__(initial_contents, frozen_callback, freeze_during_splice)

    def enqueue_tail(self, item: Any) -> bool:  # type: ignore[override]
        return super().enqueue_tail(item).success

    def enqueue_head(self, item: Any) -> bool:  # type: ignore[override]
        return super().enqueue_head(item).success

    def peek_head(self, qty: int = 1) -> Union[List[Any], bool]:  # type: ignore[override]
        return self._items_or_false(super().peek_head(qty))

    def peek_tail(self, qty: int = 1) -> Union[List[Any], bool]:  # type: ignore[override]
        return self._items_or_false(super().peek_tail(qty))

    def drain_all(self) -> Union[List[Any], bool]:  # type: ignore[override]
        return self._items_or_false(super().drain_all())

    def remove_range(self, index: int = 0, qty: int = 1) -> Union[List[Any], bool]:  # type: ignore[override]
        return self._items_or_false(super().remove_range(index, qty))

    def remove_by_value(self, item: Any) -> bool:  # type: ignore[override]
        return super().remove_by_value(item).success

    def remove_at(self, index: int = 0, qty: int = 1) -> bool:  # type: ignore[override]
        return super().remove_at(index, qty).success

    @staticmethod
    def _items_or_false(result: QueueResult) -> Union[List[Any], bool]:
        if not result.success:
            return False
        return result.items if result.items is not None else []
