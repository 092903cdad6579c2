"""Ordered mutable queue core with a cooperative frozen state.

Every public operation first runs the frozen guard and leaves the contents
untouched when the queue is frozen.

Naming trap: ``peek_head``, ``peek_tail`` and the index based removals are
destructive reads. They remove what they return.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional

from .types import (
    QueueResult,
    FROZEN_RESULT,
    NOT_FOUND_RESULT,
    is_sequence,
    is_callback,
    is_flag,
    strictly_equal,
)

logger = logging.getLogger(__name__)

FrozenCallback = Callable[[Any], Any]


class QueueEngine:
    """Owns one ordered list of items, the frozen flag and the frozen callback."""

    def __init__(self,
                 initial_contents: Optional[List[Any]] = None,
                 frozen_callback: Optional[FrozenCallback] = None,
                 freeze_during_splice: bool = False):
        """Initialize the queue.

        Args:
            initial_contents: List adopted as the backing store (not copied).
                Anything that is not a list is replaced by an empty list.
            frozen_callback: Called with the queue when an operation is
                attempted while frozen. Ignored if not callable.
            freeze_during_splice: Hold the frozen flag while removing from
                an index other than the head or the tail item
        """
        if is_sequence(initial_contents):
            self._items: List[Any] = initial_contents  # type: ignore[assignment]
        else:
            if initial_contents is not None:
                logger.debug(
                    f"Ignoring initial contents of type {type(initial_contents).__name__}"
                )
            self._items = []

        self._frozen = False
        self._frozen_callback: Optional[FrozenCallback] = (
            frozen_callback if is_callback(frozen_callback) else None
        )
        self.freeze_during_splice = freeze_during_splice

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, frozen={self._frozen})"

    @property
    def contents(self) -> List[Any]:
        """The backing list itself (not a copy)."""
        return self._items

    @contents.setter
    def contents(self, value: List[Any]):
        if not is_sequence(value):
            logger.debug(f"Ignoring contents assignment of type {type(value).__name__}")
            return
        self._items = value

    @property
    def length(self) -> int:
        return len(self._items)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @frozen.setter
    def frozen(self, value: bool):
        if not is_flag(value):
            logger.debug(f"Ignoring frozen assignment of type {type(value).__name__}")
            return
        self._frozen = value

    @property
    def frozen_callback(self) -> Optional[FrozenCallback]:
        return self._frozen_callback

    @frozen_callback.setter
    def frozen_callback(self, value: FrozenCallback):
        if not is_callback(value):
            logger.debug(f"Ignoring non-callable frozen callback: {value!r}")
            return
        self._frozen_callback = value

    def freeze(self):
        """Freeze the queue."""
        self._frozen = True

    def unfreeze(self):
        """Unfreeze the queue."""
        self._frozen = False

    def check_frozen_and_notify(self) -> bool:
        """Check the frozen flag, notifying the callback if frozen.

        Returns:
            True if the queue is frozen and the caller must not proceed
        """
        if not self._frozen:
            return False

        logger.debug(f"Operation rejected, {type(self).__name__} is frozen")
        if self._frozen_callback is not None:
            self._frozen_callback(self)

        return True

    def enqueue_tail(self, item: Any) -> QueueResult:
        """Append one item to the tail."""
        if self.check_frozen_and_notify():
            return FROZEN_RESULT

        self._items.append(item)
        return QueueResult.ok()

    def enqueue_head(self, item: Any) -> QueueResult:
        """Insert one item at the head."""
        if self.check_frozen_and_notify():
            return FROZEN_RESULT

        self._items.insert(0, item)
        return QueueResult.ok()

    def peek_head(self, qty: int = 1) -> QueueResult:
        """Remove and return up to qty items from the head."""
        if self.check_frozen_and_notify():
            return FROZEN_RESULT

        return QueueResult.ok(self._splice(0, qty))

    def peek_tail(self, qty: int = 1) -> QueueResult:
        """Remove up to qty items from the tail, returned tail-most first."""
        if self.check_frozen_and_notify():
            return FROZEN_RESULT

        removed = self._splice(-qty, qty)
        removed.reverse()
        return QueueResult.ok(removed)

    def drain_all(self) -> QueueResult:
        """Remove and return every item, head first."""
        if self.check_frozen_and_notify():
            return FROZEN_RESULT

        return QueueResult.ok(self._splice(0, len(self._items)))

    def remove_range(self, index: int = 0, qty: int = 1) -> QueueResult:
        """Remove and return up to qty items starting at index.

        Args:
            index: Start position, negative values count from the tail
            qty: Number of items to remove

        Returns:
            Success result carrying the removed items (possibly empty)
        """
        if self.check_frozen_and_notify():
            return FROZEN_RESULT

        return QueueResult.ok(self._splice(index, qty))

    def remove_by_value(self, item: Any) -> QueueResult:
        """Remove the first item strictly equal to item.

        Returns:
            Success result carrying the removed item, or NOT_FOUND_RESULT
        """
        if self.check_frozen_and_notify():
            return FROZEN_RESULT

        index = self._locate(item)
        if index == -1:
            return NOT_FOUND_RESULT

        return QueueResult.ok(self._splice(index, 1))

    def remove_at(self, index: int = 0, qty: int = 1) -> QueueResult:
        """Remove qty items starting at index, failing if nothing was removed."""
        if self.check_frozen_and_notify():
            return FROZEN_RESULT

        removed = self._splice(index, qty)
        if not removed:
            return NOT_FOUND_RESULT

        return QueueResult.ok(removed)

    def _locate(self, item: Any) -> int:
        for index, candidate in enumerate(self._items):
            if strictly_equal(candidate, item):
                return index
        return -1

    def _splice(self, index: int, qty: int) -> List[Any]:
        """Cut items out of the backing list, holding the flag when configured."""
        if self.freeze_during_splice and index not in (0, -1):
            with self._held_frozen():
                return self._cut(index, qty)
        return self._cut(index, qty)

    def _cut(self, index: int, qty: int) -> List[Any]:
        length = len(self._items)

        if index < 0:
            start = max(length + index, 0)
        else:
            start = min(index, length)
        stop = start + max(min(qty, length - start), 0)

        removed = self._items[start:stop]
        del self._items[start:stop]
        return removed

    @contextmanager
    def _held_frozen(self) -> Iterator[None]:
        previous = self._frozen
        self._frozen = True
        logger.debug(f"Holding frozen flag during splice on {type(self).__name__}")
        try:
            yield
        finally:
            self._frozen = previous
