"""Sorted doubly linked container used as the search frontier."""
from enum import Enum
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar('T')


class SortOrder(Enum):
    """Direction of a frontier.

    ASCENDING yields 1, 2, 3, 4... from the front; DESCENDING yields 9, 8, 7, 6...
    """
    ASCENDING = "ascending"
    DESCENDING = "descending"


class _Link(Generic[T]):
    """A single link in the chain."""
    __slots__ = ('value', 'prev', 'next')

    def __init__(self, value: Optional[T]):
        self.value = value
        self.prev: Optional['_Link[T]'] = None
        self.next: Optional['_Link[T]'] = None


class OrderedFrontier(Generic[T]):
    """A doubly linked list that keeps every inserted value in sorted order.

    Ordering comes from ``key`` (identity when omitted) and the per-instance
    ``order``. Values with equal keys are all kept. Inserting from the front
    places a value ahead of existing equal keys, inserting from the back
    places it behind them.

    The head sentinel's ``next`` is the front link and its ``prev`` is the
    back link; the end links point to None rather than back to the head.
    """

    def __init__(self, key: Optional[Callable[[T], Any]] = None,
                 order: SortOrder = SortOrder.ASCENDING):
        self._key = key or (lambda value: value)
        self._order = order
        self._head: _Link[T] = _Link(None)
        self._count = 0
        self._version = 0

    @property
    def order(self) -> SortOrder:
        return self._order

    @property
    def count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    # -------------------- insertion --------------------

    def insert_sorted_from_front(self, value: T) -> None:
        """Insert value, scanning for its slot from the front."""
        if self._count == 0:
            self._add_front(value)
            return

        value_key = self._key(value)
        current = self._head.next
        while current is not None:
            if self._belongs_before(value_key, self._key(current.value)):
                self._insert_before(current, _Link(value))
                return
            current = current.next

        # Largest (or smallest, when descending) so far
        self._add_back(value)

    def insert_sorted_from_back(self, value: T) -> None:
        """Insert value, scanning for its slot from the back."""
        if self._count == 0:
            self._add_back(value)
            return

        value_key = self._key(value)
        current = self._head.prev
        while current is not None:
            if self._belongs_after(value_key, self._key(current.value)):
                self._insert_after(current, _Link(value))
                return
            current = current.prev

        self._add_front(value)

    def _belongs_before(self, value_key, other_key) -> bool:
        if self._order == SortOrder.ASCENDING:
            return value_key <= other_key
        return value_key >= other_key

    def _belongs_after(self, value_key, other_key) -> bool:
        if self._order == SortOrder.ASCENDING:
            return value_key >= other_key
        return value_key <= other_key

    # -------------------- removal and access --------------------

    def pop_front(self) -> Optional[T]:
        """Remove and return the front value, or None when empty."""
        if self._count == 0:
            return None
        return self._unlink(self._head.next).value

    def pop_back(self) -> Optional[T]:
        """Remove and return the back value, or None when empty."""
        if self._count == 0:
            return None
        return self._unlink(self._head.prev).value

    def peek_front(self) -> Optional[T]:
        if self._count == 0:
            return None
        return self._head.next.value

    def peek_back(self) -> Optional[T]:
        if self._count == 0:
            return None
        return self._head.prev.value

    def remove_at(self, index: int) -> T:
        """Remove and return the value at a zero-based index.

        Raises:
            IndexError: If index is negative or not below count
        """
        if index < 0 or index >= self._count:
            raise IndexError(f"frontier index {index} out of range for {self._count} values")

        current = self._head.next
        for _ in range(index):
            current = current.next
        return self._unlink(current).value

    def contains(self, value: T) -> bool:
        """Linear membership scan using ``==``."""
        for item in self:
            if item == value:
                return True
        return False

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        version = self._version
        current = self._head.next
        while current is not None:
            yield current.value
            if version != self._version:
                raise RuntimeError("OrderedFrontier changed size during iteration")
            current = current.next

    def __repr__(self) -> str:
        return f"OrderedFrontier({list(self)!r}, order={self._order.value})"

    # -------------------- link plumbing --------------------

    def _add_front(self, value: T) -> None:
        link = _Link(value)
        if self._head.next is not None:
            link.next = self._head.next
            self._head.next.prev = link
        else:
            self._head.prev = link

        self._head.next = link
        self._grow()

    def _add_back(self, value: T) -> None:
        link = _Link(value)
        if self._head.prev is not None:
            link.prev = self._head.prev
            self._head.prev.next = link
        else:
            self._head.next = link

        self._head.prev = link
        self._grow()

    def _insert_before(self, current: _Link[T], link: _Link[T]) -> None:
        if current.prev is not None:
            link.prev = current.prev
            current.prev.next = link
        else:
            self._head.next = link

        link.next = current
        current.prev = link
        self._grow()

    def _insert_after(self, current: _Link[T], link: _Link[T]) -> None:
        if current.next is not None:
            link.next = current.next
            current.next.prev = link
        else:
            self._head.prev = link

        link.prev = current
        current.next = link
        self._grow()

    def _unlink(self, link: _Link[T]) -> _Link[T]:
        if link.prev is not None:
            link.prev.next = link.next
        else:
            self._head.next = link.next

        if link.next is not None:
            link.next.prev = link.prev
        else:
            self._head.prev = link.prev

        link.prev = link.next = None
        self._count -= 1
        self._version += 1
        return link

    def _grow(self) -> None:
        self._count += 1
        self._version += 1
