# adts.py
from typing import Generic, TypeVar, Optional, List, Iterator, Any

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T):
        self.value = value
        self.next: Optional["_Node[T]"] = None


# ---------------- Queue (FIFO) - linked nodes ----------------
class Queue(Generic[T]):
    """
    FIFO (First In, First Out) queue over singly linked nodes.
    Used for request processing order and pending callbacks; O(1) enqueue/dequeue.
    Empty dequeue/peek return None instead of raising.
    """
    def __init__(self):
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0

    def enqueue(self, value: T) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def dequeue(self) -> Optional[T]:
        if self._head is None:
            return None
        value = self._head.value
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return value

    def peek(self) -> Optional[T]:
        return self._head.value if self._head else None

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self._head = self._tail = None
        self._size = 0

    def contains(self, value: T) -> bool:
        return any(v == value for v in self)

    def to_list(self) -> List[T]:
        return list(self)

    def __iter__(self) -> Iterator[T]:
        cur = self._head
        while cur:
            yield cur.value
            cur = cur.next

    def __len__(self):
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)


# ---------------- Priority Queue (sorted insertion) ----------------
class PriorityQueue(Generic[T]):
    """
    Priority queue kept sorted by ascending priority number (lower = served first).
    enqueue scans for the first strictly greater priority, so equal priorities
    are served in insertion order. O(n) enqueue, O(1) peek.
    """
    def __init__(self):
        self._items: List[tuple] = []  # (priority, value)

    def enqueue(self, value: T, priority: float) -> None:
        for i, (p, _) in enumerate(self._items):
            if priority < p:
                self._items.insert(i, (priority, value))
                return
        self._items.append((priority, value))

    def dequeue(self) -> Optional[T]:
        if not self._items:
            return None
        return self._items.pop(0)[1]

    def peek(self) -> Optional[T]:
        return self._items[0][1] if self._items else None

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items = []

    def to_list(self) -> List[T]:
        return [v for _, v in self._items]

    def __len__(self):
        return len(self._items)


# ---------------- Stack (LIFO) ----------------
class Stack(Generic[T]):
    """
    LIFO (Last In, First Out) stack for undo systems and history.
    Optional max_size bounds it; push then reports failure instead of storing.
    """
    def __init__(self, max_size: Optional[int] = None):
        if max_size is not None and max_size < 1:
            max_size = 1
        self._top: Optional[_Node[T]] = None
        self._size = 0
        self.max_size = max_size

    def push(self, value: T) -> bool:
        if self.is_full():
            return False
        node = _Node(value)
        node.next = self._top
        self._top = node
        self._size += 1
        return True

    def pop(self) -> Optional[T]:
        if self._top is None:
            return None
        value = self._top.value
        self._top = self._top.next
        self._size -= 1
        return value

    def peek(self) -> Optional[T]:
        return self._top.value if self._top else None

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        if self.max_size is None:
            return False
        return self._size >= self.max_size

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self._top = None
        self._size = 0

    def contains(self, value: T) -> bool:
        return any(v == value for v in self)

    def to_list(self) -> List[T]:
        """Snapshot from top to bottom."""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        cur = self._top
        while cur:
            yield cur.value
            cur = cur.next

    def __len__(self):
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)
