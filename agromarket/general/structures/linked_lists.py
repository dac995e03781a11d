# linked_lists.py
from typing import Generic, TypeVar, Optional, List, Iterator, Iterable, Any

T = TypeVar("T")


# ---------------- Singly linked list ----------------
class _ListNode(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T):
        self.value = value
        self.next: Optional["_ListNode[T]"] = None


class LinkedList(Generic[T]):
    """
    Singly linked list with head and tail pointers.
    O(1) append/prepend; index-based operations walk from the head.
    Walks are bounded by the element count, so the same node chain can be
    closed into a ring by CircularLinkedList.
    """
    def __init__(self):
        self._head: Optional[_ListNode[T]] = None
        self._tail: Optional[_ListNode[T]] = None
        self._size = 0

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> "LinkedList[T]":
        lst = cls()
        for v in values:
            lst.append(v)
        return lst

    def append(self, value: T) -> None:
        node = _ListNode(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def prepend(self, value: T) -> None:
        node = _ListNode(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head = node
        self._size += 1

    def insert_at(self, index: int, value: T) -> bool:
        if index < 0 or index > self._size:
            return False
        if index == 0:
            self.prepend(value)
            return True
        if index == self._size:
            self.append(value)
            return True
        prev = self._node_at(index - 1)
        node = _ListNode(value)
        node.next = prev.next
        prev.next = node
        self._size += 1
        return True

    def remove(self, value: T) -> bool:
        """Removes the first node equal to value."""
        prev: Optional[_ListNode[T]] = None
        cur = self._head
        for _ in range(self._size):
            if cur.value == value:
                self._unlink(prev, cur)
                return True
            prev, cur = cur, cur.next
        return False

    def remove_at(self, index: int) -> Optional[T]:
        if index < 0 or index >= self._size:
            return None
        prev = self._node_at(index - 1) if index > 0 else None
        cur = prev.next if prev else self._head
        self._unlink(prev, cur)
        return cur.value

    def get(self, index: int) -> Optional[T]:
        node = self._node_at(index)
        return node.value if node else None

    def index_of(self, value: T) -> int:
        for i, v in enumerate(self):
            if v == value:
                return i
        return -1

    def contains(self, value: T) -> bool:
        return self.index_of(value) != -1

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self._head = self._tail = None
        self._size = 0

    def to_list(self) -> List[T]:
        return list(self)

    def reverse(self) -> None:
        if self._size <= 1:
            return
        prev: Optional[_ListNode[T]] = None
        cur = self._head
        self._tail = self._head
        for _ in range(self._size):
            nxt = cur.next
            cur.next = prev
            prev, cur = cur, nxt
        self._head = prev

    def _node_at(self, index: int) -> Optional[_ListNode[T]]:
        if index < 0 or index >= self._size:
            return None
        cur = self._head
        for _ in range(index):
            cur = cur.next
        return cur

    def _unlink(self, prev: Optional[_ListNode[T]], node: _ListNode[T]) -> None:
        if self._size == 1:
            self._head = self._tail = None
        else:
            if prev is None:
                self._head = node.next
            else:
                prev.next = node.next
            if node is self._tail:
                self._tail = prev
        node.next = None
        self._size -= 1

    def __iter__(self) -> Iterator[T]:
        cur = self._head
        for _ in range(self._size):
            yield cur.value
            cur = cur.next

    def __len__(self):
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)


# ---------------- Doubly linked list ----------------
class _DLLNode(Generic[T]):
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T):
        self.value = value
        self.prev: Optional["_DLLNode[T]"] = None
        self.next: Optional["_DLLNode[T]"] = None


class DoublyLinkedList(Generic[T]):
    """
    Doubly linked list for bidirectional navigation.
    O(1) append/prepend/remove_first/remove_last; get() walks from whichever
    end is closer to the index.
    """
    def __init__(self):
        self._head: Optional[_DLLNode[T]] = None
        self._tail: Optional[_DLLNode[T]] = None
        self._size = 0

    def append(self, value: T) -> None:
        node = _DLLNode(value)
        if not self._tail:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def prepend(self, value: T) -> None:
        node = _DLLNode(value)
        if not self._head:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def remove_first(self) -> Optional[T]:
        if not self._head:
            return None
        return self._remove_node(self._head)

    def remove_last(self) -> Optional[T]:
        if not self._tail:
            return None
        return self._remove_node(self._tail)

    def remove(self, value: T) -> bool:
        """Removes the first node equal to value."""
        cur = self._head
        while cur:
            if cur.value == value:
                self._remove_node(cur)
                return True
            cur = cur.next
        return False

    def get(self, index: int) -> Optional[T]:
        node = self._node_at(index)
        return node.value if node else None

    def index_of(self, value: T) -> int:
        for i, v in enumerate(self):
            if v == value:
                return i
        return -1

    def contains(self, value: T) -> bool:
        return self.index_of(value) != -1

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        self._head = self._tail = None
        self._size = 0

    def to_list(self) -> List[T]:
        return list(self)

    def to_reversed_list(self) -> List[T]:
        """Snapshot from tail to head, walking the prev links."""
        result: List[T] = []
        cur = self._tail
        while cur:
            result.append(cur.value)
            cur = cur.prev
        return result

    def _node_at(self, index: int) -> Optional[_DLLNode[T]]:
        if index < 0 or index >= self._size:
            return None
        if index < self._size / 2:
            cur = self._head
            for _ in range(index):
                cur = cur.next
        else:
            cur = self._tail
            for _ in range(self._size - 1 - index):
                cur = cur.prev
        return cur

    def _remove_node(self, node: _DLLNode[T]) -> T:
        if self._head is node and self._tail is node:
            self._head = self._tail = None
        elif self._head is node:
            self._head = node.next
            self._head.prev = None
        elif self._tail is node:
            self._tail = node.prev
            self._tail.next = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
        self._size -= 1
        node.prev = node.next = None
        return node.value

    def __iter__(self) -> Iterator[T]:
        cur = self._head
        while cur:
            yield cur.value
            cur = cur.next

    def __len__(self):
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)


# ---------------- Circular linked list ----------------
class CircularLinkedList(Generic[T]):
    """
    Ring of values for carousels and rotating banners.
    Wraps a LinkedList and rebinds tail.next to head after every mutation,
    so the chain is closed whenever the list is non-empty.
    """
    def __init__(self):
        self._items: LinkedList[T] = LinkedList()

    def append(self, value: T) -> None:
        self._items.append(value)
        self._close()

    def prepend(self, value: T) -> None:
        self._items.prepend(value)
        self._close()

    def insert_at(self, index: int, value: T) -> bool:
        inserted = self._items.insert_at(index, value)
        self._close()
        return inserted

    def remove(self, value: T) -> bool:
        removed = self._items.remove(value)
        self._close()
        return removed

    def remove_at(self, index: int) -> Optional[T]:
        value = self._items.remove_at(index)
        self._close()
        return value

    def get_next(self, current: T) -> Optional[T]:
        index = self._items.index_of(current)
        if index == -1:
            return None
        return self._items.get((index + 1) % self._items.size())

    def get_prev(self, current: T) -> Optional[T]:
        index = self._items.index_of(current)
        if index == -1:
            return None
        return self._items.get((index - 1) % self._items.size())

    def get(self, index: int) -> Optional[T]:
        return self._items.get(index)

    def index_of(self, value: T) -> int:
        return self._items.index_of(value)

    def contains(self, value: T) -> bool:
        return self._items.contains(value)

    def is_empty(self) -> bool:
        return self._items.is_empty()

    def size(self) -> int:
        return self._items.size()

    def clear(self) -> None:
        self._items.clear()

    def to_list(self) -> List[T]:
        return self._items.to_list()

    def is_closed(self) -> bool:
        """True when tail links back to head (vacuously true when empty)."""
        tail = self._items._tail
        return tail is None or tail.next is self._items._head

    def _close(self) -> None:
        if self._items._tail is not None:
            self._items._tail.next = self._items._head

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self):
        return self._items.size()

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)
