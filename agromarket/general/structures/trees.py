# trees.py
import weakref
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

_NO_ROOT = object()


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the values' own ordering."""
    return (a > b) - (a < b)


# ---------------- General tree ----------------
class TreeNode(Generic[T]):
    """
    Node of an unbounded fan-out tree.
    Children are owned by the node; the parent link is a weak back reference
    used only for depth and detach.
    """

    def __init__(self, value: T):
        self.value = value
        self.children: List["TreeNode[T]"] = []
        self._parent: Optional[weakref.ref] = None

    @property
    def parent(self) -> Optional["TreeNode[T]"]:
        return self._parent() if self._parent is not None else None

    def add_child(self, child: "TreeNode[T]") -> "TreeNode[T]":
        old_parent = child.parent
        if old_parent is not None:
            old_parent.remove_child(child)
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child

    def remove_child(self, child: "TreeNode[T]") -> bool:
        for i, c in enumerate(self.children):
            if c is child:
                del self.children[i]
                child._parent = None
                return True
        return False

    def is_leaf(self) -> bool:
        return not self.children

    def is_root(self) -> bool:
        return self.parent is None

    def get_depth(self) -> int:
        depth = 0
        cur = self.parent
        while cur is not None:
            depth += 1
            cur = cur.parent
        return depth

    def __repr__(self):
        return f"TreeNode({self.value!r}, children={len(self.children)})"


class Tree(Generic[T]):
    """
    General tree with pre-order DFS and level-order BFS traversals.
    Lookups return the first pre-order match or None.
    """

    def __init__(self, root_value: Any = _NO_ROOT):
        self.root: Optional[TreeNode[T]] = None
        if root_value is not _NO_ROOT:
            self.root = TreeNode(root_value)

    def _iter_dfs(self) -> Iterator[TreeNode[T]]:
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            # reversed so the leftmost child is visited first
            stack.extend(reversed(node.children))

    def _iter_bfs(self) -> Iterator[TreeNode[T]]:
        if self.root is None:
            return
        level = [self.root]
        while level:
            nxt: List[TreeNode[T]] = []
            for node in level:
                yield node
                nxt.extend(node.children)
            level = nxt

    def traverse_dfs(self, callback: Callable[[TreeNode[T]], None]) -> None:
        for node in self._iter_dfs():
            callback(node)

    def traverse_bfs(self, callback: Callable[[TreeNode[T]], None]) -> None:
        for node in self._iter_bfs():
            callback(node)

    def find(self, value: T) -> Optional[TreeNode[T]]:
        return self.find_by(lambda v: v == value)

    def find_by(self, predicate: Callable[[T], bool]) -> Optional[TreeNode[T]]:
        for node in self._iter_dfs():
            if predicate(node.value):
                return node
        return None

    def get_leaves(self) -> List[TreeNode[T]]:
        return [node for node in self._iter_dfs() if node.is_leaf()]

    def get_height(self) -> int:
        """Number of levels: 0 for an empty tree, 1 for a lone root."""
        height = 0
        level = [self.root] if self.root is not None else []
        while level:
            height += 1
            level = [child for node in level for child in node.children]
        return height

    def size(self) -> int:
        return sum(1 for _ in self._iter_dfs())

    def to_list(self) -> List[T]:
        """Values in BFS order."""
        return [node.value for node in self._iter_bfs()]

    def __len__(self):
        return self.size()


# ---------------- Binary search tree ----------------
class BinaryTreeNode(Generic[T]):
    __slots__ = ("value", "left", "right")

    def __init__(self, value: T):
        self.value = value
        self.left: Optional["BinaryTreeNode[T]"] = None
        self.right: Optional["BinaryTreeNode[T]"] = None


class BinarySearchTree(Generic[T]):
    """
    Unbalanced BST ordered by a three-way comparator.
    Values comparing equal go to the right subtree, so duplicates are kept
    and come out after their equals in in-order traversal.
    O(log n) average, O(n) worst case.
    """

    def __init__(self, compare: Optional[Callable[[T, T], int]] = None):
        self.root: Optional[BinaryTreeNode[T]] = None
        self.compare = compare or natural_compare
        self._size = 0

    def insert(self, value: T) -> None:
        node = BinaryTreeNode(value)
        self._size += 1
        if self.root is None:
            self.root = node
            return
        cur = self.root
        while True:
            if self.compare(value, cur.value) < 0:
                if cur.left is None:
                    cur.left = node
                    return
                cur = cur.left
            else:
                if cur.right is None:
                    cur.right = node
                    return
                cur = cur.right

    def search(self, value: T) -> bool:
        cur = self.root
        while cur is not None:
            c = self.compare(value, cur.value)
            if c == 0:
                return True
            cur = cur.left if c < 0 else cur.right
        return False

    def find_min(self) -> Optional[T]:
        if self.root is None:
            return None
        cur = self.root
        while cur.left is not None:
            cur = cur.left
        return cur.value

    def find_max(self) -> Optional[T]:
        if self.root is None:
            return None
        cur = self.root
        while cur.right is not None:
            cur = cur.right
        return cur.value

    def in_order(self, callback: Callable[[T], None]) -> None:
        stack: List[BinaryTreeNode[T]] = []
        cur = self.root
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            callback(cur.value)
            cur = cur.right

    def pre_order(self, callback: Callable[[T], None]) -> None:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            callback(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self, callback: Callable[[T], None]) -> None:
        # reverse of a root-right-left pre-order
        out: List[T] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            out.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        for value in reversed(out):
            callback(value)

    def to_sorted_list(self) -> List[T]:
        result: List[T] = []
        self.in_order(result.append)
        return result

    def size(self) -> int:
        return self._size

    def __len__(self):
        return self._size
