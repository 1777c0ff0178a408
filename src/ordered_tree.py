"""
Ordered Tree -- Unbalanced binary search tree with a removable in-order cursor.

Keys are ordered by a three-way comparator (natural order by default). Equal
keys route right on insertion, so the container behaves as a multiset. Nodes
keep a parent back-reference, which lets the in-order successor be found by
climbing instead of keeping an explicit stack, and lets a cursor delete the
element it just yielded without losing its place.

No rebalancing is done: inserting keys in sorted order yields a tree shaped
like a linked list. Every walk is iterative, so that shape costs time but never
recursion depth.

Mutating the tree while a cursor is live, other than through that cursor's own
remove(), invalidates the cursor. This is not detected.
"""

from typing import TypeVar, Generic, Callable, Iterable, List, Iterator, Optional, Tuple

T = TypeVar('T')


def natural_order(a, b) -> int:
    return (a > b) - (a < b)


class CursorStateError(RuntimeError):
    pass


class OrderedTree(Generic[T]):
    class Node:
        def __init__(self, key: T) -> None:
            self.key: T = key
            self.left: Optional['OrderedTree.Node'] = None
            self.right: Optional['OrderedTree.Node'] = None
            self.parent: Optional['OrderedTree.Node'] = None

        def minimum(self) -> 'OrderedTree.Node':
            node = self
            while node.left is not None:
                node = node.left
            return node

        def maximum(self) -> 'OrderedTree.Node':
            node = self
            while node.right is not None:
                node = node.right
            return node

        def successor(self) -> Optional['OrderedTree.Node']:
            if self.right is not None:
                return self.right.minimum()
            node = self
            parent = node.parent
            while parent is not None and node is parent.right:
                node = parent
                parent = parent.parent
            return parent

        def __repr__(self) -> str:
            return f"Node({self.key!r})"

    class Cursor(Iterator[T]):
        """In-order iterator that can remove the key it last returned.

        The successor is captured on every advance, before any removal can
        reshape the tree. Only one remove() is allowed per advance.
        """

        def __init__(self, tree: 'OrderedTree[T]') -> None:
            self._tree = tree
            self._last: Optional[OrderedTree.Node] = None
            self._next: Optional[OrderedTree.Node] = None
            self._can_remove = False
            if tree._root is not None:
                self._next = tree._root.minimum()

        def has_next(self) -> bool:
            return self._next is not None

        def __next__(self) -> T:
            if self._next is None:
                raise StopIteration
            self._last = self._next
            self._next = self._last.successor()
            self._can_remove = True
            return self._last.key

        def __iter__(self) -> 'OrderedTree.Cursor':
            return self

        def remove(self) -> T:
            if not self._can_remove or self._last is None:
                raise CursorStateError("remove called without a preceding next")
            key = self._last.key
            spliced = self._tree._delete(self._last)
            if spliced is not self._last:
                # The successor's key now lives in _last; the node _next
                # pointed at was the one detached.
                self._next = self._last
            self._can_remove = False
            return key

    def __init__(self, keys: Optional[Iterable[T]] = None,
                 cmp: Optional[Callable[[T, T], int]] = None) -> None:
        self._root: Optional[OrderedTree.Node] = None
        self._size: int = 0
        self._cmp: Callable[[T, T], int] = cmp if cmp is not None else natural_order
        if keys is not None:
            for key in keys:
                self.add(key)

    @property
    def comparator(self) -> Callable[[T, T], int]:
        return self._cmp

    def add(self, key: T) -> bool:
        if key is None:
            return False

        new_node = OrderedTree.Node(key)
        parent: Optional[OrderedTree.Node] = None
        node = self._root
        went_left = False
        while node is not None:
            parent = node
            went_left = self._cmp(key, node.key) < 0
            node = node.left if went_left else node.right

        new_node.parent = parent
        if parent is None:
            self._root = new_node
        elif went_left:
            parent.left = new_node
        else:
            parent.right = new_node
        self._size += 1
        return True

    def add_all(self, keys: Iterable[T]) -> bool:
        for key in keys:
            if not self.add(key):
                return False
        return True

    def find(self, key: T) -> Optional[Node]:
        if key is None:
            return None
        node = self._root
        while node is not None:
            order = self._cmp(key, node.key)
            if order < 0:
                node = node.left
            elif order > 0:
                node = node.right
            else:
                return node
        return None

    def remove(self, key: T) -> Optional[T]:
        node = self.find(key)
        if node is None:
            return None
        removed = node.key
        self._delete(node)
        return removed

    def remove_all(self, keys: Iterable[T]) -> bool:
        changed = False
        for key in keys:
            if self.remove(key) is not None:
                changed = True
        return changed

    def _delete(self, node: Optional[Node]) -> Optional[Node]:
        """Unlink `node`'s key from the tree and return the node detached.

        With two children the in-order successor is spliced out instead and
        its key copied into `node`, so the returned node is the successor.
        `node` must belong to this tree.
        """
        if node is None:
            return None

        if node.left is None or node.right is None:
            spliced = node
        else:
            spliced = node.right.minimum()

        child = spliced.left if spliced.left is not None else spliced.right
        if child is not None:
            child.parent = spliced.parent

        if spliced.parent is None:
            self._root = child
        elif spliced is spliced.parent.left:
            spliced.parent.left = child
        else:
            spliced.parent.right = child

        if spliced is not node:
            node.key = spliced.key

        spliced.parent = spliced.left = spliced.right = None
        self._size -= 1
        return spliced

    def contains(self, key: T) -> bool:
        return self.find(key) is not None

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._root.minimum().key

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._root.maximum().key

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        best = 0
        stack: List[Tuple[OrderedTree.Node, int]] = []
        if self._root is not None:
            stack.append((self._root, 1))
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    def cursor(self) -> 'OrderedTree.Cursor':
        return OrderedTree.Cursor(self)

    def in_order(self) -> List[T]:
        return list(self.cursor())

    def copy(self) -> 'OrderedTree[T]':
        # Pre-order replay reproduces the same shape.
        clone: OrderedTree[T] = OrderedTree(cmp=self._cmp)
        stack: List[OrderedTree.Node] = [] if self._root is None else [self._root]
        while stack:
            node = stack.pop()
            clone.add(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return clone

    def render(self) -> str:
        """Sideways picture of the tree: right subtree above, left below."""
        if self._root is None:
            return ""
        width = max(len(str(key)) for key in self)
        lines: List[str] = []
        stack: List[Tuple[OrderedTree.Node, int]] = []
        node: Optional[OrderedTree.Node] = self._root
        depth = 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node = node.right
                depth += 1
            node, depth = stack.pop()
            lines.append(" " * (depth * (width + 4)) + "-- " + str(node.key))
            node = node.left
            depth += 1
        return "\n".join(lines)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.contains(key)

    def __iter__(self) -> 'OrderedTree.Cursor':
        return self.cursor()

    def __repr__(self) -> str:
        return f"OrderedTree({self.in_order()})"

    def __str__(self) -> str:
        return f"OrderedTree(size={self._size})"
