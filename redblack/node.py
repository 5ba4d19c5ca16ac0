from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from .tree import RBTree

T = TypeVar("T")


class Node(Generic[T]):
    """A single red-black tree node.

    Nodes are handed out by `RBTree.first()`, `RBTree.find_node()` and friends.
    A handle stays meaningful only until the tree is next modified.
    """

    def __init__(self, item: T, tree: RBTree[T], nil: SentinelNode):
        self._item: T = item
        self._red: bool = True

        self._parent: Node[T] = nil
        self._left: Node[T] = nil
        self._right: Node[T] = nil
        self._tree: Optional[RBTree[T]] = tree

    @property
    def item(self) -> T:
        """The item stored in this node."""
        return self._item

    @property
    def is_red(self) -> bool:
        return self._red

    @property
    def next(self) -> Optional[Node[T]]:
        """This node's successor in the tree, if any."""
        ret = self._successor()
        if ret is not self._tree._nil:
            return ret

    @property
    def prev(self) -> Optional[Node[T]]:
        """This node's predecessor in the tree, if any."""
        ret = self._predecessor()
        if ret is not self._tree._nil:
            return ret

    def _is_left_child(self) -> bool:
        return self._parent._left is self

    def _min_node(self) -> Node[T]:
        nil = self._tree._nil
        node = self
        while node._left is not nil:
            node = node._left
        return node

    def _max_node(self) -> Node[T]:
        nil = self._tree._nil
        node = self
        while node._right is not nil:
            node = node._right
        return node

    def _successor(self) -> Node[T]:
        nil = self._tree._nil
        if self._right is not nil:
            return self._right._min_node()

        node = self
        parent = self._parent
        while parent is not nil and node is parent._right:
            node = parent
            parent = parent._parent
        return parent

    def _predecessor(self) -> Node[T]:
        nil = self._tree._nil
        if self._left is not nil:
            return self._left._max_node()

        node = self
        parent = self._parent
        while parent is not nil and node is parent._left:
            node = parent
            parent = parent._parent
        return parent

    def _replace_in_parent(self, child: Node[T]):
        """Hang `child` from this node's parent in place of this node."""
        tree = self._tree
        parent = self._parent

        if parent is tree._nil:
            tree._root = child
        elif parent._left is self:
            parent._left = child
        else:
            parent._right = child

        # may borrow the sentinel's parent link; delete-fixup relies on it
        child._parent = parent

    def _rotate_left(self):
        # The right child takes this node's place; this node becomes its
        # left child.
        nil = self._tree._nil
        pivot = self._right

        self._right = pivot._left
        if pivot._left is not nil:
            pivot._left._parent = self

        pivot._parent = self._parent
        if self._parent is nil:
            self._tree._root = pivot
        elif self._is_left_child():
            self._parent._left = pivot
        else:
            self._parent._right = pivot

        pivot._left = self
        self._parent = pivot

    def _rotate_right(self):
        nil = self._tree._nil
        pivot = self._left

        self._left = pivot._right
        if pivot._right is not nil:
            pivot._right._parent = self

        pivot._parent = self._parent
        if self._parent is nil:
            self._tree._root = pivot
        elif self._is_left_child():
            self._parent._left = pivot
        else:
            self._parent._right = pivot

        pivot._right = self
        self._parent = pivot

    def _detach(self):
        self._tree = None
        self._parent = None
        self._left = None
        self._right = None

    def _print_recursive(self, level: int) -> str:
        nil = self._tree._nil
        ret = ""
        if self._left is not nil:
            ret = self._left._print_recursive(level + 1)

        ret += ("    " * level) + self._print_node() + "\n"

        if self._right is not nil:
            ret += self._right._print_recursive(level + 1)

        return ret

    def _print_node(self) -> str:
        if self._red:
            return str(self._item) + " (R)"
        else:
            return str(self._item) + " (B)"

    def __repr__(self) -> str:
        return "Node({!r}, {})".format(self._item, "red" if self._red else "black")


class SentinelNode(Node):
    """The shared black terminator standing in for every missing link.

    All of its links point back at itself, so rotation and fixup code can
    follow any link of any node without checking for `None`.
    """

    def __init__(self):
        self._item = None
        self._red = False
        self._parent = self
        self._left = self
        self._right = self
        self._tree = None

    def _reset(self):
        self._red = False
        self._parent = self
        self._left = self
        self._right = self

    def __repr__(self) -> str:
        return "SentinelNode()"
