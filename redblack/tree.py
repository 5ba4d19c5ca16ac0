from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from .balance import repair_delete, repair_insert
from .item import Comparable
from .iter import TreeIter, Visitor, ascend, ascend_range, descend
from .node import Node, SentinelNode

T = TypeVar("T", bound=Comparable)


class RBTree(Generic[T]):
    """An ordered set of items kept in a red-black tree.

    Items are ordered with `<` and must form a strict weak order; two items
    where neither is less than the other count as the same item. `None` is
    used throughout to mean "not found", so it cannot be stored.

    The tree is not thread-safe. Node handles and iterators obtained from it
    are invalidated by any insert or delete.
    """

    def __init__(self):
        self._nil: SentinelNode = SentinelNode()
        self._root: Node[T] = self._nil
        self._len: int = 0

    def _find_node(self, item: T) -> Node[T]:
        nil = self._nil
        node = self._root
        while node is not nil:
            if item < node._item:
                node = node._left
            elif node._item < item:
                node = node._right
            else:
                return node
        return nil

    def find_node(self, item: T) -> Optional[Node[T]]:
        """Directly retrieve the node holding an item equal to `item`."""
        node = self._find_node(item)
        if node is not self._nil:
            return node

    def get_or_insert_node(self, item: T) -> Tuple[bool, Node[T]]:
        """Retrieve the node for `item`, inserting a new node if one does not
        exist.

        Returns a tuple containing:
            - Whether a new node was inserted or not
            - The (possibly newly-inserted) node for the given item
        """
        nil = self._nil
        parent = nil
        node = self._root

        while node is not nil:
            parent = node
            if item < node._item:
                node = node._left
            elif node._item < item:
                node = node._right
            else:
                return (False, node)

        new_node = Node(item, self, nil)
        new_node._parent = parent
        if parent is nil:
            self._root = new_node
        elif item < parent._item:
            parent._left = new_node
        else:
            parent._right = new_node

        self._len += 1
        repair_insert(self, new_node)
        return (True, new_node)

    def insert(self, item: T) -> bool:
        """Insert `item` unless an equal item is already stored.

        The stored item is left untouched on a duplicate. Returns whether a
        new node was created.
        """
        created, _ = self.get_or_insert_node(item)
        return created

    def insert_or_get(self, item: T) -> T:
        """Return the stored item equal to `item`, inserting `item` first if
        there is none."""
        _, node = self.get_or_insert_node(item)
        return node._item

    def replace(self, item: T) -> Optional[T]:
        """Insert `item`, overwriting any stored equal item.

        Returns the item that was replaced, or None if `item` was new.
        """
        created, node = self.get_or_insert_node(item)
        if created:
            return None

        old_item = node._item
        node._item = item
        return old_item

    def get(self, item: T) -> Optional[T]:
        """Return the stored item equal to `item`, or None."""
        return self._find_node(item)._item

    def _delete_node(self, node: Node[T]) -> T:
        nil = self._nil
        removed = node._item

        if node._left is not nil and node._right is not nil:
            # Move the successor's item up and splice out the successor,
            # which has no left child.
            successor = node._right._min_node()
            node._item = successor._item
            node = successor

        if node._left is not nil:
            child = node._left
        else:
            child = node._right

        node._replace_in_parent(child)
        if not node._red:
            repair_delete(self, child)

        self._nil._reset()
        node._detach()
        self._len -= 1
        return removed

    def delete(self, item: T) -> Optional[T]:
        """Remove the stored item equal to `item`.

        Returns the removed item, or None if there was nothing to remove.
        """
        node = self._find_node(item)
        if node is self._nil:
            return None
        return self._delete_node(node)

    def remove(self, item: T) -> T:
        """Like `delete()`, but raises KeyError if `item` is not present."""
        node = self._find_node(item)
        if node is self._nil:
            raise KeyError(item)
        return self._delete_node(node)

    def clear(self):
        self._root = self._nil
        self._len = 0

    def _first_node(self) -> Node[T]:
        if self._root is self._nil:
            raise IndexError("Tree is empty")
        return self._root._min_node()

    def _last_node(self) -> Node[T]:
        if self._root is self._nil:
            raise IndexError("Tree is empty")
        return self._root._max_node()

    def first(self) -> Optional[Node[T]]:
        """The node holding the smallest item, if any."""
        if self._root is not self._nil:
            return self._root._min_node()

    def last(self) -> Optional[Node[T]]:
        """The node holding the largest item, if any."""
        if self._root is not self._nil:
            return self._root._max_node()

    def next(self, node: Node[T]) -> Optional[Node[T]]:
        return node.next

    def prev(self, node: Node[T]) -> Optional[Node[T]]:
        return node.prev

    def min(self) -> Optional[T]:
        if self._root is self._nil:
            return None
        return self._root._min_node()._item

    def max(self) -> Optional[T]:
        if self._root is self._nil:
            return None
        return self._root._max_node()._item

    def pop_min(self) -> T:
        return self._delete_node(self._first_node())

    def pop_max(self) -> T:
        return self._delete_node(self._last_node())

    # inclusive lower bound
    def _lower_bound(self, bound: T) -> Node[T]:
        nil = self._nil
        node = self._root
        ret = nil
        while node is not nil:
            if node._item < bound:
                node = node._right
            else:
                ret = node
                node = node._left
        return ret

    # exclusive upper bound
    def _upper_bound(self, bound: T) -> Node[T]:
        nil = self._nil
        node = self._root
        ret = nil
        while node is not nil:
            if node._item < bound:
                ret = node
                node = node._right
            else:
                node = node._left
        return ret

    def lower_bound(self, bound: T) -> Optional[T]:
        """The smallest stored item not less than `bound`, if any."""
        return self._lower_bound(bound)._item

    def upper_bound(self, bound: T) -> Optional[T]:
        """The largest stored item less than `bound`, if any."""
        return self._upper_bound(bound)._item

    def ascend(self, pivot: T, visitor: Visitor):
        """Call `visitor` on every item greater than or equal to `pivot`, in
        ascending order, until it returns a falsy value."""
        ascend(self._nil, self._root, pivot, visitor)

    def descend(self, pivot: T, visitor: Visitor):
        """Call `visitor` on every item less than or equal to `pivot`, in
        descending order, until it returns a falsy value."""
        descend(self._nil, self._root, pivot, visitor)

    def ascend_range(self, ge: T, lt: T, visitor: Visitor):
        """Call `visitor` on every item in `[ge, lt)`, in ascending order,
        until it returns a falsy value."""
        ascend_range(self._nil, self._root, ge, lt, visitor)

    def _do_iter(
        self,
        mode: int,
        ge: Optional[T] = None,
        lt: Optional[T] = None,
        reverse: bool = False,
    ) -> TreeIter:
        nil = self._nil
        if self._root is nil:
            return TreeIter(mode, nil, nil, nil, reverse)

        if ge is not None:
            lower = self._lower_bound(ge)
        else:
            lower = self._root._min_node()

        if lt is not None:
            upper = self._upper_bound(lt)
        else:
            upper = self._root._max_node()

        return TreeIter(mode, nil, lower, upper, reverse)

    def items(
        self, ge: Optional[T] = None, lt: Optional[T] = None, reverse: bool = False
    ) -> Iterator[T]:
        """Iterate over the items in `[ge, lt)`; a missing bound is open."""
        return self._do_iter(TreeIter.ITEMS, ge, lt, reverse)

    def nodes(
        self, ge: Optional[T] = None, lt: Optional[T] = None, reverse: bool = False
    ) -> Iterator[Node[T]]:
        return self._do_iter(TreeIter.NODES, ge, lt, reverse)

    def preorder(self) -> Iterator[T]:
        nil = self._nil
        stack: List[Node[T]] = []
        if self._root is not nil:
            stack.append(self._root)

        while stack:
            node = stack.pop()
            yield node._item
            if node._right is not nil:
                stack.append(node._right)
            if node._left is not nil:
                stack.append(node._left)

    def print(self) -> str:
        if self._root is not self._nil:
            return self._root._print_recursive(0)
        else:
            return "<empty tree>"

    def __contains__(self, item: T) -> bool:
        return self._find_node(item) is not self._nil

    def __iter__(self) -> Iterator[T]:
        return self.items()

    def __reversed__(self) -> Iterator[T]:
        return self.items(reverse=True)

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return "RBTree([" + ", ".join(map(repr, self.items())) + "])"
