from __future__ import annotations

from typing import Any, Callable, Optional

from .node import Node, SentinelNode

# Called once per visited item; a falsy return stops the traversal.
Visitor = Callable[[Any], Any]


def ascend(nil: SentinelNode, node: Node, pivot, visitor: Visitor) -> bool:
    if node is nil:
        return True

    if not node._item < pivot:
        if not ascend(nil, node._left, pivot, visitor):
            return False
        if not visitor(node._item):
            return False

    return ascend(nil, node._right, pivot, visitor)


def descend(nil: SentinelNode, node: Node, pivot, visitor: Visitor) -> bool:
    if node is nil:
        return True

    if not pivot < node._item:
        if not descend(nil, node._right, pivot, visitor):
            return False
        if not visitor(node._item):
            return False

    return descend(nil, node._left, pivot, visitor)


def ascend_range(nil: SentinelNode, node: Node, ge, lt, visitor: Visitor) -> bool:
    if node is nil:
        return True

    # entire right subtree is >= lt
    if not node._item < lt:
        return ascend_range(nil, node._left, ge, lt, visitor)
    # entire left subtree is < ge
    if node._item < ge:
        return ascend_range(nil, node._right, ge, lt, visitor)

    if not ascend_range(nil, node._left, ge, lt, visitor):
        return False
    if not visitor(node._item):
        return False
    return ascend_range(nil, node._right, ge, lt, visitor)


class TreeIter(object):
    """Lazy walk between two nodes (both inclusive) by successor links."""

    ITEMS = 0
    NODES = 1

    def __init__(
        self,
        mode: int,
        nil: SentinelNode,
        lower: Node,
        upper: Node,
        rev: bool,
    ):
        self._rev: bool = rev
        self._mode: int = mode
        self._nil: SentinelNode = nil
        self._cur: Optional[Node] = None
        self._end: Optional[Node] = None

        if lower is not nil and upper is not nil and not upper._item < lower._item:
            if not rev:
                self._cur = lower
                self._end = upper
            else:
                self._cur = upper
                self._end = lower

    def __iter__(self) -> TreeIter:
        return self

    def __next__(self):
        if self._cur is None:
            raise StopIteration()

        cur_node = self._cur

        if cur_node is not self._end:
            if not self._rev:
                self._cur = cur_node._successor()
            else:
                self._cur = cur_node._predecessor()
        else:
            self._cur = None
            self._end = None

        if self._mode == TreeIter.ITEMS:
            return cur_node._item
        else:
            return cur_node
