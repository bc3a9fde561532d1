import copy
import logging
from collections import deque
from enum import Enum
from typing import (Any, Callable, Deque, Dict, Generic, Iterable, Iterator,
                    List, Optional, Tuple, TypeVar, Union)

T = TypeVar('T')

logger = logging.getLogger(__name__)


class ReplacementPolicy(Enum):
    SUCCESSOR = "successor"
    PREDECESSOR = "predecessor"


class BinarySearchTree(Generic[T]):
    class Node:
        def __init__(self, key: T, parent: Optional['BinarySearchTree.Node'] = None) -> None:
            self.key: T = key
            self.parent: Optional['BinarySearchTree.Node'] = parent
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

        def is_leaf(self) -> bool:
            return self.left is None and self.right is None

        def __repr__(self) -> str:
            return f"Node({self.key!r})"

    def __init__(self, keys: Optional[Iterable[T]] = None,
                 policy: Union[ReplacementPolicy, str] = ReplacementPolicy.SUCCESSOR) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0
        # raises ValueError for anything that is not a policy or its name
        self._policy: ReplacementPolicy = ReplacementPolicy(policy)
        if keys is not None:
            for key in keys:
                self.insert(key)

    @property
    def policy(self) -> ReplacementPolicy:
        return self._policy

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def insert(self, key: T) -> bool:
        if self._root is None:
            self._root = BinarySearchTree.Node(key)
            self._size += 1
            return True

        node = self._root
        while True:
            if key == node.key:
                return False
            if key < node.key:
                if node.left is None:
                    node.left = BinarySearchTree.Node(key, node)
                    self._size += 1
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = BinarySearchTree.Node(key, node)
                    self._size += 1
                    return True
                node = node.right

    def remove(self, key: T) -> bool:
        size_before = self._size
        self._root = self._remove(self._root, key, None)
        return self._size < size_before

    def _remove(self, node: Optional[Node], key: T, parent: Optional[Node]) -> Optional[Node]:
        # Returns the node that now occupies the slot which held ``node``.
        if node is None:
            return None

        if key < node.key:
            node.left = self._remove(node.left, key, node)
            return node
        if key > node.key:
            node.right = self._remove(node.right, key, node)
            return node

        if node.left is None:
            logger.debug("remove %r: splicing in right subtree", key)
            return self._splice(node.right, parent)
        if node.right is None:
            logger.debug("remove %r: splicing in left subtree", key)
            return self._splice(node.left, parent)

        if self._policy is ReplacementPolicy.SUCCESSOR:
            replacement = self._find_min(node.right)
            logger.debug("remove %r: promoting successor %r", key, replacement.key)
            node.key = replacement.key
            node.right = self._remove(node.right, replacement.key, node)
        else:
            replacement = self._find_max(node.left)
            logger.debug("remove %r: promoting predecessor %r", key, replacement.key)
            node.key = replacement.key
            node.left = self._remove(node.left, replacement.key, node)
        return node

    def _splice(self, child: Optional[Node], parent: Optional[Node]) -> Optional[Node]:
        # A leaf leaves an empty slot behind; there is no node to re-parent.
        self._size -= 1
        if child is not None:
            child.parent = parent
        return child

    def contains(self, key: T) -> bool:
        return self._find_node(self._root, key) is not None

    def find(self, key: T) -> Optional[Node]:
        return self._find_node(self._root, key)

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._find_min(self._root).key

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._find_max(self._root).key

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    empty = is_empty

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        if self._root is None:
            return 0
        height = 0
        stack: List[Tuple[BinarySearchTree.Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            height = max(height, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return height

    def in_order(self, visitor: Optional[Callable[[T], Any]] = None) -> Optional[List[T]]:
        return self._visit(self._in_order_nodes(), visitor)

    def pre_order(self, visitor: Optional[Callable[[T], Any]] = None) -> Optional[List[T]]:
        return self._visit(self._pre_order_nodes(), visitor)

    def post_order(self, visitor: Optional[Callable[[T], Any]] = None) -> Optional[List[T]]:
        return self._visit(self._post_order_nodes(), visitor)

    def level_order(self, visitor: Optional[Callable[[T, int], Any]] = None) -> Optional[List[Tuple[T, int]]]:
        # depth of the root is 1
        if visitor is None:
            result: List[Tuple[T, int]] = []
            self.level_order_nodes(lambda node, depth: result.append((node.key, depth)))
            return result
        self.level_order_nodes(lambda node, depth: visitor(node.key, depth))
        return None

    def level_order_nodes(self, visitor: Callable[['BinarySearchTree.Node', int], Any]) -> None:
        if self._root is None:
            return
        queue: Deque[Tuple[BinarySearchTree.Node, int]] = deque([(self._root, 1)])
        while queue:
            node, depth = queue.popleft()
            visitor(node, depth)
            if node.left is not None:
                queue.append((node.left, depth + 1))
            if node.right is not None:
                queue.append((node.right, depth + 1))

    def copy(self) -> 'BinarySearchTree[T]':
        clone: BinarySearchTree[T] = BinarySearchTree(policy=self._policy)
        clone._root = self._clone_nodes()
        clone._size = self._size
        return clone

    def copy_from(self, other: 'BinarySearchTree[T]') -> None:
        # keeps this tree's own policy
        if other is self:
            return
        self._root = other._clone_nodes()
        self._size = other._size

    def move(self) -> 'BinarySearchTree[T]':
        target: BinarySearchTree[T] = BinarySearchTree(policy=self._policy)
        target.move_from(self)
        return target

    def move_from(self, other: 'BinarySearchTree[T]') -> None:
        if other is self:
            return
        self._root = other._root
        self._size = other._size
        other._root = None
        other._size = 0

    def validate(self) -> bool:
        # Raises AssertionError on the first violation, even under -O.
        seen = set()
        if self._root is not None:
            if self._root.parent is not None:
                raise AssertionError(
                    f"root {self._root.key!r} has parent {self._root.parent.key!r}"
                )
            stack: List[Tuple[BinarySearchTree.Node, Optional[BinarySearchTree.Node],
                              Optional[BinarySearchTree.Node]]] = [(self._root, None, None)]
            while stack:
                node, lower, upper = stack.pop()
                if id(node) in seen:
                    raise AssertionError(f"node {node.key!r} is reachable more than once")
                seen.add(id(node))
                if lower is not None and not lower.key < node.key:
                    raise AssertionError(f"key {node.key!r} must be greater than {lower.key!r}")
                if upper is not None and not node.key < upper.key:
                    raise AssertionError(f"key {node.key!r} must be less than {upper.key!r}")
                for child in (node.left, node.right):
                    if child is not None and child.parent is not node:
                        raise AssertionError(
                            f"child {child.key!r} does not point back to parent {node.key!r}"
                        )
                if node.left is not None:
                    stack.append((node.left, lower, node))
                if node.right is not None:
                    stack.append((node.right, node, upper))
        if len(seen) != self._size:
            raise AssertionError(f"size is {self._size} but {len(seen)} nodes are reachable")
        return True

    def _visit(self, nodes: Iterable[Node], visitor: Optional[Callable[[T], Any]]) -> Optional[List[T]]:
        if visitor is None:
            return [node.key for node in nodes]
        for node in nodes:
            visitor(node.key)
        return None

    def _in_order_nodes(self) -> Iterator[Node]:
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _pre_order_nodes(self) -> Iterator[Node]:
        if self._root is None:
            return
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def _post_order_nodes(self) -> Iterator[Node]:
        if self._root is None:
            return
        result: List[BinarySearchTree.Node] = []
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(result)

    def _clone_nodes(self) -> Optional[Node]:
        if self._root is None:
            return None
        clone_root = BinarySearchTree.Node(self._root.key)
        stack: List[Tuple[BinarySearchTree.Node, BinarySearchTree.Node]] = [(self._root, clone_root)]
        while stack:
            source, target = stack.pop()
            if source.left is not None:
                target.left = BinarySearchTree.Node(source.left.key, target)
                stack.append((source.left, target.left))
            if source.right is not None:
                target.right = BinarySearchTree.Node(source.right.key, target)
                stack.append((source.right, target.right))
        return clone_root

    def _find_node(self, node: Optional[Node], key: T) -> Optional[Node]:
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, key: T) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[T]:
        return (node.key for node in self._in_order_nodes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinarySearchTree):
            return NotImplemented
        return self._size == other._size and self.in_order() == other.in_order()

    def __copy__(self) -> 'BinarySearchTree[T]':
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'BinarySearchTree[T]':
        clone = self.copy()
        for node in clone._pre_order_nodes():
            node.key = copy.deepcopy(node.key, memo)
        return clone

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size}, height={self.height()})"
