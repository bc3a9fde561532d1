"""Text dumps of a BinarySearchTree for debugging."""

import sys
from typing import Callable, Optional, TextIO

from binary_search_tree import BinarySearchTree


def format_node(node: BinarySearchTree.Node) -> str:
    return f"{node.key}, "


def format_node_debug(node: BinarySearchTree.Node) -> str:
    parts = [f"key = {node.key}"]
    parts.append("parent = None" if node.parent is None else f"parent->key = {node.parent.key}")
    parts.append("left = None" if node.left is None else f"left->key = {node.left.key}")
    parts.append("right = None" if node.right is None else f"right->key = {node.right.key}")
    return "{ " + ", ".join(parts) + " }"


class LevelOrderPrinter:
    """Level-order visitor that writes a header each time the depth changes."""

    def __init__(self, stream: TextIO, formatter: Callable[[BinarySearchTree.Node], str]) -> None:
        self._stream = stream
        self._formatter = formatter
        self._current_level = 0

    def __call__(self, node: BinarySearchTree.Node, level: int) -> None:
        if level != self._current_level:
            self._current_level = level
            self._stream.write(f"\ncurrent level = {level}\n")
        self._stream.write(self._formatter(node))
        self._stream.write("\n")


def print_tree(tree: BinarySearchTree, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(f"tree::size = {tree.size()}. contents = {{ ")
    tree.in_order(lambda key: out.write(f"{key}, "))
    out.write("} \n")


def print_level_order(tree: BinarySearchTree, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else sys.stdout
    tree.level_order_nodes(LevelOrderPrinter(out, format_node))
    out.write("\n")


def debug_print_level_order(tree: BinarySearchTree, stream: Optional[TextIO] = None) -> None:
    """Like print_level_order, but every line also shows the node's parent and children."""
    out = stream if stream is not None else sys.stdout
    tree.level_order_nodes(LevelOrderPrinter(out, format_node_debug))
    out.flush()
