"""Weighted graphs and shortest-path trees."""

from .graph import Graph, Node
from .heap import HeapNode, PriorityQueue
from .path_tree import PathTree

__all__ = ["Graph", "Node", "PathTree", "PriorityQueue", "HeapNode"]
