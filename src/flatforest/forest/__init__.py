"""Flattened forest representation with conversion and rendering helpers.

This module provides the immutable array-based Forest, its decoding into linked
anytree nodes, and human-readable renderings for debugging and display.
"""

from .conversion import from_tree, to_tree
from .forest import Forest
from .forest_node import ForestNode
from .rendering import format_string, get_outline, get_tree_representation, stream_outline, stream_tree_representation

__all__ = [
    "Forest",
    "ForestNode",
    "format_string",
    "from_tree",
    "get_outline",
    "get_tree_representation",
    "stream_outline",
    "stream_tree_representation",
    "to_tree",
]
