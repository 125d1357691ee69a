"""Flattened forest encoding and structural filtering.

This package stores an ordered forest as two parallel arrays in depth-first pre-order
(node IDs and depths) and filters it by a node predicate while preserving
ancestor-descendant relationships, e.g. to apply a search or visibility filter to a
hierarchical display.
"""

from importlib.metadata import PackageNotFoundError, version

from flatforest.exceptions import IndexOutOfRangeError, InvalidArgumentError, MalformedForestError
from flatforest.filtering import (
    AllOfPredicate,
    AnyOfPredicate,
    BaseNodePredicate,
    CallablePredicate,
    IdSetPredicate,
    NotPredicate,
    filter_forest,
)
from flatforest.forest import (
    Forest,
    ForestNode,
    format_string,
    from_tree,
    get_outline,
    get_tree_representation,
    stream_outline,
    stream_tree_representation,
    to_tree,
)
from flatforest.types import ValidationAction

# Expose the version for programmatic use
try:
    __version__ = version("flatforest")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "AllOfPredicate",
    "AnyOfPredicate",
    "BaseNodePredicate",
    "CallablePredicate",
    "Forest",
    "ForestNode",
    "IdSetPredicate",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "MalformedForestError",
    "NotPredicate",
    "ValidationAction",
    "filter_forest",
    "format_string",
    "from_tree",
    "get_outline",
    "get_tree_representation",
    "stream_outline",
    "stream_tree_representation",
    "to_tree",
]
