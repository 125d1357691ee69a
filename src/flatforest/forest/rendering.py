"""Human-readable renderings of a Forest.

These renderings are meant for debugging, test comparison and display. None of them is
a serialization format: there is no parser for any of them.
"""

from typing import Iterator

from anytree import ContStyle, RenderTree

from flatforest.forest.conversion import to_tree
from flatforest.forest.forest import Forest


def format_string(forest: Forest) -> str:
    """Get the ``[id:depth, id:depth, ...]`` representation of a forest.

    Example:
        >>> format_string(Forest([1, 2, 3], [0, 1, 0]))
        '[1:0, 2:1, 3:0]'
    """
    return forest.format_string()


def stream_tree_representation(forest: Forest) -> Iterator[str]:
    """Generate a tree representation of the forest one line at a time.

    Generates output similar to the Unix 'tree' command. Each tree of the forest starts
    with its root ID on a line of its own, followed by its descendants drawn with
    connecting lines.

    Yields:
        Lines of the tree representation.

    Example:
        >>> forest = Forest([1, 2, 3, 4, 5], [0, 1, 2, 1, 0])
        >>> for line in stream_tree_representation(forest):
        ...     print(line)
        1
        ├── 2
        │   └── 3
        └── 4
        5
    """
    for root in to_tree(forest):
        for prefix, _, node in RenderTree(root, style=ContStyle()):
            yield f"{prefix}{node.node_id}"


def get_tree_representation(forest: Forest) -> str:
    """Get the complete tree representation as a string."""
    return "\n".join(stream_tree_representation(forest))


def stream_outline(forest: Forest) -> Iterator[str]:
    """Generate a hyphen outline of the forest one line at a time.

    Every node is prefixed with one ``"- "`` per depth level, using the stored depth as
    is, so malformed depth sequences are shown exactly as they are encoded.

    Example:
        >>> for line in stream_outline(Forest([1, 2, 3], [0, 1, 2])):
        ...     print(line)
        1
        - 2
        - - 3
    """
    for node_id, depth in forest:
        yield "- " * depth + str(node_id)


def get_outline(forest: Forest) -> str:
    """Get the complete hyphen outline as a string."""
    return "\n".join(stream_outline(forest))
