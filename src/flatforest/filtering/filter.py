"""Structural filtering of a flattened forest."""

from typing import List

from flatforest.forest.forest import Forest
from flatforest.types import NodePredicate


def filter_forest(forest: Forest, predicate: NodePredicate) -> Forest:
    """Keep the nodes that pass a predicate together with all of their ancestors.

    A node is present in the filtered forest iff its ID passes the predicate and the IDs
    of all of its ancestors pass it as well. The forest is scanned once, left to right:
    an included node is copied with its original depth, an excluded node is dropped
    together with its whole subtree. Nodes inside a dropped subtree are never passed to
    the predicate.

    Surviving nodes keep their original depths. Since a dropped subtree rooted at depth D
    can only be followed by a node of depth <= D, the result of a valid forest is valid.

    The input forest is not modified. Exceptions raised by the predicate propagate to the
    caller unchanged, and no partial result is returned.

    Args:
        forest: The forest to filter.
        predicate: Callable receiving a node ID and returning True to keep the node.

    Returns:
        A new forest holding only the surviving nodes, in their original order.

    Example:
        >>> forest = Forest([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11], [0, 1, 2, 3, 1, 0, 1, 0, 1, 1, 2])
        >>> filter_forest(forest, lambda node_id: node_id % 3 != 0).format_string()
        '[1:0, 2:1, 5:1, 8:0, 10:1, 11:2]'
    """
    node_ids: List[int] = []
    depths: List[int] = []
    size = forest.size()
    index = 0
    while index < size:
        node_id = forest.node_id(index)
        if predicate(node_id):
            node_ids.append(node_id)
            depths.append(forest.depth(index))
            index += 1
        else:
            # Node out, skipping its whole subtree
            index = forest.subtree_end(index)
    return Forest(node_ids, depths)
