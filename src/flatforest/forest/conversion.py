"""Conversion between a flattened Forest and linked anytree nodes."""

from typing import Iterable, List, Tuple

from anytree import NodeMixin, PreOrderIter

from flatforest.forest.forest import Forest
from flatforest.forest.forest_node import ForestNode


def to_tree(forest: Forest) -> List[ForestNode]:
    """Decode a Forest into linked nodes.

    Each node is attached to the nearest preceding node with a smaller depth. For a valid
    forest this is exactly its parent; for a malformed one (a depth jump greater than one)
    the node is still attached somewhere sensible instead of failing.

    Args:
        forest: The forest to decode.

    Returns:
        The root nodes, in order.

    Example:
        >>> roots = to_tree(Forest([1, 2, 3, 4], [0, 1, 1, 0]))
        >>> [root.node_id for root in roots]
        [1, 4]
        >>> [child.node_id for child in roots[0].children]
        [2, 3]
    """
    roots: List[ForestNode] = []
    # Open ancestors of the current position as (depth, node), innermost last
    stack: List[Tuple[int, ForestNode]] = []
    for node_id, depth in forest:
        while stack and stack[-1][0] >= depth:
            stack.pop()
        parent = stack[-1][1] if stack else None
        node = ForestNode(node_id, parent=parent)
        if parent is None:
            roots.append(node)
        stack.append((depth, node))
    return roots


def from_tree(roots: Iterable[NodeMixin], id_attr: str = "node_id") -> Forest:
    """Flatten linked anytree nodes into a Forest.

    The nodes are walked in pre-order. Depths are measured from the given roots, so a
    subtree cut out of a larger tree flattens the same way as a standalone tree.

    Args:
        roots: The root nodes, in order. Any anytree node type is accepted.
        id_attr: Name of the attribute holding the node ID. Defaults to "node_id".

    Returns:
        The flattened forest.

    Raises:
        AttributeError: If a node lacks the id_attr attribute.

    Example:
        >>> from anytree import Node
        >>> root = Node("a", node_id=1)
        >>> _ = Node("b", parent=root, node_id=2)
        >>> from_tree([root]).format_string()
        '[1:0, 2:1]'
    """
    node_ids: List[int] = []
    depths: List[int] = []
    for root in roots:
        base_depth = root.depth
        for node in PreOrderIter(root):
            node_ids.append(getattr(node, id_attr))
            depths.append(node.depth - base_depth)
    return Forest(node_ids, depths)
