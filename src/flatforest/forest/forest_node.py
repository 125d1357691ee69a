"""Explicit tree node used when a Forest is decoded into linked nodes."""

from typing import Any, Optional

from anytree import Node


class ForestNode(Node):  # type: ignore
    """Node class representing one forest node as a linked anytree node.

    Extends anytree.Node with the node ID of the flattened forest. The node name is the
    ID itself, and the depth is the one anytree derives from the parent chain, so a
    decoded tree never disagrees with its own links.

    Attributes:
        node_id (int): The ID of the node in the flattened forest.
        parent (Optional[ForestNode]): The parent node, None for a root.
        children (tuple[ForestNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = ForestNode(1)
        >>> child = ForestNode(2, parent=root)
        >>> child.node_id, child.depth
        (2, 1)
        >>> root.name
        1
    """

    def __init__(self, node_id: int, parent: Optional["ForestNode"] = None, **kwargs: Any) -> None:
        """Initialize a ForestNode.

        Args:
            node_id: The ID of the node.
            parent: The parent node. Defaults to None.
            **kwargs: Additional attributes passed to anytree.Node.
        """
        super().__init__(node_id, parent, **kwargs)
        self.node_id = node_id
