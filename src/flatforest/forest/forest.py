"""Array-based representation of an ordered forest.

This module provides the Forest class, which stores an ordered collection of ordered
trees as two parallel sequences indexed by depth-first pre-order position: one holding
node IDs and one holding node depths. Parent, child and sibling relationships are not
stored; they are derived from positions and depths on demand.
"""

from typing import Any, Iterator, List, Optional, Tuple

from flatforest.exceptions import IndexOutOfRangeError, InvalidArgumentError, MalformedForestError
from flatforest.types import IntSequence, ValidationAction


class Forest:
    """An immutable forest flattened into depth-first pre-order.

    Each node is represented by an integer ID and its depth, the number of ancestors
    between the node and the root of its tree (roots have depth 0). If the depth of a
    node is D, the depth of the next node is:

    - D + 1 if the next node is a child of this node;
    - D if the next node is a sibling of this node;
    - d < D if the next node is unrelated to this node (it is a sibling of an ancestor,
      or a new root when d == 0).

    For example, node IDs ``1..11`` with depths ``0, 1, 2, 3, 1, 0, 1, 0, 1, 1, 2``
    describe the forest below, where the number of hyphens equals the depth::

        1
        - 2
        - - 3
        - - - 4
        - 5
        6
        - 7
        8
        - 9
        - 10
        - - 11

    Construction only checks that both sequences have the same length. The structural
    invariant (``depths[i + 1] <= depths[i] + 1``, first depth 0, no negative depth) is
    checked by validate(), or at construction time with ``validation=ValidationAction.RAISE``.

    Attributes:
        node_ids (Tuple[int, ...]): Node IDs in pre-order.
        depths (Tuple[int, ...]): Node depths in pre-order.

    Example:
        >>> forest = Forest([1, 2, 3, 4], [0, 1, 1, 0])
        >>> forest.size()
        4
        >>> forest.node_id(2), forest.depth(2)
        (3, 1)
        >>> forest.format_string()
        '[1:0, 2:1, 3:1, 4:0]'
    """

    __slots__ = ("_node_ids", "_depths")

    def __init__(
        self,
        node_ids: IntSequence,
        depths: IntSequence,
        validation: ValidationAction = ValidationAction.IGNORE,
    ) -> None:
        """Initialize a Forest.

        Args:
            node_ids: Node IDs in depth-first pre-order.
            depths: Depth of each node, same length as node_ids.
            validation: Whether to check the structural invariant now. Defaults to IGNORE.

        Raises:
            InvalidArgumentError: If node_ids and depths differ in length.
            MalformedForestError: If validation is RAISE and the depths are malformed.
        """
        if len(node_ids) != len(depths):
            raise InvalidArgumentError(len(node_ids), len(depths))
        self._node_ids: Tuple[int, ...] = tuple(node_ids)
        self._depths: Tuple[int, ...] = tuple(depths)
        if validation == ValidationAction.RAISE:
            self.validate()

    @property
    def node_ids(self) -> Tuple[int, ...]:
        return self._node_ids

    @property
    def depths(self) -> Tuple[int, ...]:
        return self._depths

    def size(self) -> int:
        """Get the number of nodes in the forest.

        Returns:
            Number of nodes, 0 for an empty forest.
        """
        return len(self._depths)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._depths):
            raise IndexOutOfRangeError(index, len(self._depths))

    def node_id(self, index: int) -> int:
        """Get the ID of the node at a pre-order position.

        Args:
            index: Pre-order position, 0 <= index < size().

        Returns:
            The node ID.

        Raises:
            IndexOutOfRangeError: If index is outside the forest.

        Example:
            >>> Forest([7, 8], [0, 1]).node_id(1)
            8
        """
        self._check_index(index)
        return self._node_ids[index]

    def depth(self, index: int) -> int:
        """Get the depth of the node at a pre-order position.

        Args:
            index: Pre-order position, 0 <= index < size().

        Returns:
            The node depth (0 for a root).

        Raises:
            IndexOutOfRangeError: If index is outside the forest.
        """
        self._check_index(index)
        return self._depths[index]

    def format_string(self) -> str:
        """Get the ``[id:depth, id:depth, ...]`` debug representation.

        Two forests holding the same nodes in the same order always produce the same
        string, which makes it suitable for comparing forests by value in tests.

        Returns:
            The formatted string, ``[]`` for an empty forest.

        Example:
            >>> Forest([1, 2], [0, 1]).format_string()
            '[1:0, 2:1]'
            >>> Forest([], []).format_string()
            '[]'
        """
        return "[" + ", ".join(f"{node_id}:{depth}" for node_id, depth in self) + "]"

    def validate(self) -> None:
        """Check the structural invariant of the depth sequence.

        A valid forest has no negative depth, starts with a root (depth 0) when it is not
        empty, and never grows by more than one level between adjacent nodes.

        Raises:
            MalformedForestError: For the first position violating the invariant.

        Example:
            >>> Forest([1, 2, 3], [0, 2, 1]).validate()
            Traceback (most recent call last):
                ...
            flatforest.exceptions.MalformedForestError: Malformed forest at position 1: depth 2 follows depth 0
        """
        previous: Optional[int] = None
        for position, depth in enumerate(self._depths):
            if depth < 0:
                raise MalformedForestError(position, f"negative depth {depth}")
            if previous is None:
                if depth != 0:
                    raise MalformedForestError(position, f"first node has depth {depth}, expected 0")
            elif depth > previous + 1:
                raise MalformedForestError(position, f"depth {depth} follows depth {previous}")
            previous = depth

    def is_valid(self) -> bool:
        """Check the structural invariant without raising.

        Returns:
            True if validate() would succeed, False otherwise.
        """
        try:
            self.validate()
        except MalformedForestError:
            return False
        return True

    def subtree_end(self, index: int) -> int:
        """Get the position just past the subtree rooted at a node.

        This is the first later position whose depth is not greater than the node's depth,
        or size() when the subtree runs to the end of the forest.

        Args:
            index: Pre-order position of the subtree root.

        Returns:
            Exclusive end position of the subtree.

        Raises:
            IndexOutOfRangeError: If index is outside the forest.

        Example:
            >>> forest = Forest([1, 2, 3, 4], [0, 1, 2, 0])
            >>> forest.subtree_end(0), forest.subtree_end(1), forest.subtree_end(3)
            (3, 3, 4)
        """
        self._check_index(index)
        depth = self._depths[index]
        end = index + 1
        while end < len(self._depths) and self._depths[end] > depth:
            end += 1
        return end

    def parent_index(self, index: int) -> Optional[int]:
        """Get the position of a node's parent.

        The parent is the nearest preceding node with a smaller depth.

        Args:
            index: Pre-order position of the node.

        Returns:
            Position of the parent, or None if the node is a root.

        Raises:
            IndexOutOfRangeError: If index is outside the forest.
        """
        self._check_index(index)
        depth = self._depths[index]
        for position in range(index - 1, -1, -1):
            if self._depths[position] < depth:
                return position
        return None

    def ancestor_indices(self, index: int) -> List[int]:
        """Get the positions of all ancestors of a node, nearest first.

        Args:
            index: Pre-order position of the node.

        Returns:
            Positions of the parent, the grandparent, and so on up to the root.

        Raises:
            IndexOutOfRangeError: If index is outside the forest.

        Example:
            >>> Forest([1, 2, 3, 4], [0, 1, 1, 2]).ancestor_indices(3)
            [2, 0]
        """
        ancestors = []
        parent = self.parent_index(index)
        while parent is not None:
            ancestors.append(parent)
            parent = self.parent_index(parent)
        return ancestors

    def children_indices(self, index: int) -> List[int]:
        """Get the positions of the direct children of a node, in order.

        Raises:
            IndexOutOfRangeError: If index is outside the forest.
        """
        end = self.subtree_end(index)
        children = []
        position = index + 1
        while position < end:
            children.append(position)
            position = self.subtree_end(position)
        return children

    def descendant_indices(self, index: int) -> List[int]:
        """Get the positions of all descendants of a node, in pre-order.

        Raises:
            IndexOutOfRangeError: If index is outside the forest.
        """
        return list(range(index + 1, self.subtree_end(index)))

    def root_indices(self) -> List[int]:
        """Get the positions of the roots of all trees in the forest.

        Example:
            >>> Forest([1, 2, 3, 4, 5], [0, 1, 0, 0, 1]).root_indices()
            [0, 2, 3]
        """
        roots = []
        position = 0
        while position < len(self._depths):
            roots.append(position)
            position = self.subtree_end(position)
        return roots

    def is_descendant(self, ancestor: int, index: int) -> bool:
        """Check whether the node at index lies in the subtree rooted at ancestor.

        A node is not its own descendant.

        Raises:
            IndexOutOfRangeError: If either position is outside the forest.
        """
        self._check_index(ancestor)
        self._check_index(index)
        return ancestor < index < self.subtree_end(ancestor)

    def are_siblings(self, first: int, second: int) -> bool:
        """Check whether two distinct nodes are siblings.

        Siblings share the same depth and no node between them has a smaller depth.
        Roots of the forest are siblings of each other.

        Raises:
            IndexOutOfRangeError: If either position is outside the forest.
        """
        self._check_index(first)
        self._check_index(second)
        if first == second or self._depths[first] != self._depths[second]:
            return False
        low, high = sorted((first, second))
        depth = self._depths[low]
        return all(self._depths[position] >= depth for position in range(low + 1, high))

    def __len__(self) -> int:
        return len(self._depths)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        """Iterate over ``(node_id, depth)`` pairs in pre-order."""
        return zip(self._node_ids, self._depths)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Forest):
            return NotImplemented
        return self._node_ids == other._node_ids and self._depths == other._depths

    def __hash__(self) -> int:
        return hash((self._node_ids, self._depths))

    def __repr__(self) -> str:
        return f"Forest({list(self._node_ids)!r}, {list(self._depths)!r})"

    def __str__(self) -> str:
        return self.format_string()
