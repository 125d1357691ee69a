class InvalidArgumentError(ValueError):
    """
    Exception raised when a Forest is constructed from sequences of different lengths.

    Every node needs exactly one ID and exactly one depth, so the two sequences handed
    to the constructor must be of the same length.

    Attributes:
        ids_length (int): Length of the node ID sequence.
        depths_length (int): Length of the depth sequence.

    Example:
        >>> error = InvalidArgumentError(3, 2)
        >>> str(error)
        'IDs and depths sequences must be of same length (got 3 IDs and 2 depths).'
        >>> isinstance(error, ValueError)
        True
    """

    def __init__(self, ids_length: int, depths_length: int) -> None:
        """
        Initialize the exception with the lengths of both sequences.

        Args:
            ids_length (int): Length of the node ID sequence.
            depths_length (int): Length of the depth sequence.
        """
        self.ids_length = ids_length
        self.depths_length = depths_length
        super().__init__(
            f"IDs and depths sequences must be of same length (got {ids_length} IDs and {depths_length} depths)."
        )


class IndexOutOfRangeError(IndexError):
    """
    Exception raised when a pre-order position lies outside a Forest.

    Valid positions are ``0 <= index < size``. Negative indices are out of range; they
    do not count from the end as they would for a Python list.

    Attributes:
        index (int): The requested position.
        size (int): Number of nodes in the forest.

    Example:
        >>> error = IndexOutOfRangeError(5, 3)
        >>> str(error)
        'Index 5 out of range for forest of size 3'
    """

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range for forest of size {size}")


class MalformedForestError(ValueError):
    """
    Exception raised when a depth sequence does not describe a valid forest.

    This exception is raised by ``Forest.validate()`` (and by the constructor when
    validation is set to RAISE) for the first offending position: a negative depth,
    a first node that is not a root, or a depth that grows by more than one from its
    predecessor and so has no parent.

    Attributes:
        position (int): Pre-order position of the first offending node.
        reason (str): Short description of the violation.

    Example:
        >>> error = MalformedForestError(2, "depth 3 follows depth 1")
        >>> str(error)
        'Malformed forest at position 2: depth 3 follows depth 1'
    """

    def __init__(self, position: int, reason: str) -> None:
        self.position = position
        self.reason = reason
        super().__init__(f"Malformed forest at position {position}: {reason}")
