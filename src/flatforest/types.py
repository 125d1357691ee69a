from enum import Enum
from typing import Callable, Sequence

# A node predicate receives a node ID and decides whether the node is kept
NodePredicate = Callable[[int], bool]

# Node IDs and depths may be given as any integer sequence (list, tuple, range, ...)
IntSequence = Sequence[int]


class ValidationAction(str, Enum):
    """Action to take on the depth-adjacency invariant when a Forest is constructed.

    Values:
        IGNORE: Only check that both sequences have the same length (default behavior)
        RAISE: Also validate the depths and raise MalformedForestError on the first violation
    """

    IGNORE = "ignore"
    RAISE = "raise"
