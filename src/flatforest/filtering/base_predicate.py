from abc import ABC, abstractmethod


class BaseNodePredicate(ABC):
    """
    Abstract base class defining the interface for reusable node predicates.

    A node predicate decides, from a node ID alone, whether a node may stay in a
    filtered forest. Any plain callable taking an ID and returning a bool can be passed
    to filter_forest(); subclasses of this class add a named, composable form for
    predicates that are built once and applied to many forests (e.g. the visibility
    rules of a UI tree).

    Instances are callable, so they can be used wherever a plain predicate is expected.

    Example:
        >>> class EvenPredicate(BaseNodePredicate):
        ...     def include(self, node_id: int) -> bool:
        ...         return node_id % 2 == 0
        >>> predicate = EvenPredicate()
        >>> predicate.include(4)
        True
        >>> predicate(3)
        False
    """

    @abstractmethod
    def include(self, node_id: int) -> bool:
        """
        Determine if a node may stay in the filtered forest.

        This method must be implemented by concrete subclasses. It is only consulted for
        nodes whose ancestors were all included; the descendants of an excluded node are
        dropped without being checked.

        Args:
            node_id (int): The ID of the node to check.

        Returns:
            bool: True if the node should be kept, False if it and its subtree should be dropped.
        """
        pass

    def __call__(self, node_id: int) -> bool:
        return self.include(node_id)
