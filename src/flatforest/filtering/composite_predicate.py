"""Composite node predicates for combining multiple predicates."""

from typing import List, Sequence

from flatforest.types import NodePredicate

from .base_predicate import BaseNodePredicate


class CompositePredicate(BaseNodePredicate):
    """Base class for predicates built from a list of constituent predicates.

    Constituents may be BaseNodePredicate instances or any plain callable taking a node
    ID. Concrete subclasses decide how the individual answers are combined.

    Attributes:
        predicates (List[NodePredicate]): List of constituent predicates.
    """

    def __init__(self, predicates: Sequence[NodePredicate]):
        """Initialize a composite predicate.

        Args:
            predicates: Sequence of predicates to combine.

        Raises:
            ValueError: If the predicates sequence is empty.
            TypeError: If any predicate is not callable.

        Note:
            Predicates are evaluated in the order provided and evaluation short-circuits,
            so cheap predicates should come first.
        """
        if not predicates:
            raise ValueError("At least one predicate must be provided")

        for i, predicate in enumerate(predicates):
            if not callable(predicate):
                raise TypeError(f"Predicate at index {i} must be callable, got {type(predicate)}")

        self.predicates: List[NodePredicate] = list(predicates)

    def add_predicate(self, predicate: NodePredicate) -> None:
        """Add another predicate to this composite.

        Raises:
            TypeError: If predicate is not callable.
        """
        if not callable(predicate):
            raise TypeError(f"Predicate must be callable, got {type(predicate)}")
        self.predicates.append(predicate)

    def remove_predicate(self, predicate: NodePredicate) -> bool:
        """Remove a predicate from this composite.

        Returns:
            True if the predicate was found and removed, False if it wasn't in the composite.
        """
        try:
            self.predicates.remove(predicate)
            return True
        except ValueError:
            return False

    def get_predicate_count(self) -> int:
        return len(self.predicates)

    def get_predicates(self) -> List[NodePredicate]:
        """Get a copy of the constituent predicates list.

        Returns:
            A new list containing all constituent predicates.
        """
        return list(self.predicates)


class AllOfPredicate(CompositePredicate):
    """Predicate that includes a node only if ALL constituent predicates include it.

    This is the natural way to stack independent visibility rules, e.g. a search match
    on top of a permission check.

    Example:
        >>> from flatforest.filtering.simple_predicates import IdSetPredicate
        >>> predicate = AllOfPredicate([lambda node_id: node_id > 1, IdSetPredicate([1, 2, 3])])
        >>> [node_id for node_id in range(5) if predicate(node_id)]
        [2, 3]
    """

    def include(self, node_id: int) -> bool:
        return all(predicate(node_id) for predicate in self.predicates)


class AnyOfPredicate(CompositePredicate):
    """Predicate that includes a node if ANY constituent predicate includes it.

    Example:
        >>> predicate = AnyOfPredicate([lambda node_id: node_id == 1, lambda node_id: node_id == 3])
        >>> [node_id for node_id in range(5) if predicate(node_id)]
        [1, 3]
    """

    def include(self, node_id: int) -> bool:
        return any(predicate(node_id) for predicate in self.predicates)
