"""Elementary node predicates: ID sets, wrapped callables and negation."""

from typing import FrozenSet, Iterable

from flatforest.types import NodePredicate

from .base_predicate import BaseNodePredicate


class IdSetPredicate(BaseNodePredicate):
    """Predicate based on membership of the node ID in a fixed set.

    By default nodes whose ID is in the set are included. With ``exclude=True`` the
    set lists the IDs to drop instead, which is the natural form for a "hidden nodes"
    list.

    Attributes:
        ids (FrozenSet[int]): The IDs of the set.
        exclude (bool): Whether the set lists excluded rather than included IDs.

    Example:
        >>> IdSetPredicate([1, 2]).include(2)
        True
        >>> IdSetPredicate([1, 2], exclude=True).include(2)
        False
        >>> IdSetPredicate([1, 2], exclude=True).include(3)
        True
    """

    def __init__(self, ids: Iterable[int], exclude: bool = False):
        self.ids: FrozenSet[int] = frozenset(ids)
        self.exclude = exclude

    def include(self, node_id: int) -> bool:
        return (node_id in self.ids) != self.exclude

    def has_ids(self) -> bool:
        """Check if the predicate has any IDs configured.

        Returns:
            True if the ID set is non-empty, False otherwise.
        """
        return bool(self.ids)


class CallablePredicate(BaseNodePredicate):
    """Adapter turning a plain callable into a BaseNodePredicate.

    Useful for mixing lambdas into composite predicates.

    Example:
        >>> CallablePredicate(lambda node_id: node_id > 10).include(11)
        True
    """

    def __init__(self, func: NodePredicate):
        if not callable(func):
            raise TypeError(f"Predicate must be callable, got {type(func)}")
        self.func = func

    def include(self, node_id: int) -> bool:
        return bool(self.func(node_id))


class NotPredicate(BaseNodePredicate):
    """Negation of another predicate.

    Example:
        >>> NotPredicate(IdSetPredicate([1])).include(1)
        False
    """

    def __init__(self, predicate: NodePredicate):
        if not callable(predicate):
            raise TypeError(f"Predicate must be callable, got {type(predicate)}")
        self.predicate = predicate

    def include(self, node_id: int) -> bool:
        return not self.predicate(node_id)
