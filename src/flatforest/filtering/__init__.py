"""Structural filtering of forests and reusable node predicates."""

from .base_predicate import BaseNodePredicate
from .composite_predicate import AllOfPredicate, AnyOfPredicate, CompositePredicate
from .filter import filter_forest
from .simple_predicates import CallablePredicate, IdSetPredicate, NotPredicate

__all__ = [
    "AllOfPredicate",
    "AnyOfPredicate",
    "BaseNodePredicate",
    "CallablePredicate",
    "CompositePredicate",
    "IdSetPredicate",
    "NotPredicate",
    "filter_forest",
]
