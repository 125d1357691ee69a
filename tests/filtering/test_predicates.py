"""Unit tests for the reusable node predicates."""

import pytest

from flatforest.filtering.base_predicate import BaseNodePredicate
from flatforest.filtering.composite_predicate import AllOfPredicate, AnyOfPredicate
from flatforest.filtering.filter import filter_forest
from flatforest.filtering.simple_predicates import CallablePredicate, IdSetPredicate, NotPredicate


class MockPredicate(BaseNodePredicate):
    """Mock predicate recording the IDs it was asked about."""

    def __init__(self, included_ids=None):
        self.included_ids = set(included_ids or [])
        self.calls = []

    def include(self, node_id: int) -> bool:
        self.calls.append(node_id)
        return node_id in self.included_ids


class TestBaseNodePredicate:
    def test_cannot_instantiate_abstract_class(self):
        with pytest.raises(TypeError):
            BaseNodePredicate()

    def test_call_delegates_to_include(self):
        predicate = MockPredicate([1])
        assert predicate(1)
        assert not predicate(2)
        assert predicate.calls == [1, 2]

    def test_usable_with_filter_forest(self, sample_forest):
        predicate = MockPredicate([1, 2, 3, 8])
        filtered = filter_forest(sample_forest, predicate)
        assert filtered.format_string() == "[1:0, 2:1, 3:2, 8:0]"
        # 7 and 11 sit below excluded nodes
        assert predicate.calls == [1, 2, 3, 4, 5, 6, 8, 9, 10]


class TestIdSetPredicate:
    def test_include_listed_ids(self):
        predicate = IdSetPredicate([1, 2, 3])
        assert predicate.include(2)
        assert not predicate.include(4)
        assert not predicate.exclude

    def test_exclude_listed_ids(self):
        predicate = IdSetPredicate({2, 3}, exclude=True)
        assert not predicate.include(2)
        assert predicate.include(4)

    def test_has_ids(self):
        assert IdSetPredicate([5]).has_ids()
        assert not IdSetPredicate([]).has_ids()

    def test_hidden_ids_filter(self, sample_forest):
        filtered = filter_forest(sample_forest, IdSetPredicate([2, 6], exclude=True))
        assert filtered.format_string() == "[1:0, 5:1, 8:0, 9:1, 10:1, 11:2]"

    def test_ids_are_frozen(self):
        assert IdSetPredicate([1, 2]).ids == frozenset({1, 2})
        assert isinstance(IdSetPredicate([]).ids, frozenset)

    def test_ids_are_copied(self):
        ids = [1]
        predicate = IdSetPredicate(ids)
        ids.append(2)
        assert not predicate.include(2)


class TestCallablePredicate:
    def test_wraps_callable(self):
        predicate = CallablePredicate(lambda node_id: node_id > 3)
        assert predicate.include(4)
        assert not predicate.include(3)

    def test_result_is_bool(self):
        assert CallablePredicate(lambda node_id: node_id).include(5) is True

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError, match="Predicate must be callable"):
            CallablePredicate(42)


class TestNotPredicate:
    def test_negation(self):
        predicate = NotPredicate(IdSetPredicate([1]))
        assert not predicate.include(1)
        assert predicate.include(2)

    def test_negates_plain_callable(self):
        assert NotPredicate(lambda node_id: False).include(0)

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            NotPredicate("not a predicate")


class TestCompositePredicates:
    def test_init_with_empty_predicates(self):
        with pytest.raises(ValueError, match="At least one predicate must be provided"):
            AllOfPredicate([])
        with pytest.raises(ValueError, match="At least one predicate must be provided"):
            AnyOfPredicate([])

    def test_init_with_invalid_predicate_type(self):
        with pytest.raises(TypeError, match="Predicate at index 1 must be callable"):
            AllOfPredicate([MockPredicate(), "invalid"])

    def test_all_of(self):
        predicate = AllOfPredicate([IdSetPredicate([1, 2, 3]), lambda node_id: node_id != 2])
        assert predicate.include(1)
        assert not predicate.include(2)
        assert not predicate.include(4)

    def test_any_of(self):
        predicate = AnyOfPredicate([IdSetPredicate([1]), lambda node_id: node_id > 10])
        assert predicate.include(1)
        assert predicate.include(11)
        assert not predicate.include(5)

    def test_all_of_short_circuits(self):
        first = MockPredicate([])
        second = MockPredicate([1])
        AllOfPredicate([first, second]).include(1)
        assert first.calls == [1]
        assert second.calls == []

    def test_any_of_short_circuits(self):
        first = MockPredicate([1])
        second = MockPredicate([1])
        AnyOfPredicate([first, second]).include(1)
        assert second.calls == []

    def test_add_and_remove_predicate(self):
        first = MockPredicate([1])
        composite = AllOfPredicate([first])
        second = MockPredicate([])
        composite.add_predicate(second)

        assert composite.get_predicate_count() == 2
        assert not composite.include(1)

        assert composite.remove_predicate(second)
        assert not composite.remove_predicate(second)
        assert composite.include(1)

    def test_add_predicate_rejects_non_callable(self):
        composite = AnyOfPredicate([MockPredicate()])
        with pytest.raises(TypeError, match="Predicate must be callable"):
            composite.add_predicate(None)

    def test_get_predicates_returns_copy(self):
        composite = AnyOfPredicate([MockPredicate()])
        predicates = composite.get_predicates()
        predicates.append(MockPredicate())
        assert composite.get_predicate_count() == 1

    def test_nested_composites_in_filter(self, sample_forest):
        visible = AllOfPredicate(
            [
                IdSetPredicate([4, 7], exclude=True),
                AnyOfPredicate([lambda node_id: node_id < 5, lambda node_id: node_id >= 8]),
            ]
        )
        filtered = filter_forest(sample_forest, visible)
        assert filtered.format_string() == "[1:0, 2:1, 3:2, 8:0, 9:1, 10:1, 11:2]"
