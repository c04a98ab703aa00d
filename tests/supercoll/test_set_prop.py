"""Property-based tests for SuperSet using Hypothesis."""

from typing import List, Set

from hypothesis import given
from hypothesis import strategies as st

from supercoll.set import SuperSet
from tests.supercoll.hypo import configure_hypo

configure_hypo()


@st.composite
def set_strategy(
    draw: st.DrawFn, element_strategy: st.SearchStrategy[int] = st.integers(0, 30)
) -> SuperSet[int]:
    elements = draw(st.lists(element_strategy, min_size=0, max_size=20))
    return SuperSet(elements)


@given(st.lists(st.integers(), min_size=0, max_size=50))
def test_constructor_deduplicates_in_order(elements: List[int]) -> None:
    """Creating a SuperSet should deduplicate and keep first-seen order."""
    sset = SuperSet(elements)
    expected = list(dict.fromkeys(elements))

    assert sset.to_list() == expected
    assert sset.size() == len(expected)
    assert sset.is_empty() == (len(expected) == 0)


@given(st.sets(st.integers()))
def test_from_native_round_trip(native: Set[int]) -> None:
    """from_ followed by to_set yields the same elements."""
    assert SuperSet.from_(native).to_set() == native


@given(set_strategy(), set_strategy())
def test_union_is_superset_of_both(a: SuperSet[int], b: SuperSet[int]) -> None:
    union = a.union(b)
    assert union.is_superset(a)
    assert union.is_superset(b)
    assert union.to_set() == a.to_set() | b.to_set()


@given(set_strategy(), set_strategy())
def test_intersection_is_subset_of_both(a: SuperSet[int], b: SuperSet[int]) -> None:
    intersection = a.intersection(b)
    assert intersection.is_subset(a)
    assert intersection.is_subset(b)
    assert intersection.to_set() == a.to_set() & b.to_set()


@given(set_strategy())
def test_self_union_idempotent(a: SuperSet[int]) -> None:
    assert a.union(a).size() == a.size()
    assert a.union(a).to_list() == a.to_list()


@given(set_strategy(), set_strategy())
def test_subtract_is_disjoint(a: SuperSet[int], b: SuperSet[int]) -> None:
    difference = a.subtract(b)
    assert difference.is_disjoint(b)
    assert difference.is_subset(a)
    assert difference.to_set() == a.to_set() - b.to_set()


@given(set_strategy(), set_strategy())
def test_intersection_and_difference_partition(
    a: SuperSet[int], b: SuperSet[int]
) -> None:
    """A ∩ B and A - B are disjoint and together make up A."""
    intersection = a.intersection(b)
    difference = a.subtract(b)
    assert intersection.is_disjoint(difference)
    assert intersection.union(difference) == a


@given(set_strategy(), set_strategy())
def test_union_is_union_of_operands(a: SuperSet[int], b: SuperSet[int]) -> None:
    assert a.union(b).is_union_of(a, b)


@given(set_strategy(), set_strategy())
def test_is_union_of_self_and_other(a: SuperSet[int], b: SuperSet[int]) -> None:
    """A is the union of A and B exactly when B adds nothing to A."""
    assert a.is_union_of(a, b) == b.is_subset(a)


@given(set_strategy(), set_strategy())
def test_intersection_is_intersection_of_operands(
    a: SuperSet[int], b: SuperSet[int]
) -> None:
    assert a.intersection(b).is_intersection_of(a, b)


@given(set_strategy(), set_strategy())
def test_is_intersection_of_matches_subset(a: SuperSet[int], b: SuperSet[int]) -> None:
    """Seeded with the receiver, the check reduces to a subset test."""
    assert a.is_intersection_of(b) == a.is_subset(b)


@given(set_strategy())
def test_map_size_never_grows(a: SuperSet[int]) -> None:
    doubled = a.map(lambda x: x * 2)
    halved = a.map(lambda x: x // 2)
    assert doubled.size() == a.size()
    assert halved.size() <= a.size()
    assert halved.to_set() == {x // 2 for x in a}


@given(set_strategy())
def test_filter_partitions(a: SuperSet[int]) -> None:
    evens = a.filter(lambda x: x % 2 == 0)
    odds = a.filter(lambda x: x % 2 != 0)
    assert evens.is_disjoint(odds)
    assert evens.union(odds) == a
    assert a.every(lambda x: x in evens or x in odds)


@given(set_strategy())
def test_reduce_matches_sum(a: SuperSet[int]) -> None:
    assert a.reduce(lambda acc, x: acc + x, 0) == sum(a.to_list())


@given(set_strategy(), set_strategy())
def test_operations_leave_operands_unchanged(
    a: SuperSet[int], b: SuperSet[int]
) -> None:
    before_a = a.to_list()
    before_b = b.to_list()
    a.union(b)
    a.intersection(b)
    a.subtract(b)
    a.is_union_of(a, b)
    a.is_intersection_of(b)
    assert a.to_list() == before_a
    assert b.to_list() == before_b
