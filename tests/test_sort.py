from __future__ import annotations

import math
import random
from collections import Counter

import pytest

from deferred import (
    Partitioned,
    by_key,
    by_subtraction,
    counting,
    defer,
    partition_sort,
    partition_sort_writer,
    reverse,
    to_concrete_sequence,
    to_deferred_sequence,
)

from fakes import Boom, CountingProducer


def sort_values(values, comparator=by_subtraction):
    return to_concrete_sequence(partition_sort(to_deferred_sequence(values), comparator))


class TestPartitionSort:
    def test_sorts_example(self):
        assert sort_values([2, 4, 1, 3]) == [1, 2, 3, 4]

    def test_empty_returns_input_without_comparisons(self):
        comparator, counter = counting(by_subtraction)
        seq = to_deferred_sequence([])
        result = partition_sort(seq, comparator)
        assert result is seq
        assert to_concrete_sequence(result) == []
        assert counter.calls == 0

    def test_single_element_needs_no_comparisons(self):
        comparator, counter = counting(by_subtraction)
        assert sort_values([5], comparator) == [5]
        assert counter.calls == 0

    def test_comparator_result_forced_once_per_element_per_level(self):
        comparator, counter = counting(by_subtraction)
        assert sort_values([2, 4, 1, 3], comparator) == [1, 2, 3, 4]
        assert counter.calls == counter.forced == 4

    def test_sorted_input_is_quadratic(self):
        comparator, counter = counting(by_subtraction)
        n = 20
        assert sort_values(list(range(n)), comparator) == list(range(n))
        assert counter.forced == n * (n - 1) // 2

    @pytest.mark.parametrize(
        "values",
        [
            [3, 3, 1, 1, 2],
            [-1.5, 2, 0, -7, 2.25],
            [True, False, True, False],
            [9, 8, 7, 6, 5, 4, 3, 2, 1],
        ],
    )
    def test_sorted_permutation(self, values):
        result = sort_values(values)
        assert Counter(result) == Counter(values)
        assert result == sorted(values)

    def test_random_inputs(self):
        rng = random.Random(1234)
        for _ in range(25):
            values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
            assert sort_values(values) == sorted(values)

    def test_booleans_sort_false_first(self):
        assert sort_values([True, False]) == [False, True]

    def test_returns_original_handles(self):
        seq = to_deferred_sequence([2, 1])
        first, second = seq()
        assert partition_sort(seq)() == (second, first)

    def test_input_is_untouched(self):
        seq = to_deferred_sequence([3, 1, 2])
        before = seq()
        partition_sort(seq)
        assert seq() == before
        assert to_concrete_sequence(seq) == [3, 1, 2]

    def test_sort_itself_forces_no_elements(self):
        producers = [CountingProducer(v) for v in [3, 1, 2]]
        rank = {id(p): p.value for p in producers}

        def by_rank(a, b):
            return defer(rank[id(a)] - rank[id(b)])

        result = partition_sort(defer(tuple(producers)), by_rank)
        assert [p.runs for p in producers] == [0, 0, 0]
        assert to_concrete_sequence(result) == [1, 2, 3]

    def test_comparator_failure_propagates_from_call(self):
        def broken(a, b):
            def producer():
                raise Boom("compare")
            return producer

        with pytest.raises(Boom):
            partition_sort(to_deferred_sequence([1, 2]), broken)

    def test_non_numeric_elements_fail_with_default_comparator(self):
        with pytest.raises(TypeError):
            partition_sort(to_deferred_sequence(["b", "a"]))

    def test_nan_keeps_every_element(self):
        result = sort_values([math.nan, 1.0, 0.5])
        assert len(result) == 3
        assert sum(math.isnan(x) for x in result) == 1

    def test_all_equal_input_does_not_exhaust_the_stack(self):
        assert sort_values([5] * 2000) == [5] * 2000

    def test_long_sorted_input_does_not_exhaust_the_stack(self):
        values = list(range(2000))
        assert sort_values(values) == values

    def test_long_reversed_input(self):
        values = list(range(1500, 0, -1))
        assert sort_values(values) == sorted(values)

    def test_accepts_plain_callables(self):
        seq = lambda: (lambda: 2, lambda: 1)
        assert to_concrete_sequence(partition_sort(seq)) == [1, 2]


class TestComparators:
    def test_reverse(self):
        assert sort_values([2, 4, 1, 3], reverse(by_subtraction)) == [4, 3, 2, 1]

    def test_by_key(self):
        words = ["ccc", "a", "bb"]
        assert sort_values(words, by_key(len)) == ["a", "bb", "ccc"]

    def test_by_key_signs(self):
        comparator = by_key(str.lower)
        assert comparator(defer("A"), defer("b"))() == -1
        assert comparator(defer("b"), defer("B"))() == 0
        assert comparator(defer("c"), defer("B"))() == 1

    def test_counter_reset(self):
        comparator, counter = counting(by_subtraction)
        comparator(defer(1), defer(2))()
        counter.reset()
        assert (counter.calls, counter.forced) == (0, 0)

    def test_counting_distinguishes_calls_from_forces(self):
        comparator, counter = counting(by_subtraction)
        comparator(defer(1), defer(2))
        assert (counter.calls, counter.forced) == (1, 0)


class TestPartitionSortWriter:
    def test_logs_partition_steps(self):
        wr = partition_sort_writer(to_deferred_sequence([3, 1, 2]))()
        assert to_concrete_sequence(wr.value) == [1, 2, 3]
        assert list(wr.log) == [
            Partitioned(depth=0, size=3, not_greater=2, greater=0),
            Partitioned(depth=1, size=2, not_greater=0, greater=1),
            Partitioned(depth=2, size=1, not_greater=0, greater=0),
        ]

    def test_empty_logs_nothing(self):
        wr = partition_sort_writer(to_deferred_sequence([]))()
        assert list(wr.log) == []
        assert to_concrete_sequence(wr.value) == []

    def test_matches_plain_sort(self):
        values = [5, 2, 8, 2, 9, 1]
        wr = partition_sort_writer(to_deferred_sequence(values))()
        assert to_concrete_sequence(wr.value) == sort_values(values)
        assert len(wr.log) == len(values)
