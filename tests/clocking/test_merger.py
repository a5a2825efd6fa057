from __future__ import annotations

from itertools import permutations

import pytest

from src.flexitime.flexitime.clocking.merger import IntervalMerger
from src.flexitime.flexitime.clocking.model import Interval
from src.flexitime.flexitime.core.exceptions import MalformedIntervalsError

from tests.helpers import at


def test_adjacent_pairs_fuse_into_one_run():
    merged = IntervalMerger().merge([(at(7), at(9)), (at(9), at(11))])

    assert merged == [Interval(start=at(7), end=at(11))]


def test_pairs_with_gap_stay_separate():
    merged = IntervalMerger().merge([(at(7), at(9)), (at(10), at(12))])

    assert merged == [Interval(start=at(7), end=at(9)), Interval(start=at(10), end=at(12))]
    assert merged[1].start - merged[0].end == 3600


def test_chain_of_three_with_one_gap():
    pairs = [(at(8), at(10)), (at(10), at(12)), (at(13), at(15)), (at(15), at(16, 30))]

    merged = IntervalMerger().merge(pairs)

    assert merged == [Interval(start=at(8), end=at(12)), Interval(start=at(13), end=at(16, 30))]


def test_merge_is_independent_of_input_order():
    pairs = [(at(7), at(9)), (at(9), at(11)), (at(12), at(13)), (at(13), at(14))]
    expected = IntervalMerger().merge(pairs)

    for perm in permutations(pairs):
        assert IntervalMerger().merge(perm) == expected


def test_merge_is_idempotent():
    merger = IntervalMerger()
    once = merger.merge([(at(9), at(12)), (at(12, 30), at(17)), (at(17), at(18))])

    assert merger.merge_intervals(once) == once


def test_empty_input_gives_no_intervals():
    assert IntervalMerger().merge([]) == []


def test_duplicate_pair_collapses_to_single_interval():
    merged = IntervalMerger().merge([(at(9), at(12)), (at(9), at(12))])

    assert merged == [Interval(start=at(9), end=at(12))]


def test_reversed_pair_is_malformed():
    with pytest.raises(MalformedIntervalsError):
        IntervalMerger().merge([(at(12), at(9))])


def test_unbalanced_boundaries_are_malformed():
    with pytest.raises(MalformedIntervalsError):
        IntervalMerger().merge([(at(8), at(9)), (at(9), at(10)), (at(9), at(10))])
