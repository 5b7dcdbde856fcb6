from collections import Counter
from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.greedy import (
    activity_selection,
    fractional_knapsack,
    gas_station_start,
    greedy_set_cover,
    huffman_codes,
    interval_point_cover,
    job_sequencing,
    kruskal_total_weight,
    min_arrows,
    min_platforms,
    optimal_merge_cost,
    prim_total_weight,
)
from dsakit.weighted_graphs import kruskal_mst

intervals = st.lists(
    st.tuples(st.integers(-20, 20), st.integers(0, 10)).map(
        lambda pair: (pair[0], pair[0] + pair[1])
    ),
    max_size=7,
)


def _max_compatible(activities):
    best = 0
    for size in range(len(activities) + 1):
        for combo in combinations(activities, size):
            ordered = sorted(combo, key=lambda activity: activity[1])
            if all(b[0] > a[1] for a, b in zip(ordered, ordered[1:])):
                best = max(best, size)
    return best


@given(intervals)
def test_activity_selection_is_optimal_and_compatible(activities):
    chosen = activity_selection(activities)
    assert len(chosen) == _max_compatible(activities)
    assert all(b[0] > a[1] for a, b in zip(chosen, chosen[1:]))
    assert Counter(chosen) <= Counter(activities)


def test_activity_selection_keeps_disjoint_activities():
    activities = [(7, 9), (1, 2), (4, 6)]
    assert activity_selection(activities) == sorted(activities)


def test_activity_selection_touching_ends_conflict():
    assert len(activity_selection([(1, 3), (3, 5)])) == 1


@given(intervals)
def test_min_arrows_matches_point_cover(balloons):
    assert min_arrows(balloons) == len(interval_point_cover(balloons))
    assert min_arrows(balloons) <= len(balloons)


def test_min_arrows_disjoint_balloons():
    balloons = [(1, 2), (5, 6), (9, 10)]
    assert min_arrows(balloons) == len(balloons)


@given(intervals)
def test_interval_point_cover_hits_every_interval(given_intervals):
    points = interval_point_cover(given_intervals)
    assert all(
        any(start <= point <= end for point in points)
        for start, end in given_intervals
    )
    assert points == sorted(points)


def test_fractional_knapsack_worked_example():
    items = [(10, 60), (20, 100), (30, 120)]
    assert fractional_knapsack(items, 50) == pytest.approx(240.0)


@given(
    st.lists(st.tuples(st.integers(1, 20), st.integers(0, 50)), max_size=6),
    st.integers(0, 60),
)
def test_fractional_knapsack_bounds(items, capacity):
    value = fractional_knapsack(items, capacity)
    assert value <= sum(v for _, v in items) + 1e-9
    assert value <= fractional_knapsack(items, capacity + 5) + 1e-9
    if capacity >= sum(w for w, _ in items):
        assert value == pytest.approx(sum(v for _, v in items))


def test_fractional_knapsack_rejects_zero_weight():
    with pytest.raises(ValueError):
        fractional_knapsack([(0, 5)], 10)


def test_gas_station_worked_example():
    assert gas_station_start([1, 2, 3, 4, 5], [3, 4, 5, 1, 2]) == 3


def test_gas_station_impossible():
    assert gas_station_start([2, 3, 4], [3, 4, 3]) is None


def test_gas_station_length_mismatch():
    with pytest.raises(ValueError):
        gas_station_start([1, 2], [1])


@given(st.lists(st.tuples(st.integers(0, 10), st.integers(0, 10)), min_size=1))
def test_gas_station_start_completes_the_circuit(stations):
    gas = [g for g, _ in stations]
    cost = [c for _, c in stations]
    start = gas_station_start(gas, cost)
    if sum(gas) < sum(cost):
        assert start is None
        return
    assert start is not None
    tank = 0
    for step in range(len(gas)):
        index = (start + step) % len(gas)
        tank += gas[index] - cost[index]
        assert tank >= 0


@given(st.text(alphabet="abcdef ", max_size=40))
def test_huffman_codes_are_prefix_free_and_optimal(text):
    codes = huffman_codes(text)
    frequencies = Counter(text)
    assert set(codes) == set(frequencies)
    for a, b in combinations(codes.values(), 2):
        assert not a.startswith(b) and not b.startswith(a)
    weighted = sum(frequencies[ch] * len(code) for ch, code in codes.items())
    assert weighted == optimal_merge_cost(frequencies.values())


def test_huffman_single_symbol_gets_empty_code():
    assert huffman_codes("aaaa") == {"a": ""}


def test_huffman_more_frequent_symbol_is_not_longer():
    codes = huffman_codes("aaaaaaaabbbc")
    assert len(codes["a"]) <= len(codes["b"]) <= len(codes["c"])


def test_job_sequencing_worked_example():
    jobs = [(2, 100), (1, 19), (2, 27), (1, 25), (3, 15)]
    assert job_sequencing(jobs) == (3, 142)


@given(st.lists(st.tuples(st.integers(1, 5), st.integers(0, 100)), max_size=8))
def test_job_sequencing_bounds(jobs):
    count, total = job_sequencing(jobs)
    assert count <= min(len(jobs), max((d for d, _ in jobs), default=0))
    assert total <= sum(p for _, p in jobs)


def test_job_sequencing_all_fit():
    jobs = [(5, 10), (5, 20), (5, 30)]
    assert job_sequencing(jobs) == (len(jobs), sum(p for _, p in jobs))


@st.composite
def connected_graphs(draw):
    n = draw(st.integers(1, 6))
    weight = st.integers(0, 20)
    edges = [(i, i + 1, draw(weight)) for i in range(n - 1)]
    extra = draw(
        st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), weight))
    )
    return n, edges + extra


@given(connected_graphs())
def test_kruskal_and_prim_agree(graph):
    n, edges = graph
    total = kruskal_total_weight(n, edges)
    assert total == prim_total_weight(n, edges)
    assert total == sum(edge.weight for edge in kruskal_mst(n, edges))


def test_prim_rejects_disconnected_graph():
    with pytest.raises(ValueError):
        prim_total_weight(3, [(0, 1, 4)])


@given(st.lists(st.tuples(st.integers(0, 30), st.integers(0, 10)), max_size=8))
def test_min_platforms_matches_peak_occupancy(trains):
    arrivals = [a for a, _ in trains]
    departures = [a + stay for a, stay in trains]
    peak = max(
        (
            sum(1 for a, d in zip(arrivals, departures) if a <= t <= d)
            for t in arrivals
        ),
        default=0,
    )
    assert min_platforms(arrivals, departures) == peak


def test_min_platforms_length_mismatch():
    with pytest.raises(ValueError):
        min_platforms([1, 2], [3])


def test_optimal_merge_cost_of_two_files_is_their_sum():
    assert optimal_merge_cost([7, 11]) == 7 + 11
    assert optimal_merge_cost([42]) == 0


@given(
    st.integers(0, 8).flatmap(
        lambda u: st.tuples(
            st.just(u),
            st.lists(st.frozensets(st.integers(1, max(u, 1))), max_size=6),
        )
    )
)
def test_greedy_set_cover_covers_or_raises(case):
    universe_size, sets = case
    union = set().union(*sets)
    if not set(range(1, universe_size + 1)) <= union:
        with pytest.raises(ValueError):
            greedy_set_cover(universe_size, sets)
        return
    chosen = greedy_set_cover(universe_size, sets)
    assert len(set(chosen)) == len(chosen)
    assert set(range(1, universe_size + 1)) <= set().union(
        *(sets[i] for i in chosen)
    )


def test_greedy_set_cover_prefers_largest_gain():
    sets = [{1}, {1, 2, 3}, {3, 4}]
    chosen = greedy_set_cover(4, sets)
    assert chosen[0] == 1
    assert set().union(*(sets[i] for i in chosen)) == {1, 2, 3, 4}