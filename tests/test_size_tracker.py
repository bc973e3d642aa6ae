import random

import pytest

from size_tracker import SizeGroup, TopSizeTracker


def as_pairs(tracker):
    return [(group.size, group.paths) for group in tracker.results()]


def feed(tracker, items):
    for size, path in items:
        tracker.add_file(size, path)


def test_smaller_size_discarded_at_capacity():
    tracker = TopSizeTracker(2)
    feed(tracker, [(10, "a"), (20, "b"), (5, "c")])

    assert as_pairs(tracker) == [(10, ["a"]), (20, ["b"])]
    assert tracker.floor == 10


def test_same_size_joins_existing_group():
    tracker = TopSizeTracker(2)
    tracker.add_file(10, "a")
    tracker.add_file(10, "b")
    assert tracker.distinct_count == 1
    tracker.add_file(20, "c")

    assert as_pairs(tracker) == [(10, ["a", "b"]), (20, ["c"])]
    assert tracker.distinct_count == 2
    assert tracker.file_count == 3


def test_whole_group_evicted_at_once():
    tracker = TopSizeTracker(1)
    feed(tracker, [(5, "a"), (5, "b"), (3, "c")])
    assert as_pairs(tracker) == [(5, ["a", "b"])]

    tracker.add_file(7, "d")

    assert as_pairs(tracker) == [(7, ["d"])]
    assert tracker.floor == 7


def test_zero_capacity_keeps_nothing():
    tracker = TopSizeTracker(0)
    feed(tracker, [(0, "a"), (100, "b"), (5, "c")])

    assert tracker.results() == []
    assert tracker.distinct_count == 0
    assert tracker.floor is None


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        TopSizeTracker(-1)


def test_equal_to_floor_appends_without_eviction():
    tracker = TopSizeTracker(2)
    feed(tracker, [(10, "a"), (20, "b"), (10, "c")])

    assert as_pairs(tracker) == [(10, ["a", "c"]), (20, ["b"])]


def test_floor_follows_smaller_admissions_below_capacity():
    tracker = TopSizeTracker(3)
    tracker.add_file(50, "a")
    assert tracker.floor == 50
    tracker.add_file(10, "b")
    assert tracker.floor == 10
    tracker.add_file(30, "c")
    assert tracker.floor == 10


def test_zero_byte_files_are_tracked():
    tracker = TopSizeTracker(2)
    feed(tracker, [(0, "empty1"), (0, "empty2")])

    assert as_pairs(tracker) == [(0, ["empty1", "empty2"])]


def test_results_are_repeatable_and_detached():
    tracker = TopSizeTracker(3)
    feed(tracker, [(3, "x"), (1, "y"), (2, "z"), (3, "w")])

    first = tracker.results()
    first[0].paths.clear()
    second = tracker.results()

    assert second == tracker.results()
    assert second == [SizeGroup(1, ["y"]), SizeGroup(2, ["z"]), SizeGroup(3, ["x", "w"])]
    assert list(tracker) == second
    assert len(tracker) == 3


@pytest.mark.parametrize("capacity", [1, 2, 5, 17])
def test_matches_brute_force_top_sizes(capacity):
    rng = random.Random(capacity)
    items = [(rng.randrange(0, 60), f"file{i}") for i in range(400)]

    tracker = TopSizeTracker(capacity)
    for size, path in items:
        tracker.add_file(size, path)
        assert tracker.distinct_count <= capacity
        assert tracker.distinct_count == len(tracker.results())

    top_sizes = sorted(set(size for size, _ in items))[-capacity:]
    expected = [(size, [path for s, path in items if s == size]) for size in top_sizes]

    assert as_pairs(tracker) == expected
    assert tracker.floor == top_sizes[0]


def test_ascending_input_keeps_last_sizes():
    tracker = TopSizeTracker(3)
    for size in range(1000):
        tracker.add_file(size, f"f{size}")

    assert [group.size for group in tracker.results()] == [997, 998, 999]
    assert tracker.floor == 997
