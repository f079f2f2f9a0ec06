"""
Unit tests for the lazy-deletion priority queue and the heuristics.
"""

import math

import pytest

from gridsearch import ConfigurationError
from gridsearch.algorithms.heuristics import euclidean, get_heuristic, manhattan
from gridsearch.algorithms.pqueue import PriorityQueue


class TestPriorityQueue:
    """Binary min-heap behavior."""

    def test_empty_queue_signals_empty(self):
        pq = PriorityQueue(key=lambda x: x)
        assert pq.is_empty()
        assert pq.size() == 0
        assert pq.dequeue() is None
        assert pq.peek() is None
        assert not pq

    def test_dequeues_in_key_order(self):
        pq = PriorityQueue(key=lambda x: x)
        for value in [5, 1, 4, 2, 3]:
            pq.enqueue(value)
        assert pq.peek() == 1
        assert [pq.dequeue() for _ in range(5)] == [1, 2, 3, 4, 5]
        assert pq.is_empty()

    def test_ties_come_out_in_insertion_order(self):
        pq = PriorityQueue(key=lambda item: item[0])
        for item in [(1, "a"), (0, "b"), (1, "c"), (0, "d")]:
            pq.enqueue(item)
        assert [pq.dequeue()[1] for _ in range(4)] == ["b", "d", "a", "c"]

    def test_key_is_snapshotted_at_enqueue(self):
        priority = {"x": 5, "y": 3}
        pq = PriorityQueue(key=priority.__getitem__)
        pq.enqueue("x")
        pq.enqueue("y")
        priority["x"] = 0
        assert pq.dequeue() == "y"

    def test_duplicates_are_kept(self):
        pq = PriorityQueue(key=lambda x: x[0])
        pq.enqueue((3, "cell"))
        pq.enqueue((1, "cell"))
        assert len(pq) == 2
        assert pq.dequeue() == (1, "cell")
        assert pq.dequeue() == (3, "cell")

    def test_tuple_keys(self):
        pq = PriorityQueue(key=lambda item: (item["f"], item["h"]))
        pq.enqueue({"f": 8, "h": 4, "id": 1})
        pq.enqueue({"f": 8, "h": 2, "id": 2})
        pq.enqueue({"f": 7, "h": 9, "id": 3})
        assert [pq.dequeue()["id"] for _ in range(3)] == [3, 2, 1]


class TestHeuristics:
    """Distance estimators."""

    def test_manhattan(self):
        assert manhattan((0, 0), (3, 4)) == 7.0
        assert manhattan((3, 4), (0, 0)) == 7.0

    def test_euclidean(self):
        assert euclidean((0, 0), (3, 4)) == 5.0
        assert euclidean((2, 2), (2, 2)) == 0.0

    def test_euclidean_never_exceeds_manhattan(self):
        for a, b in [((0, 0), (1, 1)), ((2, 7), (5, 1)), ((0, 0), (0, 9))]:
            assert euclidean(a, b) <= manhattan(a, b)

    def test_lookup(self):
        assert get_heuristic("manhattan") is manhattan
        assert get_heuristic("euclidean") is euclidean

    def test_unknown_heuristic(self):
        with pytest.raises(ConfigurationError):
            get_heuristic("chebyshev")

    def test_results_are_floats(self):
        assert isinstance(manhattan((0, 0), (1, 1)), float)
        assert math.isclose(euclidean((0, 0), (1, 1)), math.sqrt(2))
