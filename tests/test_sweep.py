"""Tests for the sweep driver and progress reporting."""

import logging

import networkx as nx
import numpy as np
import pytest

from nullgraph.graph import EdgeRegistry
from nullgraph.rewiring import LoggingProgress, RewireResult, run_sweeps


class _AlternatingStrategy:
    """Succeeds on every ``period``-th call."""

    def __init__(self, period: int) -> None:
        self.period = period
        self.calls: list[int] = []

    def attempt(self, slot: int, self_loops: bool, parallel_edges: bool) -> bool:
        self.calls.append(slot)
        return len(self.calls) % self.period == 0


def _registry(m: int = 10) -> EdgeRegistry:
    g = nx.MultiDiGraph()
    g.add_edges_from((i, i + 1) for i in range(m))
    return EdgeRegistry(g)


def _run(registry, strategy, **kwargs):
    params = dict(
        self_loops=False,
        parallel_edges=False,
        iterations=3,
        no_sweep=False,
        persist=False,
        rng=np.random.default_rng(0),
    )
    params.update(kwargs)
    return run_sweeps(registry, strategy, **params)


class TestSweepAccounting:
    """successes + failed == attempts == iterations * per-sweep attempts."""

    def test_full_sweeps(self):
        registry = _registry(10)
        result = _run(registry, _AlternatingStrategy(2))
        assert result.attempts == 30
        assert result.successes + result.failed == result.attempts
        assert result.successes == 15
        assert result.n_edges == 10

    def test_each_slot_visited_once_per_sweep(self):
        registry = _registry(10)
        strategy = _AlternatingStrategy(1)
        _run(registry, strategy, iterations=2)
        assert sorted(strategy.calls[:10]) == list(range(10))
        assert sorted(strategy.calls[10:]) == list(range(10))

    def test_no_sweep(self):
        registry = _registry(10)
        result = _run(registry, _AlternatingStrategy(1), iterations=7, no_sweep=True)
        assert result.attempts == 7
        assert result.failed == 0

    def test_persist_retries_same_slot(self):
        registry = _registry(5)
        strategy = _AlternatingStrategy(3)
        result = _run(registry, strategy, iterations=1, persist=True)
        assert result.failed == 0
        assert result.attempts == 5
        assert len(strategy.calls) == 15
        for i in range(0, 15, 3):
            assert len(set(strategy.calls[i : i + 3])) == 1

    def test_zero_iterations(self):
        result = _run(_registry(4), _AlternatingStrategy(1), iterations=0)
        assert result == RewireResult(attempts=0, successes=0, failed=0, n_edges=4)

    def test_empty_registry(self):
        g = nx.MultiDiGraph()
        g.add_nodes_from(range(3))
        strategy = _AlternatingStrategy(1)
        result = _run(EdgeRegistry(g), strategy, no_sweep=True)
        assert result.attempts == 0
        assert strategy.calls == []
        assert result.acceptance_rate == 0.0

    def test_acceptance_rate(self):
        result = _run(_registry(10), _AlternatingStrategy(2))
        assert result.acceptance_rate == pytest.approx(0.5)


class TestProgressObserver:
    """The observer sees every attempt, with sweep and position."""

    def test_observer_called_per_attempt(self):
        calls = []
        _run(
            _registry(4),
            _AlternatingStrategy(1),
            iterations=2,
            progress=lambda *args: calls.append(args),
        )
        assert calls == [
            (0, 2, 0, 4), (0, 2, 1, 4), (0, 2, 2, 4), (0, 2, 3, 4),
            (1, 2, 0, 4), (1, 2, 1, 4), (1, 2, 2, 4), (1, 2, 3, 4),
        ]

    def test_observer_no_sweep_total(self):
        calls = []
        _run(
            _registry(4),
            _AlternatingStrategy(1),
            iterations=2,
            no_sweep=True,
            progress=lambda *args: calls.append(args),
        )
        assert calls == [(0, 2, 0, 1), (1, 2, 0, 1)]

    def test_logging_progress_small_total(self, caplog):
        progress = LoggingProgress()
        with caplog.at_level(logging.INFO, logger="nullgraph.rewiring.progress"):
            for i in range(4):
                progress(0, 1, i, 4)
        assert len(caplog.records) == 4
        assert caplog.records[-1].getMessage() == "rewiring edges: (1 / 1) 4 of 4 (100%)"

    def test_logging_progress_throttled(self, caplog):
        progress = LoggingProgress()
        with caplog.at_level(logging.INFO, logger="nullgraph.rewiring.progress"):
            for i in range(1000):
                progress(1, 3, i, 1000)
        # one message per 10 attempts
        assert len(caplog.records) == 100
        assert caplog.records[0].getMessage() == "rewiring edges: (2 / 3) 10 of 1000 (1%)"
