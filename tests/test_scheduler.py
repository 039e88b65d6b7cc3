"""Tests for pathrecall.core.scheduler – the virtual-clock scheduler."""

from __future__ import annotations

from pathrecall.core.scheduler import ManualScheduler


class TestManualScheduler:
    def test_fires_when_due(self):
        s = ManualScheduler()
        fired = []
        s.call_later(100, lambda: fired.append("a"))
        s.advance(99)
        assert fired == []
        s.advance(1)
        assert fired == ["a"]
        assert s.now == 100

    def test_same_time_keeps_insertion_order(self):
        s = ManualScheduler()
        fired = []
        for name in "abc":
            s.call_later(10, lambda n=name: fired.append(n))
        s.advance(10)
        assert fired == ["a", "b", "c"]

    def test_nested_scheduling_within_advance(self):
        s = ManualScheduler()
        fired = []

        def first():
            fired.append(("first", s.now))
            s.call_later(20, lambda: fired.append(("second", s.now)))

        s.call_later(10, first)
        s.advance(30)
        assert fired == [("first", 10), ("second", 30)]

    def test_nested_past_window_waits(self):
        s = ManualScheduler()
        fired = []
        s.call_later(10, lambda: s.call_later(50, lambda: fired.append("late")))
        s.advance(30)
        assert fired == []
        assert s.pending == 1

    def test_negative_delay_runs_now(self):
        s = ManualScheduler()
        fired = []
        s.call_later(-5, lambda: fired.append(s.now))
        s.advance(0)
        assert fired == [0]

    def test_run_until_idle(self):
        s = ManualScheduler()
        fired = []
        s.call_later(500, lambda: fired.append(1))
        s.call_later(5, lambda: fired.append(0))
        s.run_until_idle()
        assert fired == [0, 1]
        assert s.now == 500
        assert s.pending == 0
