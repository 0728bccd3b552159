"""Tests for the Debouncer limiter."""

import logging

import pytest

from pacer.limiters.debounce import Debouncer


class TestDebouncerTrailing:
    def test_single_call_fires_after_wait(self, scheduler, record):
        d = Debouncer(record, 1.0, scheduler=scheduler)
        d("a")
        scheduler.advance(0.75)
        assert record.calls == []

        scheduler.advance(0.25)
        assert record.args == [("a",)]
        assert record.times == [1.0]

    def test_burst_fires_once_with_last_args(self, scheduler, record):
        d = Debouncer(record, 1.0, scheduler=scheduler)
        for i in range(5):
            d(i)
            scheduler.advance(0.5)

        assert record.calls == []
        scheduler.advance(0.5)
        assert record.args == [(4,)]
        # Last trigger was at t=2.0
        assert record.times == [3.0]

    def test_kwargs_forwarded(self, scheduler, record):
        d = Debouncer(record, 1.0, scheduler=scheduler)
        d(1, key="value")
        scheduler.advance(1.0)
        assert record.calls[0].kwargs == {"key": "value"}

    def test_return_value_is_none(self, scheduler, record):
        d = Debouncer(record, 1.0, scheduler=scheduler)
        assert d("a") is None
        scheduler.advance(1.0)
        assert d("b") is None

    def test_separate_bursts_fire_separately(self, scheduler, record):
        d = Debouncer(record, 1.0, scheduler=scheduler)
        d("first")
        scheduler.advance(2.0)
        d("second")
        scheduler.advance(2.0)
        assert record.args == [("first",), ("second",)]
        assert record.times == [1.0, 3.0]

    def test_zero_wait_fires_on_next_tick(self, scheduler, record):
        d = Debouncer(record, 0, scheduler=scheduler)
        d("a")
        scheduler.advance(0)
        assert record.args == [("a",)]

    def test_negative_wait_treated_as_zero(self, scheduler, record):
        d = Debouncer(record, -1.0, scheduler=scheduler)
        d("a")
        scheduler.advance(0)
        assert record.args == [("a",)]


class TestDebouncerImmediate:
    def test_first_call_fires_synchronously(self, scheduler, record):
        d = Debouncer(record, 1.0, immediate=True, scheduler=scheduler)
        assert d("a") == 1
        assert record.args == [("a",)]
        assert record.times == [0.0]

    def test_calls_within_burst_suppressed(self, scheduler, record):
        d = Debouncer(record, 1.0, immediate=True, scheduler=scheduler)
        d("a")
        scheduler.advance(0.5)
        assert d("b") == 1
        scheduler.advance(0.75)
        # Still inside the burst: "b" pushed the end out to t=1.5
        assert d("c") == 1
        assert record.args == [("a",)]

    def test_new_burst_after_quiet_period(self, scheduler, record):
        d = Debouncer(record, 1.0, immediate=True, scheduler=scheduler)
        d("a")
        scheduler.advance(0.5)
        d("b")
        scheduler.advance(1.0)
        assert d("c") == 2
        assert record.args == [("a",), ("c",)]

    def test_timer_does_not_invoke_callback(self, scheduler, record):
        d = Debouncer(record, 1.0, immediate=True, scheduler=scheduler)
        d("a")
        d("b")
        scheduler.advance(5.0)
        assert record.args == [("a",)]
        assert d.pending is False

    def test_stale_result_returned(self, scheduler):
        results = iter(["first", "second"])
        d = Debouncer(lambda: next(results), 1.0, immediate=True, scheduler=scheduler)
        assert d() == "first"
        assert d() == "first"
        scheduler.advance(1.0)
        assert d() == "second"

    def test_callback_error_propagates(self, scheduler):
        def boom():
            raise RuntimeError("boom")

        d = Debouncer(boom, 1.0, immediate=True, scheduler=scheduler)
        with pytest.raises(RuntimeError, match="boom"):
            d()


class TestDebouncerCancel:
    def test_cancel_drops_pending_call(self, scheduler, record):
        d = Debouncer(record, 1.0, scheduler=scheduler)
        d("a")
        d.cancel()
        scheduler.advance(5.0)
        assert record.calls == []
        assert scheduler.pending == 0

    def test_cancel_when_idle_is_noop(self, scheduler, record):
        d = Debouncer(record, 1.0, scheduler=scheduler)
        d.cancel()
        d.cancel()
        assert d.pending is False

    def test_cancel_is_idempotent_after_fire(self, scheduler, record):
        d = Debouncer(record, 1.0, scheduler=scheduler)
        d("a")
        scheduler.advance(1.0)
        d.cancel()
        d.cancel()
        assert record.args == [("a",)]

    def test_cancel_starts_new_burst_in_immediate_mode(self, scheduler, record):
        d = Debouncer(record, 10.0, immediate=True, scheduler=scheduler)
        d("a")
        scheduler.advance(0.25)
        d.cancel()
        assert d("b") == 2
        assert record.args == [("a",), ("b",)]

    def test_trigger_after_cancel_behaves_like_first(self, scheduler, record):
        d = Debouncer(record, 1.0, scheduler=scheduler)
        d("a")
        scheduler.advance(0.5)
        d.cancel()
        d("b")
        scheduler.advance(1.0)
        assert record.args == [("b",)]
        assert record.times == [1.5]


class TestDebouncerDeferredErrors:
    def test_failure_logged_and_other_timers_still_fire(self, scheduler, record, caplog):
        def boom():
            raise RuntimeError("boom")

        failing = Debouncer(boom, 1.0, scheduler=scheduler)
        healthy = Debouncer(record, 1.0, scheduler=scheduler)
        failing()
        healthy("ok")

        with caplog.at_level(logging.ERROR, logger="pacer"):
            scheduler.advance(1.0)

        assert "Deferred call" in caplog.text
        assert record.args == [("ok",)]
        assert failing.pending is False


class TestDebouncerState:
    def test_pending_tracks_timer(self, scheduler, record):
        d = Debouncer(record, 1.0, scheduler=scheduler)
        assert d.pending is False
        d("a")
        assert d.pending is True
        scheduler.advance(1.0)
        assert d.pending is False

    def test_instances_are_independent(self, scheduler, record):
        one = Debouncer(record, 1.0, scheduler=scheduler)
        two = Debouncer(record, 1.0, scheduler=scheduler)
        one("a")
        two("b")
        one.cancel()
        scheduler.advance(1.0)
        assert record.args == [("b",)]

    def test_reentrant_call_from_callback(self, scheduler):
        seen = []

        def callback(n):
            seen.append(n)
            if n < 2:
                d(n + 1)

        d = Debouncer(callback, 1.0, scheduler=scheduler)
        d(0)
        scheduler.advance(1.0)
        assert seen == [0]
        assert d.pending is True
        scheduler.advance(2.0)
        assert seen == [0, 1, 2]

    def test_repr(self, scheduler):
        def handler():
            pass

        d = Debouncer(handler, 1.0, immediate=True, scheduler=scheduler)
        r = repr(d)
        assert r.startswith("Debouncer(")
        assert "handler" in r
        assert "wait=1.0" in r
        assert "immediate=True" in r
        assert "pending=False" in r
