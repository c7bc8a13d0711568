"""Tests for the QTimer based debouncer."""

from PySide6.QtTest import QTest

from charstyle.core.debounce import Debouncer


class TestDebouncer:
    def test_burst_collapses_to_last_call(self):
        calls = []
        debouncer = Debouncer(lambda value: calls.append(value), interval_ms=20)
        for i in range(5):
            debouncer.trigger(i)

        assert debouncer.is_pending()
        QTest.qWait(150)

        assert calls == [4]
        assert not debouncer.is_pending()

    def test_flush_delivers_immediately(self):
        calls = []
        debouncer = Debouncer(lambda *args, **kwargs: calls.append((args, kwargs)), interval_ms=10_000)
        debouncer.trigger("a", key="b")
        debouncer.flush()
        assert calls == [(("a",), {"key": "b"})]

        # Timer was stopped, nothing fires later
        QTest.qWait(30)
        assert len(calls) == 1

    def test_flush_without_pending_is_noop(self):
        calls = []
        debouncer = Debouncer(lambda: calls.append(1))
        debouncer.flush()
        assert calls == []

    def test_cancel(self):
        calls = []
        debouncer = Debouncer(lambda: calls.append(1), interval_ms=10)
        debouncer.trigger()
        debouncer.cancel()
        QTest.qWait(60)
        assert calls == []
        assert not debouncer.is_pending()

    def test_fired_signal(self):
        fired = []
        debouncer = Debouncer(lambda: None, interval_ms=10)
        debouncer.fired.connect(lambda: fired.append(True))
        debouncer.trigger()
        debouncer.flush()
        assert fired == [True]

    def test_interval(self):
        assert Debouncer(lambda: None, interval_ms=250).interval == 250
