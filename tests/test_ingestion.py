"""Tests del disparador de ingesta y del guard de reporte."""

from __future__ import annotations

import threading

import pytest

from equipment_insights.ingestion.report_guard import ReportGuard
from equipment_insights.ingestion.trigger import IngestionTrigger, PollResult
from equipment_insights.session.monitoring_session import MonitoringSession


class FakeSource:
    """Fuente en memoria que devuelve la tabla completa en cada fetch."""

    def __init__(self, rows=None):
        self.rows = list(rows or [])
        self.calls = 0
        self.error = None

    def __call__(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.rows)


@pytest.fixture
def session() -> MonitoringSession:
    return MonitoringSession()


# =============================================================================
# TEST 1: CICLO DE INGESTA
# =============================================================================

class TestFire:

    def test_publishes_only_new_rows(self, session, make_sample):
        source = FakeSource([make_sample(), make_sample()])
        trigger = IngestionTrigger(source, session)

        assert trigger.fire() == PollResult(fetched=2, published=2)

        source.rows.append(make_sample(oilLevel=12.5))
        result = trigger.fire()

        assert result == PollResult(fetched=3, published=1)
        assert session.sample_count == 3
        assert len(session.snapshot().alerts) == 1

    def test_no_new_rows_leaves_session_untouched(self, session, make_sample):
        source = FakeSource([make_sample()])
        trigger = IngestionTrigger(source, session)
        trigger.fire()
        before = session.snapshot()

        result = trigger.fire()

        assert result.published == 0
        assert session.snapshot() is before

    def test_starts_after_rows_already_in_session(self, session, make_sample):
        rows = [make_sample(), make_sample()]
        session.publish_many(rows)
        source = FakeSource(rows + [make_sample()])

        result = IngestionTrigger(source, session).fire()

        assert result.published == 1
        assert session.sample_count == 3

    def test_source_shrink_republishes_all(self, session, make_sample):
        source = FakeSource([make_sample(), make_sample(), make_sample()])
        trigger = IngestionTrigger(source, session)
        trigger.fire()

        source.rows = [make_sample()]
        result = trigger.fire()

        assert result == PollResult(fetched=1, published=1)
        assert session.sample_count == 4

    def test_fetch_error_is_reported_not_raised(self, session, make_sample):
        source = FakeSource([make_sample()])
        source.error = ConnectionError("sheet unavailable")
        trigger = IngestionTrigger(source, session)

        result = trigger.fire()

        assert result.error == "ConnectionError: sheet unavailable"
        assert result.published == 0
        assert session.sample_count == 0

    def test_skipped_while_reporting(self, session, make_sample):
        source = FakeSource([make_sample()])
        guard = ReportGuard()
        trigger = IngestionTrigger(source, session, guard)

        with guard.hold():
            result = trigger.fire()

        assert result.skipped is True
        assert source.calls == 0
        assert session.sample_count == 0

        assert trigger.fire().published == 1


# =============================================================================
# TEST 2: BUCLE DE POLLING
# =============================================================================

class TestRunLoop:

    def test_stops_when_event_is_set(self, session, make_sample):
        stop = threading.Event()

        def fetch():
            stop.set()
            return [make_sample()]

        IngestionTrigger(fetch, session).run(stop, interval_seconds=0.01)

        assert session.sample_count == 1


# =============================================================================
# TEST 3: REPORT GUARD
# =============================================================================

class TestReportGuard:

    def test_hold_resets_on_exception(self):
        guard = ReportGuard()

        with pytest.raises(RuntimeError):
            with guard.hold():
                assert guard.is_reporting is True
                raise RuntimeError("render failed")

        assert guard.is_reporting is False

    def test_begin_end(self):
        guard = ReportGuard()
        guard.begin()
        assert guard.is_reporting
        guard.end()
        assert not guard.is_reporting
