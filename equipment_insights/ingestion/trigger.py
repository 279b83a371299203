"""Disparador de ingesta periódica.

Cada ciclo obtiene la tabla completa desde la fuente (hoja/CSV) y publica en
la sesión solo las filas nuevas desde el ciclo anterior. Mientras hay un
reporte en curso el ciclo se salta.
"""

from __future__ import annotations

import argparse
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..common.config import get_settings
from ..common.logging_config import configure_logging
from ..domain.sample import TelemetrySample
from ..session.monitoring_session import MonitoringSession
from .report_guard import ReportGuard

logger = logging.getLogger(__name__)

FetchFn = Callable[[], Sequence[TelemetrySample]]


@dataclass(frozen=True)
class PollResult:
    """Resultado de un ciclo de ingesta."""

    fetched: int = 0
    published: int = 0
    skipped: bool = False
    error: Optional[str] = None


class IngestionTrigger:
    def __init__(
        self,
        fetch: FetchFn,
        session: MonitoringSession,
        guard: Optional[ReportGuard] = None,
    ) -> None:
        self._fetch = fetch
        self._session = session
        self._guard = guard or ReportGuard()
        self._seen = session.sample_count

    @property
    def guard(self) -> ReportGuard:
        return self._guard

    def fire(self) -> PollResult:
        """Ejecuta un ciclo de ingesta. Nunca propaga errores de la fuente."""
        if self._guard.is_reporting:
            logger.info("[Ingestion] Auto-refresh paused - report in progress")
            return PollResult(skipped=True)

        try:
            rows = list(self._fetch())
        except Exception as e:
            logger.exception("[Ingestion] Fetch failed: %s", e)
            return PollResult(error=f"{type(e).__name__}: {e}")

        if len(rows) < self._seen:
            # La fuente se reinició/truncó: se publica todo lo que trae
            logger.warning(
                "[Ingestion] Source shrank from %d to %d rows; republishing", self._seen, len(rows)
            )
            self._seen = 0

        new_rows = rows[self._seen:]
        if new_rows:
            self._session.publish_many(new_rows)
        self._seen = len(rows)

        logger.info("[Ingestion] fetched=%d published=%d", len(rows), len(new_rows))
        return PollResult(fetched=len(rows), published=len(new_rows))

    def run(self, stop_event: threading.Event, interval_seconds: float) -> None:
        """Bucle de polling hasta que ``stop_event`` se active."""
        logger.info("[Ingestion] Poll loop started interval=%.1fs", interval_seconds)
        while not stop_event.is_set():
            self.fire()
            stop_event.wait(interval_seconds)
        logger.info("[Ingestion] Poll loop stopped")


def main() -> None:
    from ..tabular.rows import load_csv

    settings = get_settings()
    configure_logging(settings.log_level)

    p = argparse.ArgumentParser(description="Telemetry poll runner (CSV export of the equipment sheet)")
    p.add_argument("--csv", default=settings.telemetry_csv_path, help="path to the CSV export")
    p.add_argument("--interval", type=float, default=settings.poll_interval_seconds)
    p.add_argument("--once", action="store_true", help="run a single poll and exit")
    args = p.parse_args()

    if not args.csv:
        p.error("--csv or TELEMETRY_CSV_PATH is required")

    session = MonitoringSession()
    trigger = IngestionTrigger(lambda: load_csv(args.csv), session)

    if args.once:
        result = trigger.fire()
        snapshot = session.snapshot()
        logger.info("Poll result: %s", result)
        for alert in snapshot.alerts.alerts:
            logger.warning("ALERT %s", alert.message)
        return

    stop_event = threading.Event()
    try:
        trigger.run(stop_event, args.interval)
    except KeyboardInterrupt:
        stop_event.set()


if __name__ == "__main__":
    main()
