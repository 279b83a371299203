"""Datos del reporte de salud del equipo (sin renderizado).

Arma las secciones que el generador de documentos consume: resumen
histórico, tabla de estadísticos, estado actual, alertas e insights. Los
estadísticos salen de ``compute_statistics`` igual que en la vista en vivo.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List, Optional, Tuple

from ..analytics.statistics import compute_statistics
from ..analytics.status import status_for
from ..domain.metrics import METRIC_INFO
from ..domain.models import Alert
from ..session.monitoring_session import SessionSnapshot

STATS_HEADERS: Tuple[str, ...] = ("Parameter", "Current", "Minimum", "Maximum", "Average", "Status")


@dataclass(frozen=True)
class StatisticsRow:
    parameter: str
    current: str
    minimum: str
    maximum: str
    average: str
    status: str

    def as_cells(self) -> List[str]:
        return [self.parameter, self.current, self.minimum, self.maximum, self.average, self.status]


@dataclass(frozen=True)
class CurrentStatusItem:
    metric: str
    title: str
    value: str
    unit: str
    status: str


@dataclass(frozen=True)
class InsightLine:
    metric: str
    headline: str
    rate_of_change: str
    is_abnormal: bool


@dataclass(frozen=True)
class ReportSummary:
    data_points: int
    period_start: Optional[str]
    period_end: Optional[str]
    latest_timestamp: Optional[str]
    statistics: List[StatisticsRow] = field(default_factory=list)
    current_status: List[CurrentStatusItem] = field(default_factory=list)
    alerts: List[Alert] = field(default_factory=list)
    insights: List[InsightLine] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def _fmt(value: Optional[float], decimals: int) -> str:
    if value is None:
        return "—"
    return f"{value:.{decimals}f}"


def build_report_summary(snapshot: SessionSnapshot) -> ReportSummary:
    samples = snapshot.samples
    latest = snapshot.latest
    if not samples or latest is None:
        return ReportSummary(data_points=0, period_start=None, period_end=None, latest_timestamp=None)

    stats = compute_statistics(samples, latest)

    rows: List[StatisticsRow] = []
    current_status: List[CurrentStatusItem] = []
    for info in METRIC_INFO:
        value = getattr(latest, info.key)
        current_status.append(
            CurrentStatusItem(
                metric=info.key,
                title=info.title,
                value=_fmt(value, info.display_decimals),
                unit=info.unit,
                status=status_for(info.key, value),
            )
        )

        metric_stats = stats.get(info.key)
        if metric_stats is None:
            continue
        rows.append(
            StatisticsRow(
                parameter=info.title,
                current=_fmt(metric_stats.current, info.display_decimals),
                minimum=_fmt(metric_stats.min, 2),
                maximum=_fmt(metric_stats.max, 2),
                average=_fmt(metric_stats.avg, 2),
                status=status_for(info.key, metric_stats.current),
            )
        )

    insight_lines = [
        InsightLine(
            metric=metric,
            headline=insight.headline,
            rate_of_change=insight.rate_of_change,
            is_abnormal=insight.is_abnormal,
        )
        for metric, insight in snapshot.available_insights().items()
    ]

    return ReportSummary(
        data_points=len(samples),
        period_start=samples[0].date or None,
        period_end=samples[-1].date or None,
        latest_timestamp=latest.timestamp or None,
        statistics=rows,
        current_status=current_status,
        alerts=list(snapshot.alerts.alerts),
        insights=insight_lines,
    )
