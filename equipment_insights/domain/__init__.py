"""Modelos de dominio: métricas, muestras y resultados derivados."""

from .metrics import METRICS, METRIC_INFO, MetricInfo, UnknownMetricError, get_metric, resolve_metric
from .models import Alert, AlertQueue, MetricAlertBadge, MetricStats, TrendInsight
from .sample import TelemetrySample

__all__ = [
    "METRICS",
    "METRIC_INFO",
    "MetricInfo",
    "UnknownMetricError",
    "get_metric",
    "resolve_metric",
    "Alert",
    "AlertQueue",
    "MetricAlertBadge",
    "MetricStats",
    "TrendInsight",
    "TelemetrySample",
]
