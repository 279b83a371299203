"""Sesión de monitoreo: FUENTE ÚNICA DE VERDAD del estado en memoria.

Estado de la sesión:
- serie de muestras (solo append, orden de llegada)
- snapshot de la muestra más reciente
- mapa de insights por métrica
- estadísticos por métrica
- cola de alertas (delegada a AlertEngine)

Cada publicación ejecuta append + clasificación + estadísticos + evaluación
de alertas como UNA unidad atómica (único escritor, lock interno): ninguna
lectura observa una serie a medio actualizar y las alertas siempre reflejan
la última muestra publicada.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..alerts.badges import get_metric_alert
from ..alerts.engine import AlertEngine
from ..analytics.statistics import compute_statistics
from ..analytics.suggestion_catalog import SuggestionCatalog, get_default_catalog
from ..analytics.trend_classifier import classify_all
from ..domain.metrics import METRICS, get_metric
from ..domain.models import AlertQueue, MetricAlertBadge, MetricStats, TrendInsight
from ..domain.sample import TelemetrySample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Vista inmutable del estado de la sesión tras una publicación."""

    samples: Tuple[TelemetrySample, ...] = ()
    latest: Optional[TelemetrySample] = None
    insights: Dict[str, Optional[TrendInsight]] = field(default_factory=dict)
    statistics: Dict[str, MetricStats] = field(default_factory=dict)
    alerts: AlertQueue = field(default_factory=AlertQueue)

    @property
    def sample_count(self) -> int:
        return len(self.samples)

    def available_insights(self) -> Dict[str, TrendInsight]:
        return {m: i for m, i in self.insights.items() if i is not None}


class MonitoringSession:
    """Sesión de monitoreo de un equipo (memoria de proceso, sin persistencia)."""

    def __init__(
        self,
        engine: Optional[AlertEngine] = None,
        catalog: Optional[SuggestionCatalog] = None,
    ) -> None:
        self._engine = engine or AlertEngine()
        self._catalog = catalog or get_default_catalog()
        self._samples: List[TelemetrySample] = []
        self._lock = threading.Lock()
        self._snapshot = SessionSnapshot(alerts=self._engine.queue)

    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    @property
    def sample_count(self) -> int:
        return self._snapshot.sample_count

    def publish(self, sample: TelemetrySample) -> SessionSnapshot:
        """Publica una muestra nueva y recalcula todo el estado derivado."""
        return self.publish_many((sample,))

    def publish_many(self, samples: Iterable[TelemetrySample]) -> SessionSnapshot:
        """Publica varias muestras con un único recálculo.

        Lista vacía: no-op, devuelve el snapshot actual.
        """
        new_samples = list(samples)
        if not new_samples:
            return self._snapshot

        with self._lock:
            self._samples.extend(new_samples)
            series = tuple(self._samples)
            latest = series[-1]

            insights = classify_all(series, self._catalog)
            statistics = compute_statistics(series, latest)
            alerts = self._engine.evaluate(latest)

            self._snapshot = SessionSnapshot(
                samples=series,
                latest=latest,
                insights=insights,
                statistics=statistics,
                alerts=alerts,
            )

        abnormal = [m for m, i in insights.items() if i is not None and i.is_abnormal]
        logger.info(
            "[Session] published=%d total=%d abnormal=%s alerts=%d",
            len(new_samples), len(series), abnormal or "-", len(alerts),
        )
        return self._snapshot

    def _replace_alerts(self, alerts: AlertQueue) -> AlertQueue:
        current = self._snapshot
        self._snapshot = SessionSnapshot(
            samples=current.samples,
            latest=current.latest,
            insights=current.insights,
            statistics=current.statistics,
            alerts=alerts,
        )
        return alerts

    def dismiss_alert(self, alert_id: str) -> AlertQueue:
        with self._lock:
            return self._replace_alerts(self._engine.dismiss(alert_id))

    def dismiss_all_alerts(self) -> AlertQueue:
        with self._lock:
            return self._replace_alerts(self._engine.dismiss_all())

    def set_modal_visible(self, visible: bool) -> AlertQueue:
        with self._lock:
            return self._replace_alerts(self._engine.set_modal_visible(visible))

    def series(self, metric: str) -> List[float]:
        """Serie de una métrica en orden de llegada."""
        key = get_metric(metric).key
        return [getattr(s, key) for s in self._snapshot.samples]

    def metric_alert(self, metric: str) -> Optional[MetricAlertBadge]:
        """Badge inline para el valor actual de ``metric``."""
        latest = self._snapshot.latest
        if latest is None:
            return None
        return get_metric_alert(metric, latest.value(metric))

    def metric_alerts(self) -> Dict[str, MetricAlertBadge]:
        badges: Dict[str, MetricAlertBadge] = {}
        for metric in METRICS:
            badge = self.metric_alert(metric)
            if badge is not None:
                badges[metric] = badge
        return badges
