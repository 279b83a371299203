"""Motor de alertas críticas por umbral.

Mantiene la cola de alertas activa y el flag de visibilidad del modal.
Cada operación devuelve un snapshot inmutable nuevo (AlertQueue).

Política de evaluación:
- Cada pasada REEMPLAZA la lista activa con lo que producen las reglas.
- Lista no vacía -> se fuerza modal_visible = True.
- Lista vacía -> se limpia la cola; la visibilidad del modal no se fuerza.

Identidad de alerta por condición: el id se deriva de (métrica, regla,
dirección). Una condición que persiste entre pasadas conserva su id y la
hora en que se levantó; el valor y los textos siguen a la última muestra.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional, Union

from ..domain.models import Alert, AlertQueue
from ..domain.sample import TelemetrySample
from .rules import HARD_THRESHOLD_RULES, ThresholdBreach

logger = logging.getLogger(__name__)

LatestInput = Union[TelemetrySample, Mapping[str, Any], None]


def _display_time(now: datetime) -> str:
    return now.strftime("%H:%M:%S")


def _raw_value(latest: LatestInput, metric_key: str):
    if latest is None:
        return None
    if isinstance(latest, TelemetrySample):
        return getattr(latest, metric_key)
    return latest.get(metric_key)


class AlertEngine:
    """Dueño exclusivo de la cola de alertas."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or datetime.now
        self._queue = AlertQueue()

    @property
    def queue(self) -> AlertQueue:
        return self._queue

    def _to_alert(self, breach: ThresholdBreach, raised_at: str) -> Alert:
        return Alert(
            id=breach.condition_id,
            metric=breach.metric_title,
            metric_key=breach.metric_key,
            severity=breach.severity,
            direction=breach.direction,
            message=breach.message,
            current_value=breach.current_value,
            threshold=breach.threshold,
            description=breach.description,
            timestamp=raised_at,
        )

    def evaluate(self, latest: LatestInput) -> AlertQueue:
        """Evalúa la muestra más reciente contra los umbrales duros."""
        previous = {a.id: a for a in self._queue.alerts}
        now_display = _display_time(self._clock())

        current_alerts: List[Alert] = []
        for rule in HARD_THRESHOLD_RULES:
            breach = rule.check(_raw_value(latest, rule.metric_key))
            if breach is None:
                continue
            ongoing = previous.get(breach.condition_id)
            raised_at = ongoing.timestamp if ongoing is not None else now_display
            current_alerts.append(self._to_alert(breach, raised_at))
            if ongoing is None:
                logger.warning(
                    "[AlertEngine] RAISED id=%s value=%s threshold=%s",
                    breach.condition_id, breach.current_value, breach.threshold,
                )

        cleared = set(previous) - {a.id for a in current_alerts}
        for alert_id in sorted(cleared):
            logger.info("[AlertEngine] CLEARED id=%s", alert_id)

        if current_alerts:
            self._queue = AlertQueue(alerts=tuple(current_alerts), modal_visible=True)
        else:
            self._queue = AlertQueue(alerts=(), modal_visible=self._queue.modal_visible)
        return self._queue

    def dismiss(self, alert_id: str) -> AlertQueue:
        """Quita una alerta por id; si la cola queda vacía se cierra el modal."""
        remaining = tuple(a for a in self._queue.alerts if a.id != alert_id)
        if len(remaining) != len(self._queue.alerts):
            logger.info("[AlertEngine] DISMISSED id=%s", alert_id)

        modal_visible = self._queue.modal_visible if remaining else False
        self._queue = AlertQueue(alerts=remaining, modal_visible=modal_visible)
        return self._queue

    def dismiss_all(self) -> AlertQueue:
        if self._queue.alerts:
            logger.info("[AlertEngine] DISMISSED_ALL count=%d", len(self._queue.alerts))
        self._queue = AlertQueue(alerts=(), modal_visible=False)
        return self._queue

    def set_modal_visible(self, visible: bool) -> AlertQueue:
        """Abre/cierra el modal sin tocar la lista de alertas."""
        self._queue = self._queue.with_modal(visible)
        return self._queue
