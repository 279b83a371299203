"""Reglas de umbral duro para alertas críticas.

Se evalúan sobre el valor ACTUAL de la métrica (no sobre la serie) y son
independientes de la varianza estadística. Las usan tanto la cola de alertas
como el indicador inline de cada tarjeta, para que nunca muestren estados
contradictorios.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..common.numeric_precision import parse_sensor_value
from ..domain.models import AlertDirection

CRITICAL = "critical"


@dataclass(frozen=True)
class ThresholdBreach:
    """Violación de un umbral duro detectada en el valor actual."""

    metric_key: str
    metric_title: str
    rule: str
    direction: AlertDirection
    value: float
    headline: str
    message: str
    current_value: str
    threshold: str
    description: str
    severity: str = CRITICAL

    @property
    def condition_id(self) -> str:
        """Identidad estable de la condición: (métrica, regla, dirección)."""
        return f"{self.metric_key}:{self.rule}:{self.direction.lower()}"


class OilLevelRule:
    """Regla de nivel de aceite.

    Regla estricta: alerta siempre que el nivel sea distinto de 20%
    (igualdad exacta, no hay banda de tolerancia).
    """

    metric_key = "oilLevel"
    metric_title = "Oil Level"
    rule = "level"
    TARGET = 20.0

    def check(self, raw_value) -> Optional[ThresholdBreach]:
        value = parse_sensor_value(raw_value)
        if value is None or value == self.TARGET:
            return None

        is_below = value < self.TARGET
        direction: AlertDirection = "LOW" if is_below else "HIGH"
        headline = f"🛢️ Oil Level {direction} ALERT"
        return ThresholdBreach(
            metric_key=self.metric_key,
            metric_title=self.metric_title,
            rule=self.rule,
            direction=direction,
            value=value,
            headline=headline,
            message=f"{headline}: {value:.1f}% (threshold 20%)",
            current_value=f"{value:.1f}%",
            threshold="20%",
            description=(
                f"Oil level is {value:.1f}% ({'below' if is_below else 'above'} threshold 20%)"
            ),
        )


class AngleRule:
    """Regla de ángulo: alerta fuera del rango cerrado [-3.5°, 3.5°]."""

    metric_key = "angle"
    metric_title = "Angle"
    rule = "range"
    LOWER = -3.5
    UPPER = 3.5

    def check(self, raw_value) -> Optional[ThresholdBreach]:
        value = parse_sensor_value(raw_value)
        if value is None or self.LOWER <= value <= self.UPPER:
            return None

        is_below = value < self.LOWER
        direction: AlertDirection = "LOW" if is_below else "HIGH"
        headline = f"📐 Angle {direction} ALERT"
        return ThresholdBreach(
            metric_key=self.metric_key,
            metric_title=self.metric_title,
            rule=self.rule,
            direction=direction,
            value=value,
            headline=headline,
            message=f"{headline}: {value:.2f}° (normal range -3.5° to 3.5°)",
            current_value=f"{value:.2f}°",
            threshold="Normal range: -3.5° to 3.5°",
            description=(
                f"Angle is {value:.2f}° ({'below -3.5°' if is_below else 'above 3.5°'} threshold)"
            ),
        )


HARD_THRESHOLD_RULES: Tuple[OilLevelRule | AngleRule, ...] = (OilLevelRule(), AngleRule())


def rule_for(metric_key: str):
    for rule in HARD_THRESHOLD_RULES:
        if rule.metric_key == metric_key:
            return rule
    return None
