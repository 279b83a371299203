"""Indicador de alerta inline por tarjeta de métrica.

Aplica exactamente las mismas reglas que AlertEngine, pero devuelve un único
objeto de presentación (icono/color/descripción) independiente de la cola.
"""

from __future__ import annotations

from typing import Optional

from ..domain.metrics import resolve_metric
from ..domain.models import MetricAlertBadge
from .rules import rule_for


def get_metric_alert(metric: str, value) -> Optional[MetricAlertBadge]:
    """Badge para ``metric`` con el valor actual, o None si no hay alerta.

    ``metric`` acepta clave canónica ("oilLevel") o título ("Oil Level").
    Solo Oil Level y Angle tienen umbral duro.
    """
    info = resolve_metric(metric)
    if info is None:
        return None

    rule = rule_for(info.key)
    if rule is None:
        return None

    breach = rule.check(value)
    if breach is None:
        return None

    return MetricAlertBadge(
        type="low" if breach.direction == "LOW" else "high",
        message=breach.headline,
        description=breach.description,
    )
