"""Catálogo de métricas de telemetría del equipo.

Las claves canónicas son las del payload de telemetría (camelCase).
El título es el que usa la capa de presentación (tarjetas y reporte).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class MetricInfo:
    key: str
    title: str
    unit: str
    display_decimals: int = 1


METRIC_INFO: Tuple[MetricInfo, ...] = (
    MetricInfo("temperature", "Temperature", "°C"),
    MetricInfo("humidity", "Humidity", "%"),
    MetricInfo("oilLevel", "Oil Level", "%"),
    MetricInfo("voltage", "Voltage", "V"),
    MetricInfo("current", "Current", "mA", display_decimals=0),
    MetricInfo("power", "Power", "mW", display_decimals=0),
    MetricInfo("energy", "Energy", "Wh", display_decimals=3),
    MetricInfo("angle", "Angle", "°"),
)

# Orden canónico de métricas
METRICS: Tuple[str, ...] = tuple(m.key for m in METRIC_INFO)

_BY_KEY: Dict[str, MetricInfo] = {m.key: m for m in METRIC_INFO}
_BY_TITLE: Dict[str, MetricInfo] = {m.title.lower(): m for m in METRIC_INFO}


class UnknownMetricError(KeyError):
    """La métrica solicitada no forma parte del catálogo."""


def resolve_metric(name: str) -> Optional[MetricInfo]:
    """Resuelve una métrica por clave canónica o por título ("Oil Level")."""
    if not name:
        return None
    info = _BY_KEY.get(name)
    if info is not None:
        return info
    return _BY_TITLE.get(name.strip().lower())


def get_metric(name: str) -> MetricInfo:
    info = resolve_metric(name)
    if info is None:
        raise UnknownMetricError(name)
    return info
