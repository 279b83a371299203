"""Muestra de telemetría del equipo.

Este modelo es el contrato entre la ingesta (hoja/CSV/HTTP) y el motor de
análisis. Regla: cualquier valor de métrica que no parsee como número finito
se guarda como 0; la muestra es inmutable una vez creada.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

from ..common.numeric_precision import safe_float
from .metrics import METRICS, get_metric


@dataclass(frozen=True)
class TelemetrySample:
    """Lectura del equipo con las ocho métricas."""

    timestamp: str
    date: str
    temperature: float = 0.0
    humidity: float = 0.0
    oilLevel: float = 0.0
    voltage: float = 0.0
    current: float = 0.0
    power: float = 0.0
    energy: float = 0.0
    angle: float = 0.0

    def __post_init__(self) -> None:
        for metric in METRICS:
            object.__setattr__(self, metric, safe_float(getattr(self, metric), 0.0))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TelemetrySample":
        """Construye la muestra forzando a 0 los valores no numéricos."""
        values = {metric: safe_float(data.get(metric), 0.0) for metric in METRICS}
        return cls(
            timestamp=str(data.get("timestamp") or ""),
            date=str(data.get("date") or ""),
            **values,
        )

    def value(self, metric: str) -> float:
        return getattr(self, get_metric(metric).key)

    def metric_values(self) -> Dict[str, float]:
        return {metric: getattr(self, metric) for metric in METRICS}

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
