"""Indicador de estado Normal/Warning por rango operativo de cada métrica."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal

from ..common.numeric_precision import safe_float

Status = Literal["Normal", "Warning"]


@dataclass(frozen=True)
class NormalRange:
    min_value: float
    max_value: float
    use_abs: bool = False  # el ángulo se evalúa en valor absoluto


NORMAL_RANGES: Dict[str, NormalRange] = {
    "temperature": NormalRange(20, 30),
    "humidity": NormalRange(40, 80),
    "oilLevel": NormalRange(20, 100),
    "voltage": NormalRange(8, 12),
    "current": NormalRange(50, 300),
    "power": NormalRange(500, 2500),
    "energy": NormalRange(0, 1000),
    "angle": NormalRange(0, 45, use_abs=True),
}


def status_for(metric: str, value) -> Status:
    """'Warning' si el valor cae fuera del rango operativo, si no 'Normal'.

    Valores no numéricos cuentan como 0. Métricas sin rango: siempre Normal.
    """
    normal = NORMAL_RANGES.get(metric)
    if normal is None:
        return "Normal"

    v = safe_float(value, 0.0)
    if normal.use_abs:
        v = abs(v)
    if v < normal.min_value or v > normal.max_value:
        return "Warning"
    return "Normal"
