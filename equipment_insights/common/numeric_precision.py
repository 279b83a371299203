"""Funciones canónicas de precisión numérica.

Política de precisión:
- Cálculos internos: Python float (IEEE 754 double)
- Redondeo: SOLO en frontera (UI / reporte), nunca en cálculos intermedios
- Valores no numéricos o no finitos nunca llegan a texto visible por el usuario
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

# Precisión de las estadísticas mostradas (min/max/avg)
DISPLAY_PRECISION = 2

# Por debajo de este valor absoluto se considera 0 (evita división por cero)
ZERO_EPSILON = 1e-10


def safe_float(value, default: float = 0.0) -> float:
    """Convierte un valor a float con validación de NaN/Infinity.

    Args:
        value: Valor a convertir (puede ser None, str, Decimal, etc.)
        default: Valor por defecto si es inválido

    Returns:
        Float válido o default si el valor es None, NaN o Infinity
    """
    if value is None:
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        f = float(value)
        if not math.isfinite(f):
            return default
        return f
    except (TypeError, ValueError):
        return default


def is_valid_sensor_value(value) -> bool:
    """True si el valor es un número finito válido."""
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return False
    try:
        f = float(value)
        return math.isfinite(f)
    except (TypeError, ValueError):
        return False


def parse_sensor_value(value) -> Optional[float]:
    """Devuelve el valor como float o None si no es un número finito."""
    if not is_valid_sensor_value(value):
        return None
    return float(value.strip() if isinstance(value, str) else value)


def filter_valid_values(values: Iterable) -> List[float]:
    """Filtra una secuencia dejando solo valores válidos (finitos)."""
    return [safe_float(v) for v in values if is_valid_sensor_value(v)]


def round_for_display(value: float, decimals: int = DISPLAY_PRECISION) -> float:
    """Redondea un valor a la precisión de display.

    USAR SOLO para display en UI o reporte, nunca para cálculos intermedios.
    """
    if not math.isfinite(value):
        return value
    factor = 10 ** decimals
    return round(value * factor) / factor


def compute_relative_change_pct(current: float, first: float) -> float:
    """Cambio relativo en porcentaje ((current - first) / first * 100).

    Si ``first`` es 0 (o prácticamente 0) devuelve 0.0 en lugar de
    propagar Infinity/NaN.
    """
    if not math.isfinite(current) or not math.isfinite(first):
        return 0.0
    if abs(first) < ZERO_EPSILON:
        return 0.0
    if current == first:
        # evita "-0.0" con valores negativos constantes
        return 0.0
    return (current - first) / first * 100.0


def compute_mean(values: List[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


def compute_population_std(values: List[float]) -> float:
    """Desviación estándar poblacional (sin Bessel, divide por n)."""
    if len(values) < 2:
        return 0.0
    mean = compute_mean(values)
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))
