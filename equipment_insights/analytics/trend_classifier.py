"""Clasificador de tendencia por métrica.

Sobre las últimas lecturas de una métrica (ventana de hasta 5 puntos) calcula:
- tendencia firmada (último - primero)
- anormalidad: |último - media| > multiplicador(métrica) * desviación estándar
- tasa de cambio en porcentaje
- estimación de horas hasta un cambio significativo (extrapolación lineal)

y elige las sugerencias del catálogo según la dirección.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional, Sequence, Union

from ..common.numeric_precision import (
    compute_mean,
    compute_population_std,
    compute_relative_change_pct,
    safe_float,
)
from ..domain.metrics import METRICS, resolve_metric
from ..domain.models import Trend, TrendInsight
from ..domain.sample import TelemetrySample
from .suggestion_catalog import SuggestionCatalog, get_default_catalog

logger = logging.getLogger(__name__)

TREND_WINDOW_SIZE = 5
MIN_SAMPLES = 2

# Sensibilidad por métrica (fija, no configurable en runtime)
SENSITIVITY_MULTIPLIERS: Mapping[str, float] = {
    "temperature": 2.0,
    "humidity": 2.0,
    "voltage": 1.5,
    "current": 2.0,
    "oilLevel": 1.5,
    "power": 2.5,  # la potencia fluctúa más
    "energy": 2.0,
    "angle": 1.2,  # más sensible a cambios de ángulo
}
DEFAULT_MULTIPLIER = 2.0

# |tasa de cambio| a partir de la cual se añade la predicción
PREDICTION_RATE_THRESHOLD = 10.0
HOURS_PER_DAY = 24.0

SeriesInput = Sequence[Union[TelemetrySample, float, int, str, None]]


def sensitivity_for(metric: str) -> float:
    return SENSITIVITY_MULTIPLIERS.get(metric, DEFAULT_MULTIPLIER)


def _project(series: SeriesInput, metric: str) -> list[float]:
    values: list[float] = []
    for item in series:
        raw = getattr(item, metric, None) if isinstance(item, TelemetrySample) else item
        values.append(safe_float(raw, 0.0))
    return values


def _direction(trend: float) -> Trend:
    if trend > 0:
        return "up"
    if trend < 0:
        return "down"
    return "stable"


def format_rate_label(rate_pct: float) -> str:
    return f"{rate_pct:.1f}%/hour"


def predicted_hours_for(rate_pct: float) -> Optional[float]:
    """Horas hasta un cambio del 100% extrapolando la tasa actual."""
    if rate_pct == 0:
        return None
    return abs(100.0 / rate_pct) * HOURS_PER_DAY


def classify(
    series: SeriesInput,
    metric: str,
    catalog: Optional[SuggestionCatalog] = None,
) -> Optional[TrendInsight]:
    """Clasifica la tendencia reciente de ``metric``.

    Devuelve None si hay menos de 2 lecturas. ``series`` puede ser una
    secuencia de TelemetrySample o de valores crudos de la métrica.
    """
    if not series or len(series) < MIN_SAMPLES:
        return None

    # Acepta clave o título; una métrica fuera del catálogo se lee como 0
    info = resolve_metric(metric)
    if info is not None:
        metric = info.key

    catalog = catalog or get_default_catalog()
    window = _project(series[-TREND_WINDOW_SIZE:], metric)

    first = window[0]
    last = window[-1]
    trend = last - first
    avg_value = compute_mean(window)
    std_dev = compute_population_std(window)

    # Con std_dev == 0 el umbral es 0 y una desviación 0 nunca lo supera
    multiplier = sensitivity_for(metric)
    is_abnormal = std_dev > 0 and abs(last - avg_value) > multiplier * std_dev

    rate_pct = compute_relative_change_pct(last, first)

    predicted_hours: Optional[float] = None
    if is_abnormal:
        kind = "high" if trend > 0 else "low"
        suggestion = list(catalog.suggestions(metric, kind))
        if abs(rate_pct) > PREDICTION_RATE_THRESHOLD:
            predicted_hours = predicted_hours_for(rate_pct)
            suggestion.append(f"{catalog.prediction_phrase(metric)} {predicted_hours:.1f} hours.")
        logger.debug(
            "[TrendClassifier] metric=%s abnormal trend=%.4f rate=%.1f%% window=%d",
            metric, trend, rate_pct, len(window),
        )
    else:
        suggestion = list(catalog.suggestions(metric, "stable"))

    return TrendInsight(
        metric=metric,
        trend=trend,
        is_abnormal=is_abnormal,
        suggestion=tuple(suggestion),
        rate_of_change=format_rate_label(rate_pct),
        direction=_direction(trend),
        rate_of_change_pct=rate_pct,
        predicted_hours=predicted_hours,
        window_size=len(window),
        average=avg_value,
        std_dev=std_dev,
    )


def classify_all(
    samples: Sequence[TelemetrySample],
    catalog: Optional[SuggestionCatalog] = None,
) -> Dict[str, Optional[TrendInsight]]:
    """Insight por cada una de las ocho métricas (None si faltan datos)."""
    return {metric: classify(samples, metric, catalog) for metric in METRICS}
