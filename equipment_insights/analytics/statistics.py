"""Agregador de estadísticos min/max/avg por métrica.

Lo consumen por igual la vista en vivo (API) y el resumen de reporte: para la
misma serie ambos deben ver exactamente los mismos números, por eso estas
funciones son puras (sin estado global ni aleatoriedad).
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence

from ..common.numeric_precision import filter_valid_values, parse_sensor_value, round_for_display
from ..domain.metrics import METRICS
from ..domain.models import MetricStats
from ..domain.sample import TelemetrySample


def compute_metric_stats(values: Iterable, current=None) -> Optional[MetricStats]:
    """Calcula min/max/avg de una serie.

    Los valores no numéricos o no finitos se excluyen. Si no queda ningún
    valor devuelve None (la métrica no aparece en el resultado).
    """
    finite_values = filter_valid_values(values)
    if not finite_values:
        return None

    v_min = min(finite_values)
    v_max = max(finite_values)
    v_mean = sum(finite_values) / len(finite_values)

    return MetricStats(
        min=round_for_display(v_min),
        max=round_for_display(v_max),
        avg=round_for_display(v_mean),
        current=parse_sensor_value(current),
        count=len(finite_values),
    )


def compute_statistics(
    samples: Sequence[TelemetrySample],
    latest: Optional[TelemetrySample] = None,
) -> Dict[str, MetricStats]:
    """Estadísticos de todas las métricas sobre la serie completa.

    ``latest`` es la muestra designada como valor actual; por defecto la
    última de la serie.
    """
    result: Dict[str, MetricStats] = {}
    if not samples:
        return result

    current_sample = latest if latest is not None else samples[-1]
    for metric in METRICS:
        stats = compute_metric_stats(
            (getattr(s, metric) for s in samples),
            current=getattr(current_sample, metric),
        )
        if stats is not None:
            result[metric] = stats
    return result
