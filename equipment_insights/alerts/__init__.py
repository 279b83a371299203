"""Alertas críticas por umbral duro (cola + indicador por tarjeta)."""

from .badges import get_metric_alert
from .engine import AlertEngine
from .rules import HARD_THRESHOLD_RULES, AngleRule, OilLevelRule, ThresholdBreach

__all__ = [
    "get_metric_alert",
    "AlertEngine",
    "HARD_THRESHOLD_RULES",
    "AngleRule",
    "OilLevelRule",
    "ThresholdBreach",
]
