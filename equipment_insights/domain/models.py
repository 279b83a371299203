"""Modelos derivados del motor de análisis.

Todos son inmutables: cada pasada de evaluación produce instancias nuevas,
nunca se mutan en sitio.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from typing import Literal, Optional, Tuple

Trend = Literal["up", "down", "stable"]
AlertDirection = Literal["LOW", "HIGH"]


@dataclass(frozen=True)
class TrendInsight:
    """Insight de tendencia para una métrica (ventana de últimas lecturas)."""

    metric: str
    trend: float  # delta firmado último - primero de la ventana
    is_abnormal: bool
    suggestion: Tuple[str, ...]
    rate_of_change: str  # etiqueta tipo "50.0%/hour"

    direction: Trend
    rate_of_change_pct: float
    predicted_hours: Optional[float]
    window_size: int
    average: float
    std_dev: float

    @property
    def headline(self) -> str:
        return self.suggestion[0] if self.suggestion else ""

    def to_dict(self) -> dict:
        data = asdict(self)
        data["suggestion"] = list(self.suggestion)
        return data


@dataclass(frozen=True)
class MetricStats:
    """Estadísticos min/max/avg de una serie (redondeados para display)."""

    min: float
    max: float
    avg: float
    current: Optional[float]
    count: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Alert:
    """Alerta crítica por umbral duro."""

    id: str
    metric: str  # título para presentación ("Oil Level")
    metric_key: str
    severity: str
    direction: AlertDirection
    message: str
    current_value: str
    threshold: str
    description: str
    timestamp: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AlertQueue:
    """Snapshot de la cola de alertas activa."""

    alerts: Tuple[Alert, ...] = field(default_factory=tuple)
    modal_visible: bool = False

    def __len__(self) -> int:
        return len(self.alerts)

    @property
    def is_empty(self) -> bool:
        return not self.alerts

    def get(self, alert_id: str) -> Optional[Alert]:
        for alert in self.alerts:
            if alert.id == alert_id:
                return alert
        return None

    def with_modal(self, visible: bool) -> "AlertQueue":
        return replace(self, modal_visible=bool(visible))

    def to_dict(self) -> dict:
        return {
            "alerts": [a.to_dict() for a in self.alerts],
            "modal_visible": self.modal_visible,
        }


@dataclass(frozen=True)
class MetricAlertBadge:
    """Indicador de alerta inline junto al valor actual de una tarjeta."""

    type: Literal["low", "high"]
    message: str
    description: str
    icon: str = "🔴"
    color: str = "#ff0000"
    background_color: str = "rgba(255, 0, 0, 0.15)"

    def to_dict(self) -> dict:
        return asdict(self)
