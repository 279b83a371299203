from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..domain.sample import TelemetrySample

# Valores crudos: lo que no parsee como número se guarda como 0
RawMetric = Optional[Union[float, str]]


class TelemetrySampleIn(BaseModel):
    timestamp: str = ""
    date: str = ""
    temperature: RawMetric = None
    humidity: RawMetric = None
    oilLevel: RawMetric = None
    voltage: RawMetric = None
    current: RawMetric = None
    power: RawMetric = None
    energy: RawMetric = None
    angle: RawMetric = None

    def to_sample(self) -> TelemetrySample:
        return TelemetrySample.from_mapping(self.model_dump())


class TelemetryBatchIn(BaseModel):
    samples: List[TelemetrySampleIn] = Field(default_factory=list)


class PublishResult(BaseModel):
    published: int
    total_samples: int
    active_alerts: int


class TrendInsightOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    metric: str
    trend: float
    is_abnormal: bool
    suggestion: List[str]
    rate_of_change: str
    direction: str
    rate_of_change_pct: float
    predicted_hours: Optional[float] = None
    window_size: int


class MetricStatsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    min: float
    max: float
    avg: float
    current: Optional[float] = None
    count: int


class AlertOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    metric: str
    metric_key: str
    severity: str
    direction: str
    message: str
    current_value: str
    threshold: str
    description: str
    timestamp: str


class AlertQueueOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    alerts: List[AlertOut] = Field(default_factory=list)
    modal_visible: bool = False


class ModalVisibilityIn(BaseModel):
    visible: bool


class MetricAlertBadgeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    type: str
    message: str
    description: str
    icon: str
    color: str
    background_color: str


class InsightsOut(BaseModel):
    sample_count: int
    insights: Dict[str, Optional[TrendInsightOut]] = Field(default_factory=dict)


class StatisticsOut(BaseModel):
    sample_count: int
    statistics: Dict[str, MetricStatsOut] = Field(default_factory=dict)
