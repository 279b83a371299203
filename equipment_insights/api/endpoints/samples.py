"""Endpoints de publicación de muestras de telemetría."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from ...ingestion.report_guard import ReportGuard
from ...session.monitoring_session import MonitoringSession
from ..auth import require_api_key
from ..schemas import PublishResult, TelemetryBatchIn, TelemetrySampleIn
from ..state import get_report_guard, get_session

router = APIRouter(tags=["samples"])
logger = logging.getLogger(__name__)


def _ensure_not_reporting(guard: ReportGuard) -> None:
    if guard.is_reporting:
        raise HTTPException(status_code=409, detail="Report in progress; ingestion paused")


@router.post(
    "/samples",
    response_model=PublishResult,
    dependencies=[Depends(require_api_key)],
)
def publish_sample(
    payload: TelemetrySampleIn,
    session: MonitoringSession = Depends(get_session),
    guard: ReportGuard = Depends(get_report_guard),
):
    """Publica una muestra y recalcula insights, estadísticos y alertas."""
    _ensure_not_reporting(guard)
    snapshot = session.publish(payload.to_sample())
    return PublishResult(
        published=1,
        total_samples=snapshot.sample_count,
        active_alerts=len(snapshot.alerts),
    )


@router.post(
    "/samples/batch",
    response_model=PublishResult,
    dependencies=[Depends(require_api_key)],
)
def publish_batch(
    payload: TelemetryBatchIn,
    session: MonitoringSession = Depends(get_session),
    guard: ReportGuard = Depends(get_report_guard),
):
    """Publica varias muestras con un único recálculo."""
    _ensure_not_reporting(guard)
    snapshot = session.publish_many(s.to_sample() for s in payload.samples)
    return PublishResult(
        published=len(payload.samples),
        total_samples=snapshot.sample_count,
        active_alerts=len(snapshot.alerts),
    )
