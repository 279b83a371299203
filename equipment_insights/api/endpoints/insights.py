"""Endpoints de lectura: insights de tendencia y estadísticos."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ...domain.metrics import resolve_metric
from ...session.monitoring_session import MonitoringSession
from ..schemas import InsightsOut, MetricStatsOut, StatisticsOut, TrendInsightOut
from ..state import get_session

router = APIRouter(tags=["insights"])


@router.get("/insights", response_model=InsightsOut)
def list_insights(session: MonitoringSession = Depends(get_session)):
    snapshot = session.snapshot()
    return InsightsOut(
        sample_count=snapshot.sample_count,
        insights={
            metric: TrendInsightOut.model_validate(insight) if insight is not None else None
            for metric, insight in snapshot.insights.items()
        },
    )


@router.get("/insights/{metric}", response_model=TrendInsightOut)
def get_insight(metric: str, session: MonitoringSession = Depends(get_session)):
    info = resolve_metric(metric)
    if info is None:
        raise HTTPException(status_code=404, detail=f"Unknown metric: {metric}")

    insight = session.snapshot().insights.get(info.key)
    if insight is None:
        raise HTTPException(status_code=404, detail="Not enough data for insight")
    return TrendInsightOut.model_validate(insight)


@router.get("/statistics", response_model=StatisticsOut)
def get_statistics(session: MonitoringSession = Depends(get_session)):
    snapshot = session.snapshot()
    return StatisticsOut(
        sample_count=snapshot.sample_count,
        statistics={
            metric: MetricStatsOut.model_validate(stats)
            for metric, stats in snapshot.statistics.items()
        },
    )
