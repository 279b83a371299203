"""Endpoint de resumen para el generador de reportes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from ...ingestion.report_guard import ReportGuard
from ...report.summary import build_report_summary
from ...session.monitoring_session import MonitoringSession
from ..state import get_report_guard, get_session

router = APIRouter(prefix="/report", tags=["report"])
logger = logging.getLogger(__name__)


@router.get("/summary")
def report_summary(
    session: MonitoringSession = Depends(get_session),
    guard: ReportGuard = Depends(get_report_guard),
):
    """Datos del reporte armados con la ingesta pausada."""
    with guard.hold():
        summary = build_report_summary(session.snapshot())
    logger.info("[Report] Summary built data_points=%d", summary.data_points)
    return summary.to_dict()
