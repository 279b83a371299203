"""Endpoints de la cola de alertas críticas."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends

from ...session.monitoring_session import MonitoringSession
from ..auth import require_api_key
from ..schemas import AlertQueueOut, MetricAlertBadgeOut, ModalVisibilityIn
from ..state import get_session

router = APIRouter(prefix="/alerts", tags=["alerts"])


@router.get("", response_model=AlertQueueOut)
def get_alerts(session: MonitoringSession = Depends(get_session)):
    return AlertQueueOut.model_validate(session.snapshot().alerts)


@router.get("/badges", response_model=Dict[str, MetricAlertBadgeOut])
def get_badges(session: MonitoringSession = Depends(get_session)):
    """Indicadores inline por tarjeta para los valores actuales."""
    return {
        metric: MetricAlertBadgeOut.model_validate(badge)
        for metric, badge in session.metric_alerts().items()
    }


@router.post(
    "/dismiss-all",
    response_model=AlertQueueOut,
    dependencies=[Depends(require_api_key)],
)
def dismiss_all(session: MonitoringSession = Depends(get_session)):
    return AlertQueueOut.model_validate(session.dismiss_all_alerts())


@router.post(
    "/modal",
    response_model=AlertQueueOut,
    dependencies=[Depends(require_api_key)],
)
def set_modal(payload: ModalVisibilityIn, session: MonitoringSession = Depends(get_session)):
    return AlertQueueOut.model_validate(session.set_modal_visible(payload.visible))


@router.post(
    "/{alert_id}/dismiss",
    response_model=AlertQueueOut,
    dependencies=[Depends(require_api_key)],
)
def dismiss(alert_id: str, session: MonitoringSession = Depends(get_session)):
    """Descarta una alerta; id desconocido no hace nada."""
    return AlertQueueOut.model_validate(session.dismiss_alert(alert_id))
