"""Singletons de proceso: sesión de monitoreo y guard de reporte."""

from __future__ import annotations

import logging
from typing import Optional

from ..analytics.suggestion_catalog import SuggestionCatalog, get_default_catalog
from ..common.config import get_settings
from ..ingestion.report_guard import ReportGuard
from ..session.monitoring_session import MonitoringSession

logger = logging.getLogger(__name__)

_session: Optional[MonitoringSession] = None
_guard: Optional[ReportGuard] = None


def _load_catalog() -> SuggestionCatalog:
    path = get_settings().suggestion_catalog_path
    if path:
        return SuggestionCatalog.from_json(path)
    return get_default_catalog()


def get_session() -> MonitoringSession:
    """Obtiene la sesión singleton (se crea en el primer uso)."""
    global _session
    if _session is None:
        _session = MonitoringSession(catalog=_load_catalog())
        logger.info("[State] Monitoring session created")
    return _session


def get_report_guard() -> ReportGuard:
    global _guard
    if _guard is None:
        _guard = ReportGuard()
    return _guard


def reset_state() -> None:
    """Descarta la sesión actual (nueva sesión en el próximo uso)."""
    global _session, _guard
    _session = None
    _guard = None
