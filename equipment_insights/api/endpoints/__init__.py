"""Módulo de endpoints HTTP.

Contiene los endpoints de la API organizados por función.
"""

from .alerts import router as alerts_router
from .health import router as health_router
from .insights import router as insights_router
from .report import router as report_router
from .samples import router as samples_router

__all__ = [
    "alerts_router",
    "health_router",
    "insights_router",
    "report_router",
    "samples_router",
]
