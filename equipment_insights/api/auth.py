"""Control de acceso a los endpoints que modifican la sesión de monitoreo.

Las lecturas (insights, estadísticos, alertas, reporte) son públicas; publicar
muestras y gestionar la cola de alertas exige la clave del servicio.
"""

from __future__ import annotations

import logging

from fastapi import Header, HTTPException

from ..common.config import get_settings

logger = logging.getLogger(__name__)


def require_api_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key")
) -> None:
    """Dependencia FastAPI: compara ``X-API-Key`` con INSIGHTS_API_KEY.

    Sin clave configurada el servicio queda abierto fuera de producción; en
    producción eso se trata como error de despliegue (500).
    """
    settings = get_settings()

    if not settings.api_key:
        if settings.is_production:
            logger.error("[Auth] INSIGHTS_API_KEY missing with ENVIRONMENT=production; rejecting write")
            raise HTTPException(status_code=500, detail="Insights service has no API key configured")
        logger.debug("[Auth] INSIGHTS_API_KEY not set; session writes are unauthenticated")
        return

    if not x_api_key:
        raise HTTPException(status_code=401, detail="API key required")

    if x_api_key != settings.api_key:
        logger.warning("[Auth] Rejected session write: API key mismatch")
        raise HTTPException(status_code=401, detail="Invalid API key")
