from __future__ import annotations

from fastapi import FastAPI

from ..common.config import get_settings
from ..common.logging_config import configure_logging
from .endpoints import (
    alerts_router,
    health_router,
    insights_router,
    report_router,
    samples_router,
)

configure_logging(get_settings().log_level)

app = FastAPI(title="Equipment Insights Service", version="0.1.0")

app.include_router(health_router)
app.include_router(samples_router)
app.include_router(insights_router)
app.include_router(alerts_router)
app.include_router(report_router)
