from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _default_env_file() -> str:
    repo_root = Path(__file__).resolve().parents[2]
    return str(repo_root / ".env")


@dataclass(frozen=True)
class Settings:
    poll_interval_seconds: float
    telemetry_csv_path: Optional[str]
    suggestion_catalog_path: Optional[str]

    log_level: str
    api_key: Optional[str]
    environment: str

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def get_settings() -> Settings:
    # Carga el .env (si existe) sin pisar variables de entorno reales.
    env_file = os.getenv("INSIGHTS_ENV_FILE", _default_env_file())
    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    # Cadencia de polling de la hoja: 3 minutos.
    poll_interval_seconds = float(os.getenv("POLL_INTERVAL_SECONDS", "180"))

    return Settings(
        poll_interval_seconds=poll_interval_seconds,
        telemetry_csv_path=os.getenv("TELEMETRY_CSV_PATH") or None,
        suggestion_catalog_path=os.getenv("SUGGESTION_CATALOG_PATH") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        api_key=os.getenv("INSIGHTS_API_KEY") or None,
        environment=os.getenv("ENVIRONMENT", "development").lower(),
    )
