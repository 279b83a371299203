"""Mapeo de filas de la hoja de telemetría a TelemetrySample.

Las columnas siguen los encabezados de la hoja del equipo. Columnas de
métrica ausentes o con valores no numéricos se guardan como 0; si faltan
Time/Date se usa la hora/fecha actual en formato de display.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import pandas as pd

from ..common.numeric_precision import safe_float
from ..domain.sample import TelemetrySample

logger = logging.getLogger(__name__)

TIME_COLUMN = "Time"
DATE_COLUMN = "Date"

# Encabezado de la hoja -> clave canónica
COLUMN_MAP: Dict[str, str] = {
    "Temperature": "temperature",
    "Humidity (%)": "humidity",
    "Oil Level (%)": "oilLevel",
    "Voltage (V)": "voltage",
    "Current (mA)": "current",
    "Power (mW)": "power",
    "Energy (Wh)": "energy",
    "Angle (°)": "angle",
}


class TabularFormatError(ValueError):
    """El fichero no tiene el formato de la hoja de telemetría."""


def display_time(now: datetime) -> str:
    return now.strftime("%H:%M:%S")


def display_date(now: datetime) -> str:
    return now.strftime("%m/%d/%Y")


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and pd.isna(value):
        return ""
    return str(value).strip()


def sample_from_row(row: Mapping[str, Any], now: Optional[datetime] = None) -> TelemetrySample:
    """Convierte una fila (encabezado -> valor) en TelemetrySample."""
    now = now or datetime.now()
    timestamp = _text(row.get(TIME_COLUMN)) or display_time(now)
    date = _text(row.get(DATE_COLUMN)) or display_date(now)

    values = {key: safe_float(row.get(header), 0.0) for header, key in COLUMN_MAP.items()}
    return TelemetrySample(timestamp=timestamp, date=date, **values)


def load_csv(file_path: str | Path, now: Optional[datetime] = None) -> List[TelemetrySample]:
    """Lee un export CSV de la hoja y devuelve las muestras en orden de fichero."""
    logger.info("[Tabular] Reading telemetry file: %s", file_path)

    frame = pd.read_csv(file_path, dtype=str, keep_default_na=False)
    frame.columns = [str(c).strip() for c in frame.columns]

    known = [c for c in COLUMN_MAP if c in frame.columns]
    if not known:
        raise TabularFormatError(
            f"no telemetry columns found in {file_path}; expected any of {list(COLUMN_MAP)}"
        )
    missing = [c for c in COLUMN_MAP if c not in frame.columns]
    if missing:
        logger.warning("[Tabular] Missing columns (stored as 0): %s", missing)

    samples = [sample_from_row(record, now=now) for record in frame.to_dict(orient="records")]
    logger.info("[Tabular] Loaded %d samples from %s", len(samples), file_path)
    return samples
