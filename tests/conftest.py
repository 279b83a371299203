"""Fixtures compartidas de los tests del motor de insights."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Iterator

import pytest

from equipment_insights.domain.sample import TelemetrySample


# Valores dentro de rango: sin alertas de aceite ni de ángulo
NORMAL_VALUES = {
    "temperature": 25.0,
    "humidity": 60.0,
    "oilLevel": 20.0,
    "voltage": 9.5,
    "current": 120.0,
    "power": 900.0,
    "energy": 0.012,
    "angle": 0.5,
}


@pytest.fixture
def make_sample() -> Callable[..., TelemetrySample]:
    """Fábrica de muestras con valores normales sobreescribibles."""

    counter = {"n": 0}

    def _make(**overrides) -> TelemetrySample:
        counter["n"] += 1
        data = dict(NORMAL_VALUES)
        data.update(overrides)
        data.setdefault("timestamp", f"10:{counter['n']:02d}:00")
        data.setdefault("date", "01/15/2026")
        return TelemetrySample.from_mapping(data)

    return _make


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Reloj determinista: cada llamada avanza un minuto."""

    start = datetime(2026, 1, 15, 8, 0, 0)

    def _ticks() -> Iterator[datetime]:
        current = start
        while True:
            yield current
            current += timedelta(minutes=1)

    ticks = _ticks()
    return lambda: next(ticks)


@pytest.fixture
def make_payload() -> Callable[..., dict]:
    """Fábrica de payloads JSON para POST /samples."""

    def _make(**overrides) -> dict:
        data = dict(NORMAL_VALUES)
        data.update(overrides)
        return data

    return _make
