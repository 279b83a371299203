"""Guard booleano que pausa la ingesta mientras se arma un reporte.

No es un lock del core: el disparador de ingesta lo consulta antes de
cada ciclo y simplemente se salta el ciclo si hay un reporte en curso.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

logger = logging.getLogger(__name__)


class ReportGuard:
    def __init__(self) -> None:
        self._reporting = False

    @property
    def is_reporting(self) -> bool:
        return self._reporting

    def begin(self) -> None:
        self._reporting = True
        logger.info("[ReportGuard] Report started; auto-refresh paused")

    def end(self) -> None:
        self._reporting = False
        logger.info("[ReportGuard] Report finished; auto-refresh resumed")

    @contextmanager
    def hold(self) -> Iterator["ReportGuard"]:
        self.begin()
        try:
            yield self
        finally:
            self.end()
