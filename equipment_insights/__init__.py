"""Análisis de tendencia y alertas por umbral para telemetría de equipos."""

__version__ = "0.1.0"
