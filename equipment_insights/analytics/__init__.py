"""Análisis de tendencia, estadísticos y catálogo de sugerencias."""

from .statistics import compute_metric_stats, compute_statistics
from .status import status_for
from .suggestion_catalog import CatalogError, SuggestionCatalog, get_default_catalog
from .trend_classifier import classify, classify_all

__all__ = [
    "compute_metric_stats",
    "compute_statistics",
    "status_for",
    "CatalogError",
    "SuggestionCatalog",
    "get_default_catalog",
    "classify",
    "classify_all",
]
