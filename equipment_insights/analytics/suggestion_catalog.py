"""Catálogo estático de sugerencias de remediación.

Tabla (métrica, dirección) -> lista ordenada de textos. El primer texto es el
titular (advertencia o confirmación) y el resto son pasos numerados.

El contenido vive en ``suggestion_catalog.json`` (dato, no lógica): se puede
editar o sustituir por otro fichero (SUGGESTION_CATALOG_PATH) sin tocar el
clasificador.
"""

from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

SuggestionKind = Literal["high", "low", "stable"]

SUGGESTION_KINDS: Tuple[str, ...] = ("high", "low", "stable")
DEFAULT_PREDICTION_PHRASE = "May require attention in"

_BUILTIN_RESOURCE = "suggestion_catalog.json"


class CatalogError(ValueError):
    """Entrada del catálogo mal formada."""


def _validate_entry(metric: str, entry: Any) -> Dict[str, Any]:
    if not isinstance(entry, Mapping):
        raise CatalogError(f"catalog entry for '{metric}' must be an object")

    validated: Dict[str, Any] = {}
    for kind in SUGGESTION_KINDS:
        lines = entry.get(kind)
        if lines is None:
            continue
        if not isinstance(lines, (list, tuple)) or not lines or not all(isinstance(s, str) for s in lines):
            raise CatalogError(f"'{metric}.{kind}' must be a non-empty list of strings")
        validated[kind] = tuple(lines)

    phrase = entry.get("prediction")
    if phrase is not None:
        if not isinstance(phrase, str) or not phrase.strip():
            raise CatalogError(f"'{metric}.prediction' must be a non-empty string")
        validated["prediction"] = phrase

    return validated


def _parse_table(raw: Any) -> Dict[str, Dict[str, Any]]:
    if not isinstance(raw, Mapping):
        raise CatalogError("suggestion catalog must be a JSON object keyed by metric")
    return {str(metric): _validate_entry(str(metric), entry) for metric, entry in raw.items()}


def load_builtin_table() -> Dict[str, Dict[str, Any]]:
    text = resources.files(__package__).joinpath(_BUILTIN_RESOURCE).read_text(encoding="utf-8")
    return _parse_table(json.loads(text))


class SuggestionCatalog:
    """Consulta de solo lectura sobre la tabla de sugerencias."""

    def __init__(self, table: Optional[Mapping[str, Mapping[str, Any]]] = None) -> None:
        if table is None:
            self._table = load_builtin_table()
        else:
            self._table = _parse_table(table)

    @classmethod
    def from_json(cls, path: str | Path) -> "SuggestionCatalog":
        """Carga una tabla editada desde JSON.

        Las métricas o direcciones que el fichero no define se toman de la
        tabla integrada.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogError(f"cannot read suggestion catalog {path}: {e}") from e
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise CatalogError(f"invalid JSON in suggestion catalog {path}: {e}") from e

        overrides = _parse_table(raw)
        merged = load_builtin_table()
        for metric, entry in overrides.items():
            merged.setdefault(metric, {}).update(entry)

        logger.info("[SuggestionCatalog] Loaded %d metric overrides from %s", len(overrides), path)
        return cls(merged)

    @property
    def metrics(self) -> Tuple[str, ...]:
        return tuple(self._table)

    def suggestions(self, metric: str, kind: SuggestionKind) -> Tuple[str, ...]:
        """Lista ordenada de sugerencias; mensaje genérico si no hay entrada."""
        if kind not in SUGGESTION_KINDS:
            raise ValueError(f"unknown suggestion kind: {kind}")

        lines = self._table.get(metric, {}).get(kind)
        if lines:
            return tuple(lines)

        if kind == "high":
            return (f"⚠️ Abnormal increase in {metric} detected.",)
        if kind == "low":
            return (f"⚠️ Abnormal decrease in {metric} detected.",)
        return (f"✅ {metric} levels are stable.",)

    def prediction_phrase(self, metric: str) -> str:
        return self._table.get(metric, {}).get("prediction") or DEFAULT_PREDICTION_PHRASE


_default_catalog: Optional[SuggestionCatalog] = None


def get_default_catalog() -> SuggestionCatalog:
    """Catálogo integrado (se carga una vez por proceso)."""
    global _default_catalog
    if _default_catalog is None:
        _default_catalog = SuggestionCatalog()
    return _default_catalog
