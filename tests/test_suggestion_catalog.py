"""Tests del catálogo de sugerencias."""

from __future__ import annotations

import json

import pytest

from equipment_insights.analytics.suggestion_catalog import (
    DEFAULT_PREDICTION_PHRASE,
    CatalogError,
    SuggestionCatalog,
    get_default_catalog,
)
from equipment_insights.domain.metrics import METRICS


class TestBuiltinCatalog:

    def test_covers_exactly_the_eight_metrics(self):
        assert set(get_default_catalog().metrics) == set(METRICS)

    @pytest.mark.parametrize("metric", METRICS)
    def test_every_entry_has_headline_and_steps(self, metric):
        catalog = get_default_catalog()

        for kind in ("high", "low", "stable"):
            lines = catalog.suggestions(metric, kind)
            assert len(lines) >= 2
            assert lines[1].startswith("1. ")
        assert catalog.prediction_phrase(metric).endswith(" in")

    def test_oil_level_entries(self):
        catalog = get_default_catalog()

        assert catalog.suggestions("oilLevel", "low")[0] == "⚠️ Low oil level detected. Maintenance needed."
        assert catalog.prediction_phrase("oilLevel") == "Oil maintenance may be needed in"

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError):
            get_default_catalog().suggestions("voltage", "sideways")


class TestFallbacks:

    def test_unknown_metric_generic_messages(self):
        catalog = get_default_catalog()

        assert catalog.suggestions("pressure", "high") == ("⚠️ Abnormal increase in pressure detected.",)
        assert catalog.suggestions("pressure", "low") == ("⚠️ Abnormal decrease in pressure detected.",)
        assert catalog.suggestions("pressure", "stable") == ("✅ pressure levels are stable.",)
        assert catalog.prediction_phrase("pressure") == DEFAULT_PREDICTION_PHRASE


class TestJsonOverrides:

    def test_override_merges_with_builtin(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps({"voltage": {"stable": ["✅ Voltage OK.", "1. Nothing to do"]}}),
            encoding="utf-8",
        )

        catalog = SuggestionCatalog.from_json(path)

        assert catalog.suggestions("voltage", "stable") == ("✅ Voltage OK.", "1. Nothing to do")
        # lo no definido se toma del catálogo integrado
        assert catalog.suggestions("voltage", "high") == get_default_catalog().suggestions("voltage", "high")
        assert catalog.suggestions("angle", "low") == get_default_catalog().suggestions("angle", "low")

    def test_override_can_add_a_metric(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps({"pressure": {"high": ["High pressure."], "prediction": "Check valves in"}}),
            encoding="utf-8",
        )

        catalog = SuggestionCatalog.from_json(path)

        assert catalog.suggestions("pressure", "high") == ("High pressure.",)
        assert catalog.suggestions("pressure", "stable") == ("✅ pressure levels are stable.",)
        assert catalog.prediction_phrase("pressure") == "Check valves in"

    def test_missing_file_raises_catalog_error(self, tmp_path):
        with pytest.raises(CatalogError):
            SuggestionCatalog.from_json(tmp_path / "missing.json")

    @pytest.mark.parametrize(
        "content",
        [
            "not json",
            json.dumps(["voltage"]),
            json.dumps({"voltage": {"high": []}}),
            json.dumps({"voltage": {"high": "single string"}}),
            json.dumps({"voltage": {"prediction": ""}}),
        ],
    )
    def test_malformed_catalog_raises(self, tmp_path, content):
        path = tmp_path / "catalog.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(CatalogError):
            SuggestionCatalog.from_json(path)
