"""
Tests for the cannablend CLI (cannablend/cli.py).

Covers:
  - _parse_strain_specs(): even split, explicit weights, malformed input.
  - predict: text and JSON output, even-split default, error exits.
  - strains / compounds / validate-config listings.
"""

from __future__ import annotations

import json
import logging

import pytest
from typer.testing import CliRunner

from cannablend.cli import _parse_strain_specs, app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch):
    for var in ("CANNABLEND_STRAINS_FILE", "CANNABLEND_MAX_STRAINS",
                "CANNABLEND_LOG_LEVEL", "CANNABLEND_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


# ── _parse_strain_specs ───────────────────────────────────────────────────────

class TestParseStrainSpecs:
    def test_unweighted_split_evenly(self):
        entries = _parse_strain_specs(["a", "b", "c"], max_strains=3)
        assert [(e.strain_id, e.weight) for e in entries] == [("a", 33), ("b", 33), ("c", 34)]

    def test_weighted(self):
        entries = _parse_strain_specs(["a:70", " b : 30 "], max_strains=3)
        assert [(e.strain_id, e.weight) for e in entries] == [("a", 70), ("b", 30)]

    def test_too_many(self):
        with pytest.raises(ValueError, match="at most 2 strains, got 3"):
            _parse_strain_specs(["a", "b", "c"], max_strains=2)

    @pytest.mark.parametrize("spec", ["", ":50", "a:"])
    def test_malformed(self, spec):
        with pytest.raises(ValueError, match="Malformed strain spec"):
            _parse_strain_specs([spec], max_strains=3)

    def test_duplicate(self):
        with pytest.raises(ValueError, match="only once"):
            _parse_strain_specs(["a:50", "a:50"], max_strains=3)

    def test_mixed(self):
        with pytest.raises(ValueError, match="every strain or for none"):
            _parse_strain_specs(["a:50", "b"], max_strains=3)

    def test_non_integer_weight(self):
        with pytest.raises(ValueError, match="must be an integer"):
            _parse_strain_specs(["a:12.5", "b:87.5"], max_strains=3)


# ── predict ───────────────────────────────────────────────────────────────────

class TestPredictCommand:
    def test_text_output(self):
        result = runner.invoke(app, ["predict", "-s", "seed-001:60", "-s", "seed-006:40"])
        assert result.exit_code == 0, result.output
        assert "Blue Dream" in result.output
        assert "ACDC" in result.output
        assert "Primary:" in result.output
        assert "Blended:    THC 13%  CBD 5.66%" in result.output

    def test_json_output(self):
        result = runner.invoke(
            app, ["predict", "-s", "seed-001:60", "-s", "seed-006:40", "--json"]
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["blended_thc"] == pytest.approx(13.0)
        assert payload["blended_cbd"] == pytest.approx(5.66)
        assert payload["intensity"] == 2
        assert len(payload["secondary_tags"]) == 3
        assert set(payload["tag_scores"]) == {
            "Relaxed", "Uplifted", "Focused", "Sleepy",
            "Creative", "Social", "Body-heavy", "Clear-headed",
        }
        assert payload["explanation"][-1].endswith("-> clamped to 2/10")

    def test_even_split_default(self):
        result = runner.invoke(app, ["predict", "-s", "seed-001", "-s", "seed-006"])
        assert result.exit_code == 0, result.output
        assert result.output.count("50%") == 2

    def test_weight_sum_mismatch(self):
        result = runner.invoke(app, ["predict", "-s", "seed-001:60", "-s", "seed-006:30"])
        assert result.exit_code == 1
        assert "Weights must sum to 100 (got 90)" in result.output

    def test_unknown_strain(self):
        result = runner.invoke(app, ["predict", "-s", "nope"])
        assert result.exit_code == 1
        assert "Strain not found: nope" in result.output

    def test_too_many_strains(self):
        args = ["predict"]
        for sid in ("seed-001", "seed-002", "seed-003", "seed-004"):
            args += ["-s", sid]
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert "at most 3 strains" in result.output

    def test_missing_catalog(self, tmp_path):
        result = runner.invoke(
            app, ["predict", "-s", "seed-001", "--strains-file", str(tmp_path / "x.json")]
        )
        assert result.exit_code == 1
        assert "Could not load strain catalog" in result.output

    def test_custom_catalog(self, tmp_path):
        path = tmp_path / "mine.json"
        path.write_text(json.dumps([{
            "id": "m-1", "name": "Mine", "thc": 20, "cbd": 0,
            "compounds": ["Skunkberry", "Myrcene", "Pinene"],
        }]), encoding="utf-8")
        result = runner.invoke(app, ["predict", "-s", "m-1", "--strains-file", str(path)])
        assert result.exit_code == 0, result.output
        assert "no known effect mapping (custom compound)" in result.output


# ── Listings ──────────────────────────────────────────────────────────────────

class TestListingCommands:
    def test_strains(self):
        result = runner.invoke(app, ["strains"])
        assert result.exit_code == 0, result.output
        assert "=== Strain Catalog ===" in result.output
        assert "seed-010" in result.output

    def test_compounds(self):
        result = runner.invoke(app, ["compounds"])
        assert result.exit_code == 0, result.output
        assert "Terpinolene" in result.output

    def test_validate_config(self):
        result = runner.invoke(app, ["validate-config", "--full"])
        assert result.exit_code == 0, result.output
        assert "Configuration validated successfully." in result.output
        assert "Max strains:   3" in result.output
        assert '"max_strains": 3' in result.output

    def test_validate_config_missing_file(self, tmp_path):
        result = runner.invoke(app, ["validate-config", "--config", str(tmp_path / "no.toml")])
        assert result.exit_code == 1
