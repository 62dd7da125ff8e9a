"""Tests for run configuration and metrics export."""

import csv
import json
import logging

import pytest
import yaml

from boxpack.algorithms.packer import pack
from boxpack.monitoring.metrics import (
    CSV_FIELDS,
    PackMetrics,
    RunMetrics,
    export_to_csv,
    export_to_json,
    print_summary,
)
from boxpack.runner.config import RunConfig, load_config, save_config


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestRunConfig:
    def test_defaults(self):
        config = RunConfig()
        assert config.normalize and config.validate_layout and config.render
        assert not config.verbose
        assert config.log_level_value == logging.WARNING
        assert config.results_dir is None

    def test_log_level_is_normalized(self):
        assert RunConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            RunConfig(log_level="loud")

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text(yaml.dump({"render": False, "scenario_seed": 3}))
        config = load_config(path)
        assert not config.render
        assert config.scenario_seed == 3

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "nested" / "run.yaml"
        save_config(RunConfig(verbose=True, results_dir="out"), path)
        assert load_config(path) == RunConfig(verbose=True, results_dir="out")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_field(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("scenario_seed: -4\n")
        with pytest.raises(ValueError):
            load_config(path)


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

@pytest.fixture
def perfect_metrics(perfect_fit_boxes):
    return PackMetrics.from_result(pack(perfect_fit_boxes), "perfect_fit", runtime_ms=1.5)


class TestPackMetrics:
    def test_from_result(self, perfect_metrics):
        assert perfect_metrics.boxes_placed == 5
        assert (perfect_metrics.bin_width, perfect_metrics.bin_height) == (24, 16)
        assert perfect_metrics.waste_area == 0
        assert perfect_metrics.utilization_pct == pytest.approx(100.0)
        assert perfect_metrics.rotated_boxes == 0

    def test_to_dict_has_iso_timestamp(self, perfect_metrics):
        d = perfect_metrics.to_dict()
        assert isinstance(d["packed_at"], str)
        assert set(d) == set(CSV_FIELDS)


class TestRunMetrics:
    def test_aggregates(self, perfect_metrics, rotate_boxes):
        rotated = PackMetrics.from_result(pack(rotate_boxes), "rotate")
        run = RunMetrics("run_test")
        run.add_pack(perfect_metrics)
        run.add_pack(rotated)
        run.record_error()
        run.mark_complete()

        assert run.total_packs == 2
        assert run.total_boxes == 9
        assert run.total_bin_area == 384 + 120
        assert run.max_utilization_pct == pytest.approx(100.0)
        assert run.min_utilization_pct == pytest.approx(112 / 120 * 100)
        assert run.errors_count == 1
        assert run.completed_at is not None
        assert "Run: run_test" in print_summary(run)

    def test_export(self, tmp_path, perfect_metrics):
        run = RunMetrics("run_test")
        run.add_pack(perfect_metrics)

        export_to_json(run, tmp_path / "out" / "run.json")
        export_to_csv(run, tmp_path / "out" / "run.csv")

        data = json.loads((tmp_path / "out" / "run.json").read_text())
        assert data["total_packs"] == 1
        assert data["pack_metrics"][0]["dataset_id"] == "perfect_fit"

        with open(tmp_path / "out" / "run.csv", newline="") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 1
        assert rows[0]["bin_area"] == "384"

    def test_summary_json_omits_packs(self, tmp_path, perfect_metrics):
        run = RunMetrics("run_test")
        run.add_pack(perfect_metrics)
        export_to_json(run, tmp_path / "summary.json", include_packs=False)
        assert "pack_metrics" not in json.loads((tmp_path / "summary.json").read_text())
