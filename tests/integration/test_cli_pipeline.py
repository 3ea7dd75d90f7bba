"""Integration Tests for CLI Pipeline
===================================

CLI invocation -> full execution -> output validation.

Tests cover:
- ``fit`` on CSV data with config files and command-line overrides
- ``learning-curve`` on NPZ data
- Exit codes and error handling for invalid invocations
"""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

import numpy as np
import pytest

from linsgd import __version__
from linsgd.cli.main import main

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run_main(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.mark.integration
class TestFitCommand:
    def test_fit_writes_parameters(self, line_csv_file: Path, tmp_path: Path) -> None:
        output = tmp_path / "fit.json"
        code = _run_main(
            [
                "fit",
                str(line_csv_file),
                "--skip-header", "1",
                "--learning-rate", "0.05",
                "--iterations", "2000",
                "--batch-size", "4",
                "--output", str(output),
                "--quiet",
            ]
        )

        assert code == 0
        result = json.loads(output.read_text(encoding="utf-8"))
        assert result["parameters"] == pytest.approx([1.0, 2.0], abs=0.05)
        assert result["batch_size"] == 4
        assert result["cost_history"] is None

    def test_fit_with_config_and_override(self, tmp_config_file, line_csv_file: Path, tmp_path: Path) -> None:
        config = tmp_config_file({"data": {"skip_header": 1}})
        output = tmp_path / "fit.json"

        code = _run_main(
            ["fit", str(line_csv_file), "--config", str(config), "--seed", "7", "--record-cost", "--output", str(output)]
        )

        assert code == 0
        result = json.loads(output.read_text(encoding="utf-8"))
        assert result["seed"] == 7
        assert result["n_iterations"] == 2000
        assert len(result["cost_history"]) == 2000
        assert result["final_cost"] < 1e-3

    def test_batch_larger_than_data_fails(self, line_csv_file: Path) -> None:
        code = _run_main(["fit", str(line_csv_file), "--skip-header", "1", "--batch-size", "10", "-q"])
        assert code == 1

    def test_missing_data_file_fails(self, tmp_path: Path) -> None:
        assert _run_main(["fit", str(tmp_path / "absent.csv")]) == 1

    def test_missing_config_file_fails(self, line_csv_file: Path, tmp_path: Path) -> None:
        assert _run_main(["fit", str(line_csv_file), "--config", str(tmp_path / "absent.yaml")]) == 1

    def test_verbose_and_quiet_conflict(self, line_csv_file: Path) -> None:
        assert _run_main(["fit", str(line_csv_file), "--verbose", "--quiet"]) == 1

    def test_non_positive_learning_rate_fails(self, line_csv_file: Path) -> None:
        assert _run_main(["fit", str(line_csv_file), "--learning-rate", "0"]) == 1

    def test_exponent_learning_rate_in_yaml(self, line_csv_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "exponent.yaml"
        config.write_text(
            "optimizer:\n  learning_rate: 5e-2\n  iterations: 2000\n  observations_in_each_batch: 4\n",
            encoding="utf-8",
        )
        output = tmp_path / "fit.json"

        code = _run_main(
            ["fit", str(line_csv_file), "--config", str(config), "--skip-header", "1", "--output", str(output), "-q"]
        )

        assert code == 0
        result = json.loads(output.read_text(encoding="utf-8"))
        assert result["learning_rate"] == 0.05
        assert result["parameters"] == pytest.approx([1.0, 2.0], abs=0.05)

    def test_non_numeric_learning_rate_in_yaml_fails(self, line_csv_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "bad.yaml"
        config.write_text("optimizer:\n  learning_rate: fast\n", encoding="utf-8")

        assert _run_main(["fit", str(line_csv_file), "--config", str(config), "--skip-header", "1", "-q"]) == 1

    def test_non_numeric_cell_fails(self, tmp_path: Path) -> None:
        data = tmp_path / "dirty.csv"
        data.write_text("1.0,3.0\nabc,5.0\n3.0,7.0\n", encoding="utf-8")
        assert _run_main(["fit", str(data), "--batch-size", "2", "-q"]) == 1

    def test_target_column_out_of_range_fails(self, line_csv_file: Path) -> None:
        assert _run_main(["fit", str(line_csv_file), "--skip-header", "1", "--target-column", "5", "-q"]) == 1

    def test_unexpected_error_exits_with_failure(self, line_csv_file: Path, monkeypatch) -> None:
        def explode(args):
            raise RuntimeError("boom")

        monkeypatch.setattr(sys.modules["linsgd.cli.main"], "dispatch_command", explode)
        assert _run_main(["fit", str(line_csv_file)]) == 1

    def test_command_required(self) -> None:
        assert _run_main([]) == 2


@pytest.mark.integration
class TestLearningCurveCommand:
    def test_learning_curve_on_npz(self, linear_dataset, tmp_path: Path) -> None:
        data = tmp_path / "data.npz"
        np.savez(data, X=linear_dataset.observations, y=linear_dataset.targets)
        output = tmp_path / "curve.json"

        code = _run_main(
            [
                "learning-curve",
                str(data),
                "--percentages", "0.1,0.5,1.0",
                "--training-percentage", "0.75",
                "--learning-rate", "0.05",
                "--iterations", "500",
                "--batch-size", "5",
                "--output", str(output),
                "-q",
            ]
        )

        assert code == 0
        result = json.loads(output.read_text(encoding="utf-8"))
        assert [p["sample_size"] for p in result["points"]] == [15, 75, 150]
        assert result["optimizer"]["learning_rate"] == 0.05
        assert result["points"][-1]["validation_score"] < 1e-3

    def test_invalid_percentage_fails(self, linear_dataset, tmp_path: Path) -> None:
        data = tmp_path / "data.npz"
        np.savez(data, X=linear_dataset.observations, y=linear_dataset.targets)
        assert _run_main(["learning-curve", str(data), "--percentages", "0.5,1.5", "-q"]) == 1


@pytest.mark.integration
class TestModuleInvocation:
    def test_version(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "linsgd", "--version"],
            capture_output=True,
            text=True,
            timeout=60,
            cwd=REPO_ROOT,
        )

        assert result.returncode == 0, f"stdout: {result.stdout}\nstderr: {result.stderr}"
        assert __version__ in result.stdout

    def test_fit_from_subprocess(self, line_csv_file: Path) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "linsgd", "fit", str(line_csv_file), "--skip-header", "1", "--batch-size", "4",
             "--learning-rate", "0.05", "--iterations", "2000"],
            capture_output=True,
            text=True,
            timeout=60,
            cwd=REPO_ROOT,
        )

        assert result.returncode == 0, f"stderr: {result.stderr}"
        assert "Bias:" in result.stderr
