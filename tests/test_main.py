"""Tests for the command line entry point."""

import logging
from pathlib import Path

import pytest
import yaml

from takeoffperf.core.logging_system import initialize_logging
import takeoffperf.main
from takeoffperf.main import EXIT_CONFIG_ERROR, EXIT_RESULT_ERROR, load_case, main, parse_args


@pytest.fixture(autouse=True)
def restore_logging():
    """Return to the default logging configuration after each run."""
    yield
    initialize_logging()


@pytest.fixture
def case_file(tmp_path: Path) -> Path:
    """Dry sea level case file."""
    case = {
        "takeoff": {
            "tow": 400000,
            "conf": 2,
            "tora": 4000,
            "elevation": 0,
            "qnh": 1013.25,
            "oat": 15,
            "runway_condition": "dry",
            "anti_ice": "off",
        }
    }
    path = tmp_path / "case.yaml"
    path.write_text(yaml.safe_dump(case))
    return path


def _output(capsys: pytest.CaptureFixture[str]) -> dict:
    return yaml.safe_load(capsys.readouterr().out)


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self) -> None:
        """Test only the case file is required."""
        args = parse_args(["case.yaml"])
        assert args.case == "case.yaml"
        assert not args.optimal
        assert args.conf is None
        assert args.overrides == []
        assert args.workers is None

    def test_repeated_overrides(self) -> None:
        """Test --set may be given several times."""
        args = parse_args(["case.yaml", "--set", "takeoff.oat=30", "--set", "takeoff.wind=5", "--conf", "3"])
        assert args.overrides == ["takeoff.oat=30", "takeoff.wind=5"]
        assert args.conf == 3

    def test_invalid_conf(self) -> None:
        """Test configurations outside 1-3 are refused."""
        with pytest.raises(SystemExit):
            parse_args(["case.yaml", "--conf", "4"])


class TestMain:
    """Test running the command line."""

    def test_prints_result(self, case_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the result is printed as YAML and its error sets the exit code."""
        assert main([str(case_file)]) == EXIT_RESULT_ERROR
        output = _output(capsys)
        assert output["error"] == "too_heavy"
        assert output["inputs"]["conf"] == 2

    def test_conf_option(self, case_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --conf overrides the case file."""
        main([str(case_file), "--conf", "1"])
        assert _output(capsys)["inputs"]["conf"] == 1

    def test_override(self, case_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --set values reach the calculation."""
        assert main([str(case_file), "--set", "takeoff.wind=-20"]) == EXIT_RESULT_ERROR
        assert _output(capsys)["error"] == "maximum_tailwind"

    def test_bare_off_override(self, case_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --set accepts an unquoted off for anti-ice."""
        assert main([str(case_file), "--set", "takeoff.anti_ice=off"]) == EXIT_RESULT_ERROR
        assert _output(capsys)["inputs"]["anti_ice"] == "off"

    def test_bare_off_in_case_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a case file may spell anti-ice as a bare off."""
        path = tmp_path / "case.yaml"
        path.write_text("takeoff: {tow: 400000, conf: 2, tora: 4000, elevation: 0, qnh: 1013.25, oat: 15, anti_ice: off}\n")
        assert main([str(path)]) == EXIT_RESULT_ERROR
        assert _output(capsys)["inputs"]["anti_ice"] == "off"

    def test_optimal(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the optimizer runs without a configuration in the case file."""
        path = tmp_path / "case.yaml"
        path.write_text("takeoff: {tow: 400000, tora: 4000, elevation: 0, qnh: 1013.25, oat: 15}\n")
        assert main([str(path), "--optimal", "--workers", "2"]) == EXIT_RESULT_ERROR
        assert _output(capsys)["inputs"]["conf"] == 3

    def test_missing_case(self, tmp_path: Path) -> None:
        """Test a missing case file is a configuration error."""
        assert main([str(tmp_path / "missing.yaml")]) == EXIT_CONFIG_ERROR

    def test_invalid_case(self, case_file: Path) -> None:
        """Test an invalid takeoff input is a configuration error."""
        assert main([str(case_file), "--set", "takeoff.runway_condition=ice"]) == EXIT_CONFIG_ERROR

    def test_missing_section(self, tmp_path: Path) -> None:
        """Test a case without a takeoff section is a configuration error."""
        path = tmp_path / "case.yaml"
        path.write_text("landing: {}\n")
        assert main([str(path)]) == EXIT_CONFIG_ERROR

    def test_missing_log_config(self, case_file: Path) -> None:
        """Test an unreadable logging configuration is a configuration error."""
        assert main([str(case_file), "--log-config", "/nonexistent/logging.yaml"]) == EXIT_CONFIG_ERROR

    def test_logging_shut_down_on_config_error(self, case_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test logging is shut down when the case is rejected."""
        calls = []
        monkeypatch.setattr(takeoffperf.main, "shutdown_logging", lambda: calls.append(True))
        assert main([str(case_file), "--set", "takeoff.runway_condition=ice"]) == EXIT_CONFIG_ERROR
        assert calls == [True]

    def test_logging_shut_down_after_result(self, case_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test logging is shut down after the result is printed."""
        calls = []
        monkeypatch.setattr(takeoffperf.main, "shutdown_logging", lambda: calls.append(True))
        assert main([str(case_file)]) == EXIT_RESULT_ERROR
        assert calls == [True]


class TestLoadCase:
    """Test building inputs from the command line."""

    def test_overrides_applied(self, case_file: Path) -> None:
        """Test --set and --conf both reach the inputs."""
        inputs = load_case(parse_args([str(case_file), "--set", "takeoff.oat=30", "--conf", "3"]))
        assert inputs.oat == 30.0
        assert inputs.conf == 3

    def test_loaded_case_logged(self, case_file: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Test the final case is logged at debug level."""
        caplog.set_level(logging.DEBUG, logger="takeoffperf.main")
        load_case(parse_args([str(case_file), "--set", "takeoff.wind=5"]))
        assert "'wind': 5" in caplog.text
