"""
Unit tests for the config and logging setup modules.
"""
import json
import os
import pytest
import structlog

from mocknet_report.config import ReportConfig
from mocknet_report.logging_setup import setup_logging


def test_defaults():
    """Test default configuration values."""
    config = ReportConfig()

    assert config.output is None
    assert config.append is True
    assert config.file_mode == "a"
    assert config.validate()


def test_truncate_mode():
    """Test disabling append truncates output files."""
    assert ReportConfig(append=False).file_mode == "w"


def test_output_directory_created(tmp_path):
    """Test the output file's directory is created."""
    output = tmp_path / "reports" / "net.log"
    ReportConfig(output=str(output))

    assert os.path.isdir(tmp_path / "reports")


def test_file_roundtrip(tmp_path):
    """Test saving and loading configuration."""
    path = str(tmp_path / "config.json")
    config = ReportConfig(append=False, log_level="DEBUG", log_format="json")
    config.to_file(path)

    with open(path) as f:
        assert json.load(f)["log_format"] == "json"
    assert ReportConfig.from_file(path) == config


@pytest.mark.parametrize("kwargs", [
    {"log_level": "LOUD"},
    {"log_level": 5},
    {"log_format": "xml"},
])
def test_validate_rejects(kwargs):
    """Test invalid settings raise ValueError."""
    with pytest.raises(ValueError):
        ReportConfig(**kwargs).validate()


def test_from_file_unknown_key(tmp_path):
    """Test unknown configuration keys are rejected."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"colour": "blue"}))

    with pytest.raises(TypeError):
        ReportConfig.from_file(str(path))


def test_setup_logging_json(capsys):
    """Test the JSON renderer writes events to stderr."""
    setup_logging("INFO", "json")
    structlog.get_logger().info("report_ready", peers=2)

    captured = capsys.readouterr()
    event = json.loads(captured.err.strip().splitlines()[-1])
    assert event["event"] == "report_ready"
    assert event["peers"] == 2
    assert event["level"] == "info"
    assert captured.out == ""

    setup_logging("WARNING", "console")
