"""
Tests for the command-line interface.
"""
import json
import pytest
from click.testing import CliRunner

from mocknet_report import __version__
from mocknet_report.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def topology_file(tmp_path):
    path = tmp_path / "topology.json"
    path.write_text(json.dumps({"A": {"B": 2}}))
    return str(path)


@pytest.fixture
def network_file(tmp_path):
    path = tmp_path / "network.json"
    path.write_text(json.dumps({
        "local_peer": "X",
        "conns": [{"remote_peer": "Y", "remote_addr": "/ip4/1.2.3.4/tcp/4001"}],
    }))
    return str(path)


def test_links_to_stdout(runner, topology_file):
    """Test rendering a topology file to stdout."""
    result = runner.invoke(main, ["links", topology_file])

    assert result.exit_code == 0
    assert result.output == "Mocknet link map:\n\tA linked to:\n\t\tB (2 links)\n\n"


def test_conns_to_stdout(runner, network_file):
    """Test rendering a connection snapshot to stdout."""
    result = runner.invoke(main, ["conns", network_file])

    assert result.exit_code == 0
    assert result.output == "X connected to:\n\tY (addr: /ip4/1.2.3.4/tcp/4001)\n\n"


def test_reports_append_to_file(runner, tmp_path, topology_file, network_file):
    """Test consecutive reports append to the output file."""
    output = tmp_path / "out" / "net.log"

    first = runner.invoke(main, ["links", topology_file, "-o", str(output)])
    second = runner.invoke(main, ["conns", network_file, "-o", str(output)])

    assert first.exit_code == 0
    assert second.exit_code == 0
    assert "Report written to" in second.output
    assert output.read_text() == (
        "Mocknet link map:\n\tA linked to:\n\t\tB (2 links)\n\n"
        "X connected to:\n\tY (addr: /ip4/1.2.3.4/tcp/4001)\n\n"
    )


def test_config_truncates_output(runner, tmp_path, network_file):
    """Test a config file with append disabled overwrites the output."""
    output = tmp_path / "net.log"
    output.write_text("stale\n")
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"output": str(output), "append": False}))

    result = runner.invoke(main, ["conns", network_file, "-c", str(config)])

    assert result.exit_code == 0
    assert output.read_text() == "X connected to:\n\tY (addr: /ip4/1.2.3.4/tcp/4001)\n\n"


def test_malformed_snapshot(runner, tmp_path):
    """Test a malformed snapshot exits with an error."""
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"conns": []}))

    result = runner.invoke(main, ["conns", str(path)])

    assert result.exit_code == 1
    assert "Error loading" in result.output


def test_invalid_json(runner, tmp_path):
    """Test unparseable JSON exits with an error."""
    path = tmp_path / "bad.json"
    path.write_text("{")

    result = runner.invoke(main, ["links", str(path)])

    assert result.exit_code == 1


def test_invalid_log_level(runner, topology_file):
    """Test an unknown log level is rejected before rendering."""
    result = runner.invoke(main, ["links", topology_file, "-l", "LOUD"])

    assert result.exit_code == 1
    assert "Mocknet link map" not in result.output


def test_bad_config_file_reported_as_config_error(runner, tmp_path, topology_file):
    """Test a non-string log level in the config file exits cleanly."""
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"log_level": 5}))

    result = runner.invoke(main, ["links", topology_file, "-c", str(config)])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert "Error loading" not in result.output
    assert "Mocknet link map" not in result.output


def test_generate_config(runner, tmp_path):
    """Test generating a configuration file."""
    path = tmp_path / "config.json"

    result = runner.invoke(main, ["generate-config", str(path), "-l", "INFO"])

    assert result.exit_code == 0
    data = json.loads(path.read_text())
    assert data["log_level"] == "INFO"
    assert data["output"] is None


def test_version(runner):
    """Test the version command."""
    result = runner.invoke(main, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
