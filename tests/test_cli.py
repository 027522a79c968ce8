"""Tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from orderchecks import __version__
from orderchecks.cli import app

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "orderchecks.yaml"
    path.write_text("api:\n  base_url: http://orders:9090\norders:\n  order_id: ord-7\n")
    return path


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_info():
    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    assert "POST /api/orders" in result.output


def test_reset_then_show(report_path):
    report_path.parent.mkdir(parents=True)
    report_path.write_text("old\n")

    result = runner.invoke(app, ["reset", "--report", str(report_path)])
    assert result.exit_code == 0
    assert report_path.read_text() == ""

    result = runner.invoke(app, ["show", "--report", str(report_path)])
    assert result.exit_code == 0
    assert "No failures recorded" in result.output


def test_show_prints_report(report_path):
    report_path.parent.mkdir(parents=True)
    report_path.write_text("=== Test: create_order @ 2024-05-30T10:00:00+00:00 ===\n")

    result = runner.invoke(app, ["show", "--report", str(report_path)])

    assert result.exit_code == 0
    assert "=== Test: create_order" in result.output


def test_validate_good_config(config_file):
    result = runner.invoke(app, ["validate", str(config_file)])

    assert result.exit_code == 0
    assert "Valid config" in result.output
    assert "ord-7" in result.output


def test_validate_bad_config(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("api:\n  request_timeout_s: -1\n")

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 1
    assert "Validation failed" in result.output


def test_run_against_unreachable_api(report_path, unreachable_url):
    result = runner.invoke(
        app,
        ["run", "--base-url", unreachable_url, "--report", str(report_path), "--quiet"],
    )

    assert result.exit_code == 1
    assert "2 check(s) failed" in result.output
    text = report_path.read_text()
    assert text.count("Response: none (request failed)") == 2


def test_run_with_invalid_config(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("api:\n  base_url: orders\n")

    result = runner.invoke(app, ["run", "--config", str(path)])

    assert result.exit_code == 2
    assert "Config validation failed" in result.output
