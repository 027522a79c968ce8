"""Tests for suite configuration loading and validation."""

from pathlib import Path

import pytest

from orderchecks.config import (
    DEFAULT_BASE_URL,
    SuiteConfig,
    load_config,
    load_config_string,
    validate_config_yaml,
)
from orderchecks.reporting import DEFAULT_REPORT_PATH

FULL_CONFIG = """
api:
  base_url: http://orders.internal:8080
  connect_timeout_s: 2
  request_timeout_s: 7.5
report:
  path: out/report.txt
  pipeline_repo: https://example.com/pipeline.git
orders:
  order_id: ord-1
"""


def test_defaults_without_file():
    config, result = load_config(env={})

    assert result.is_valid
    assert config == SuiteConfig()
    assert config.base_url == DEFAULT_BASE_URL == "http://localhost:9090"
    assert config.connect_timeout_s == 5.0
    assert config.request_timeout_s == 10.0
    assert config.report_path == DEFAULT_REPORT_PATH == Path("build/reports/curl-report.txt")


def test_env_overrides_default_base_url():
    config, _ = load_config(env={"API_BASE_URL": "http://staging:9090"})

    assert config.base_url == "http://staging:9090"


def test_empty_env_value_is_ignored():
    config, _ = load_config(env={"API_BASE_URL": ""})

    assert config.base_url == DEFAULT_BASE_URL


def test_load_file(tmp_path):
    path = tmp_path / "orderchecks.yaml"
    path.write_text(FULL_CONFIG)

    config, result = load_config(path, env={})

    assert result.is_valid
    assert config.base_url == "http://orders.internal:8080"
    assert config.connect_timeout_s == 2.0
    assert config.request_timeout_s == 7.5
    assert config.report_path == Path("out/report.txt")
    assert config.pipeline_repo == "https://example.com/pipeline.git"
    assert config.order_id == "ord-1"


def test_env_overrides_file(tmp_path):
    path = tmp_path / "orderchecks.yaml"
    path.write_text(FULL_CONFIG)

    config, _ = load_config(path, env={"API_BASE_URL": "http://ci:9090"})

    assert config.base_url == "http://ci:9090"
    assert config.order_id == "ord-1"


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    config, result = load_config(path, env={})

    assert result.is_valid
    assert config == SuiteConfig()


def test_missing_file(tmp_path):
    config, result = load_config(tmp_path / "nope.yaml", env={})

    assert config is None
    assert not result.is_valid
    assert "File not found" in str(result)


@pytest.mark.parametrize(
    "text, path, message",
    [
        ("api:\n  base_url: ftp://orders\n", "api.base_url", "Must be a valid HTTP(S) URL"),
        ("api:\n  base_url: 9090\n", "api.base_url", "Must be a string"),
        ("api:\n  request_timeout_s: 0\n", "api.request_timeout_s", "Must be > 0"),
        ("api:\n  connect_timeout_s: fast\n", "api.connect_timeout_s", "Must be a number"),
        ("api:\n  connect_timeout_s: true\n", "api.connect_timeout_s", "Must be a number"),
        ("orders:\n  order_id: ''\n", "orders.order_id", "Cannot be empty"),
        ("report: [a, b]\n", "report", "Must be an object"),
        ("reports:\n  path: x\n", "reports", "Unknown top-level field"),
        ("api:\n  url: http://x\n", "api.url", "Unknown field"),
    ],
)
def test_invalid_values(text, path, message):
    config, result = load_config_string(text, env={})

    assert config is None
    assert [e.path for e in result.errors] == [path]
    assert message in result.errors[0].message


def test_invalid_yaml():
    config, result = load_config_string("api: [unclosed", env={})

    assert config is None
    assert "Invalid YAML syntax" in str(result)


def test_non_mapping_yaml():
    config, result = load_config_string("- a\n- b\n", env={})

    assert config is None
    assert "must contain a YAML object" in str(result)


def test_validate_config_yaml(tmp_path):
    good = tmp_path / "good.yaml"
    good.write_text(FULL_CONFIG)
    bad = tmp_path / "bad.yaml"
    bad.write_text("api:\n  base_url: orders\n")

    assert validate_config_yaml(good).is_valid
    assert not validate_config_yaml(bad).is_valid
