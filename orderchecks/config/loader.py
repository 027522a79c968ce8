"""
Config loader for the order API check suite.

This module provides the public API for loading and validating suite
configuration from YAML files, YAML strings and the environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

import yaml

from .models import BASE_URL_ENV, SuiteConfig
from .parser import ConfigParser
from .validation import ConfigValidator, ValidationResult


def load_config(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> tuple[SuiteConfig | None, ValidationResult]:
    """
    Load and validate suite configuration.

    Without a path the defaults are used. In both cases API_BASE_URL
    from the environment overrides the base URL.

    Args:
        path: Optional path to a YAML config file
        env: Environment mapping (defaults to os.environ)

    Returns:
        Tuple of (SuiteConfig or None, ValidationResult)
        If validation fails, SuiteConfig will be None.

    Example:
        config, result = load_config("orderchecks.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
    """
    if path is None:
        config, result = SuiteConfig(), ValidationResult()
    else:
        path = Path(path)
        if not path.exists():
            result = ValidationResult()
            result.add_error(
                str(path),
                "File not found",
                suggestion="Check the file path is correct"
            )
            return None, result

        with open(path, encoding="utf-8") as f:
            config, result = _load_text(f.read(), str(path))
        if config is None:
            return None, result

    return apply_env(config, env), result


def load_config_string(
    text: str,
    env: Mapping[str, str] | None = None,
) -> tuple[SuiteConfig | None, ValidationResult]:
    """
    Load and validate suite configuration from a YAML string.

    Useful for testing or dynamic config generation.
    """
    config, result = _load_text(text, "<string>")
    if config is None:
        return None, result
    return apply_env(config, env), result


def validate_config_yaml(path: str | Path) -> ValidationResult:
    """
    Validate a config file without building a SuiteConfig.

    Args:
        path: Path to the YAML file

    Returns:
        ValidationResult with any errors found
    """
    _, result = load_config(path, env={})
    return result


def apply_env(config: SuiteConfig, env: Mapping[str, str] | None = None) -> SuiteConfig:
    """Override the base URL from API_BASE_URL when it is set and non-empty."""
    env = os.environ if env is None else env
    base_url = env.get(BASE_URL_ENV)
    if base_url:
        config.base_url = base_url
    return config


def _load_text(text: str, source: str) -> tuple[SuiteConfig | None, ValidationResult]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            source,
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    if data is None:
        data = {}

    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            source,
            "File must contain a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    result = ConfigValidator(data).validate()
    if not result.is_valid:
        return None, result

    return ConfigParser(data).parse(), result
