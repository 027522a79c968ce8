"""
Validation for suite configuration files.

This module checks raw parsed YAML against the config layout and
reports errors with helpful messages.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "api.request_timeout_s"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"{self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   Hint: {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of config validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "Config validation passed"
        lines = [f"Config validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


# ─────────────────────────────────────────────────────────────────────────────
# Config Validator
# ─────────────────────────────────────────────────────────────────────────────

class ConfigValidator:
    """Validates raw parsed YAML against the suite config layout."""

    SECTIONS = {
        "api": {"base_url", "connect_timeout_s", "request_timeout_s"},
        "report": {"path", "pipeline_repo", "automation_repo"},
        "orders": {"order_id", "suspect_source"},
    }

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_api()
        self._validate_strings("report", ("path", "pipeline_repo", "automation_repo"))
        self._validate_strings("orders", ("order_id", "suspect_source"))

        return self.result

    def _validate_top_level(self) -> None:
        """Check unknown sections and unknown keys inside known sections."""
        for key, section in self.data.items():
            if key not in self.SECTIONS:
                self.result.add_error(
                    key,
                    f"Unknown top-level field '{key}'",
                    suggestion=f"Valid fields are: {', '.join(sorted(self.SECTIONS))}"
                )
                continue

            if section is None:
                continue

            if not isinstance(section, dict):
                self.result.add_error(key, "Must be an object", value=section)
                continue

            for name in set(section) - self.SECTIONS[key]:
                self.result.add_error(
                    f"{key}.{name}",
                    f"Unknown field '{name}'",
                    suggestion=f"Valid fields are: {', '.join(sorted(self.SECTIONS[key]))}"
                )

    def _validate_api(self) -> None:
        api = self.data.get("api") or {}

        url = api.get("base_url")
        if url is not None:
            if not isinstance(url, str):
                self.result.add_error(
                    "api.base_url",
                    "Must be a string",
                    value=url
                )
            elif not (url.startswith("http://") or url.startswith("https://")):
                self.result.add_error(
                    "api.base_url",
                    "Must be a valid HTTP(S) URL",
                    value=url,
                    suggestion="URL should start with 'http://' or 'https://'"
                )

        for name in ("connect_timeout_s", "request_timeout_s"):
            value = api.get(name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                self.result.add_error(
                    f"api.{name}",
                    "Must be a number",
                    value=value
                )
            elif value <= 0:
                self.result.add_error(
                    f"api.{name}",
                    "Must be > 0",
                    value=value,
                    suggestion="Use a timeout in seconds, e.g. 10"
                )

    def _validate_strings(self, section: str, names: tuple[str, ...]) -> None:
        data = self.data.get(section) or {}
        for name in names:
            value = data.get(name)
            if value is None:
                continue
            if not isinstance(value, str):
                self.result.add_error(
                    f"{section}.{name}",
                    "Must be a string",
                    value=value
                )
            elif not value.strip():
                self.result.add_error(
                    f"{section}.{name}",
                    "Cannot be empty"
                )
