# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for environment variable parsing.

Tests cover:
    - Unset variables fall back to the default
    - Valid values within range are returned
    - Out-of-range values log a warning and fall back to the default
    - Non-numeric values raise ExporterConfigurationError
"""

from __future__ import annotations

import logging

import pytest

from http_json_exporter.errors import ExporterConfigurationError
from http_json_exporter.utils import parse_env_float, parse_env_int

_VAR = "HTTP_JSON_EXPORTER_TEST_VALUE"


@pytest.mark.unit
class TestParseEnvFloat:
    def test_unset_returns_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(_VAR, raising=False)

        assert parse_env_float(_VAR, 5.0) == 5.0

    @pytest.mark.parametrize(
        ("raw", "expected"), [("2.5", 2.5), ("10", 10.0), (" 1e-3 ", 0.001)]
    )
    def test_valid_value(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: float
    ) -> None:
        monkeypatch.setenv(_VAR, raw)

        assert parse_env_float(_VAR, 5.0, min_value=0.001, max_value=60.0) == expected

    def test_boundaries_are_inclusive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(_VAR, "60")

        assert parse_env_float(_VAR, 5.0, min_value=1.0, max_value=60.0) == 60.0

    def test_below_minimum_uses_default(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv(_VAR, "0.5")

        with caplog.at_level(logging.WARNING):
            result = parse_env_float(_VAR, 5.0, min_value=1.0, max_value=60.0)

        assert result == 5.0
        assert "below minimum" in caplog.text
        assert _VAR in caplog.text

    def test_above_maximum_uses_default(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv(_VAR, "120")

        with caplog.at_level(logging.WARNING):
            result = parse_env_float(_VAR, 5.0, min_value=1.0, max_value=60.0)

        assert result == 5.0
        assert "above maximum" in caplog.text

    @pytest.mark.parametrize("raw", ["", "abc", "5s", "nan"])
    def test_invalid_value_raises(
        self, monkeypatch: pytest.MonkeyPatch, raw: str
    ) -> None:
        monkeypatch.setenv(_VAR, raw)

        with pytest.raises(ExporterConfigurationError) as exc_info:
            parse_env_float(_VAR, 5.0)

        assert "expected numeric value" in str(exc_info.value)
        assert exc_info.value.context["env_var"] == _VAR
        assert exc_info.value.context["operation"] == "parse_env_float"

    def test_error_does_not_echo_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(_VAR, "s3cr3t-value")

        with pytest.raises(ExporterConfigurationError) as exc_info:
            parse_env_float(_VAR, 5.0)

        assert "s3cr3t-value" not in str(exc_info.value)

    def test_service_name_in_context(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(_VAR, "abc")

        with pytest.raises(ExporterConfigurationError) as exc_info:
            parse_env_float(_VAR, 5.0, service_name="json_fetch_handler")

        assert exc_info.value.context["target_name"] == "json_fetch_handler"


@pytest.mark.unit
class TestParseEnvInt:
    def test_unset_returns_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(_VAR, raising=False)

        assert parse_env_int(_VAR, 1024) == 1024

    def test_valid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(_VAR, "4096")

        assert parse_env_int(_VAR, 1024, min_value=1, max_value=8192) == 4096

    @pytest.mark.parametrize("raw", ["1.5", "", "lots"])
    def test_invalid_value_raises(
        self, monkeypatch: pytest.MonkeyPatch, raw: str
    ) -> None:
        monkeypatch.setenv(_VAR, raw)

        with pytest.raises(ExporterConfigurationError, match="expected integer value"):
            parse_env_int(_VAR, 1024)

    def test_out_of_range_uses_default(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv(_VAR, "0")

        with caplog.at_level(logging.WARNING):
            result = parse_env_int(_VAR, 1024, min_value=1)

        assert result == 1024
        assert "below minimum" in caplog.text
