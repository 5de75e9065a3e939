"""Unit tests for config validation errors."""

from __future__ import annotations

import pytest

from shiplink.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from shiplink.kernel.errors import ApplicationError


class TestConfigError:
    def test_is_application_error(self) -> None:
        assert isinstance(ConfigError("something went wrong"), ApplicationError)

    def test_default_code(self) -> None:
        assert ConfigError("bad").code == "config_error"

    def test_custom_code_override(self) -> None:
        assert ConfigError("msg", code="custom_cfg").code == "custom_cfg"


class TestMissingRequiredSettingError:
    def test_setting_name_stored(self) -> None:
        err = MissingRequiredSettingError("CIRCUIT_BREAKER_FAILURE_THRESHOLD")
        assert err.setting_name == "CIRCUIT_BREAKER_FAILURE_THRESHOLD"
        assert "CIRCUIT_BREAKER_FAILURE_THRESHOLD" in str(err)
        assert err.detail == {"setting": "CIRCUIT_BREAKER_FAILURE_THRESHOLD"}

    def test_default_code(self) -> None:
        assert MissingRequiredSettingError("X").code == "missing_required_setting"

    def test_caught_as_config_error(self) -> None:
        with pytest.raises(ConfigError):
            raise MissingRequiredSettingError("X")


class TestInvalidSettingValueError:
    def test_attributes(self) -> None:
        err = InvalidSettingValueError("failure_threshold", 0, "must be a positive integer")
        assert err.setting_name == "failure_threshold"
        assert err.value == 0
        assert err.reason == "must be a positive integer"
        assert err.code == "invalid_setting_value"

    def test_message_and_detail(self) -> None:
        err = InvalidSettingValueError("reset_timeout_ms", -5, "must be a positive duration")
        assert "reset_timeout_ms" in str(err)
        assert "-5" in str(err)
        assert err.to_dict()["detail"] == {
            "setting": "reset_timeout_ms",
            "reason": "must be a positive duration",
        }

    def test_caught_as_config_error(self) -> None:
        with pytest.raises(ConfigError):
            raise InvalidSettingValueError("x", None, "required")
