"""Config validation errors.

All of them are :class:`ConfigError`, so wiring code can catch one type
when settings fail to load or a breaker is configured with bad values.
"""
from __future__ import annotations

from shiplink.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without a default was not provided."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Missing required setting '{setting_name}'",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting was provided but its value cannot be used.

    The rejected value is kept on the instance but left out of ``detail``,
    which ends up in logs and HTTP bodies and may hold a secret.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Invalid value {value!r} for setting '{setting_name}': {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
