"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar


@dataclasses.dataclass
class Settings:
    """Base for 12-factor settings dataclasses.

    A subclass declares its fields with defaults and a ``_prefix``; field
    ``reset_timeout_ms`` under prefix ``CIRCUIT_BREAKER`` is read from
    ``CIRCUIT_BREAKER_RESET_TIMEOUT_MS``. Validation runs on construction,
    so an invalid instance never exists whichever loader built it.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable name for *field_name*."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def as_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    def _validate(self) -> None:
        """Hook for subclasses. Raise ``InvalidSettingValueError`` on bad values."""


__all__ = ["Settings"]
