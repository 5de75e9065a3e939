"""Config settings – 12-factor env-based configuration."""
from shiplink.config.settings.base import Settings
from shiplink.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from shiplink.config.settings.resilience import CircuitBreakerSettings

__all__ = [
    "CircuitBreakerSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsLoader",
]
