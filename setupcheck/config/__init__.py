"""Configuration handling for the setup checker."""

from .models import VerifierConfig
from .loader import ConfigLoader, ConfigError

__all__ = [
    "VerifierConfig",
    "ConfigLoader",
    "ConfigError",
]
