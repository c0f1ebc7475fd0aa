"""
Configuration loader for environment overrides.

Every requirement has a built-in default that a SETUPCHECK_* variable can
override for the current run. Nothing is written back.
"""

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from .models import VerifierConfig

ENV_PREFIX = "SETUPCHECK_"


class ConfigError(Exception):
    """Configuration loading or validation error."""
    pass


class ConfigLoader:
    """
    Builds a VerifierConfig from defaults and environment overrides.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Initialize the config loader.

        Args:
            environ: Variables to read overrides from. Defaults to os.environ
        """
        self.environ = os.environ if environ is None else environ

    def overrides(self) -> Dict[str, Any]:
        """Collect SETUPCHECK_* values for known fields."""
        data = {}
        for field_name in VerifierConfig.model_fields:
            key = ENV_PREFIX + field_name.upper()
            if key in self.environ:
                data[field_name] = self.environ[key]
        return data

    def load(self) -> VerifierConfig:
        """
        Load the configuration.

        Raises:
            ConfigError: If an override is invalid
        """
        try:
            return VerifierConfig(**self.overrides())
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}")
