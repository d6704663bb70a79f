"""Explicit runtime configuration handed to every Maps Platform adapter."""
from __future__ import annotations

import os
from dataclasses import dataclass

from gmp_tools.tools.exceptions import ToolConfigurationError, ToolCredentialsMissingError

DEFAULT_API_KEY_ENV = "GOOGLE_MAPS_PLATFORM_API_KEY"


@dataclass(frozen=True)
class MapsConfig:
    """Credentials shared by all adapters of one provider instance."""

    api_key: str

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ToolConfigurationError("MapsConfig requires a non-empty api_key.")

    def __repr__(self) -> str:
        return "MapsConfig(api_key='***')"

    @classmethod
    def from_env(cls, env_var: str = DEFAULT_API_KEY_ENV) -> "MapsConfig":
        """
        Build a config from the process environment.

        Raises:
            ToolCredentialsMissingError: if ``env_var`` is unset or empty.
        """
        api_key = os.getenv(env_var)
        if not api_key:
            raise ToolCredentialsMissingError(env_var)
        return cls(api_key=api_key)
