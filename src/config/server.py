"""
HTTP server configuration for the swap estimator API.
"""

from dataclasses import dataclass, field

from .base import BaseConfig, ConfigError


@dataclass
class ServerConfig(BaseConfig):
    """Bind address for the estimate API."""

    HOST: str = field(default_factory=lambda: BaseConfig.get_env("HOST", "0.0.0.0"))
    PORT: int = field(default_factory=lambda: BaseConfig.get_env_int("PORT", 1337))

    def _validate_config(self):
        super()._validate_config()
        if not 0 < self.PORT < 65536:
            raise ConfigError(f"Invalid port: {self.PORT}")
