"""
Configuration management for the swap estimator.

Use get_config() to access all configuration settings.

Example:
    from src.config import get_config

    config = get_config()

    # Node the pair reads go to
    node_url = config.chains.rpc_url

    # Where the API listens
    host, port = config.server.HOST, config.server.PORT
"""

from .base import BaseConfig, ConfigError
from .chains import ChainConfig
from .manager import ConfigManager, get_config, reload_config
from .server import ServerConfig

__all__ = [
    "BaseConfig",
    "ConfigError",
    "ChainConfig",
    "ServerConfig",
    "ConfigManager",
    "get_config",
    "reload_config",
]
