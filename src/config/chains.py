"""
Chain and node configuration for the swap estimator.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from .base import BaseConfig, ConfigError


@dataclass
class ChainConfig(BaseConfig):
    """Ethereum node settings used by the ledger reader."""

    # ETH_NODE_URL wins; ETHEREUM_RPC_URL is accepted for older .env files
    ETH_NODE_URL: Optional[str] = field(
        default_factory=lambda: BaseConfig.get_env(
            "ETH_NODE_URL", BaseConfig.get_env("ETHEREUM_RPC_URL")
        )
    )
    CHAIN_ID: int = field(default_factory=lambda: BaseConfig.get_env_int("CHAIN_ID", 1))

    # Read settings
    RPC_TIMEOUT_SECONDS: float = field(
        default_factory=lambda: BaseConfig.get_env_float("RPC_TIMEOUT_SECONDS", 10.0)
    )
    BLOCK_IDENTIFIER: str = field(
        default_factory=lambda: BaseConfig.get_env("BLOCK_IDENTIFIER", "latest")
    )
    STRICT_PAIR_CHECK: bool = field(
        default_factory=lambda: BaseConfig.get_env_bool("STRICT_PAIR_CHECK", True)
    )

    def _validate_config(self):
        super()._validate_config()
        if self.RPC_TIMEOUT_SECONDS <= 0:
            raise ConfigError(
                f"RPC_TIMEOUT_SECONDS must be positive, got: {self.RPC_TIMEOUT_SECONDS}"
            )
        if self.ETH_NODE_URL and not self.ETH_NODE_URL.startswith(
            ("http://", "https://", "ws://", "wss://")
        ):
            raise ConfigError(f"Unsupported node URL scheme: {self.ETH_NODE_URL}")

    @property
    def rpc_url(self) -> str:
        """Node URL; raises ConfigError when unset."""
        if not self.ETH_NODE_URL:
            raise ConfigError("ETH_NODE_URL environment variable is required")
        return self.ETH_NODE_URL

    @property
    def block_identifier(self) -> Union[int, str]:
        """Block tag or number the pair reads are pinned to."""
        if self.BLOCK_IDENTIFIER.isdigit():
            return int(self.BLOCK_IDENTIFIER)
        return self.BLOCK_IDENTIFIER

    def get_reader_kwargs(self) -> Dict:
        """Keyword arguments for UniswapV2PairReader."""
        return {
            "timeout": self.RPC_TIMEOUT_SECONDS,
            "block_identifier": self.block_identifier,
        }
