"""
Uniswap V2 pair reader.

Reads what a quote needs from a pair contract: the packed reserves and
the canonical token ordering. Each read is a separate eth.call() since
the pair exposes them as separate view methods.
"""

from dataclasses import dataclass, replace
from typing import Optional

from eth_typing import ChecksumAddress
from web3 import Web3

from .base import CallConfig, ContractReader
from .errors import DecodeError

GET_RESERVES_SIGNATURE = "getReserves()"
GET_RESERVES_TYPES = ["uint112", "uint112", "uint32"]

TOKEN0_SIGNATURE = "token0()"
TOKEN1_SIGNATURE = "token1()"
ADDRESS_TYPES = ["address"]


@dataclass(frozen=True)
class ReservePair:
    """Pair reserves in canonical (token0, token1) order."""

    reserve0: int
    reserve1: int
    block_timestamp_last: int = 0


class UniswapV2PairReader(ContractReader):
    """
    Reader for Uniswap V2 (and fork) pair contracts.

    Reserves are uint112 on-chain and decoded to Python ints, so no
    fixed-width arithmetic ever touches them.
    """

    def __init__(
        self,
        web3: Web3,
        config: Optional[CallConfig] = None,
        timeout: Optional[float] = None,
        block_identifier=None,
    ):
        """
        Initialize the pair reader.

        Args:
            web3: Web3 instance
            config: Call configuration
            timeout: Shortcut for config.timeout
            block_identifier: Shortcut for config.block_identifier
        """
        config = config or CallConfig()
        if timeout is not None:
            config = replace(config, timeout=timeout)
        if block_identifier is not None:
            config = replace(config, block_identifier=block_identifier)
        super().__init__(web3, config)

    async def fetch_reserves(self, pair_address: str) -> ReservePair:
        """
        Fetch current reserves of a pair.

        Args:
            pair_address: Pair contract address

        Returns:
            ReservePair with reserve0, reserve1 and the last update timestamp

        Raises:
            RpcError: If the call fails
            DecodeError: If the result is not (uint112, uint112, uint32)
        """
        reserve0, reserve1, block_timestamp_last = await self.call_view(
            pair_address, GET_RESERVES_SIGNATURE, GET_RESERVES_TYPES
        )
        return ReservePair(
            reserve0=reserve0,
            reserve1=reserve1,
            block_timestamp_last=block_timestamp_last,
        )

    async def fetch_token0(self, pair_address: str) -> ChecksumAddress:
        """Fetch the pair's token0 address."""
        return await self._fetch_token(pair_address, TOKEN0_SIGNATURE)

    async def fetch_token1(self, pair_address: str) -> ChecksumAddress:
        """Fetch the pair's token1 address."""
        return await self._fetch_token(pair_address, TOKEN1_SIGNATURE)

    async def _fetch_token(self, pair_address: str, signature: str) -> ChecksumAddress:
        (token,) = await self.call_view(pair_address, signature, ADDRESS_TYPES)
        try:
            return Web3.to_checksum_address(token)
        except (ValueError, TypeError) as e:
            method = self._method_name(signature)
            raise DecodeError(
                f"{method} on {pair_address} returned a non-address value: {token!r}",
                method,
                pair_address,
            ) from e
