"""
Shared fixtures: a fake Ethereum node serving one Uniswap V2 pair.
"""

from typing import Any, Dict, List, Tuple
from unittest.mock import MagicMock

import pytest
from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector, to_checksum_address
from hexbytes import HexBytes

WETH = to_checksum_address("0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")
USDT = to_checksum_address("0xdac17f958d2ee523a2206206994597c13d831ec7")
USDC = to_checksum_address("0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48")
USDT_WETH_PAIR = to_checksum_address("0x0d4a11d5eeaac28ec3f61d100daf4d40471f1852")

GET_RESERVES = function_signature_to_4byte_selector("getReserves()")
TOKEN0 = function_signature_to_4byte_selector("token0()")
TOKEN1 = function_signature_to_4byte_selector("token1()")


class FakePairNode:
    """Answers eth.call for getReserves/token0/token1 on a single pair."""

    def __init__(
        self,
        reserve0: int,
        reserve1: int,
        token0: str,
        token1: str,
        block_timestamp_last: int = 1700000000,
    ):
        self.responses: Dict[bytes, Any] = {
            GET_RESERVES: encode(
                ["uint112", "uint112", "uint32"], [reserve0, reserve1, block_timestamp_last]
            ),
            TOKEN0: encode(["address"], [token0]),
            TOKEN1: encode(["address"], [token1]),
        }
        self.calls: List[Tuple[str, bytes, Any]] = []
        self.web3 = MagicMock()
        self.web3.eth.call.side_effect = self._call

    def respond(self, selector: bytes, response: Any):
        """Override the answer for one method: raw bytes or an exception."""
        self.responses[selector] = response

    def _call(self, transaction, block_identifier="latest"):
        selector = HexBytes(transaction["data"])[:4]
        self.calls.append((transaction["to"], bytes(selector), block_identifier))
        response = self.responses[bytes(selector)]
        if isinstance(response, Exception):
            raise response
        return HexBytes(response)

    def called_selectors(self) -> List[bytes]:
        return [selector for _, selector, _ in self.calls]


@pytest.fixture
def make_pair_node():
    """Factory for FakePairNode."""
    return FakePairNode


@pytest.fixture
def usdt_weth_node():
    """Pair with USDT as token0, reserves from a USDT/WETH snapshot."""
    return FakePairNode(
        reserve0=16847393527134,  # USDT, 6 decimals
        reserve1=6912345678901234567890,  # WETH, 18 decimals
        token0=USDT,
        token1=WETH,
    )
