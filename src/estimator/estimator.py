"""
Swap estimator.

Fans out the pair reads concurrently, joins them, orients the reserves
and applies the V2 output formula. One instance serves any number of
concurrent estimates; it holds only the injected pair reader.
"""

import asyncio
import logging
from typing import Awaitable, TypeVar, Union

from src.ledger.errors import DecodeError, RpcError
from src.ledger.uniswap_v2_pair import UniswapV2PairReader

from .errors import DecodeFailure, RpcFailure
from .math import get_amount_out
from .reconciler import reconcile
from .types import CanonicalOrdering, SwapQuote, normalize_address, parse_amount

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SwapEstimator:
    """
    Quote Uniswap V2 swaps from live pool state.

    Args:
        pair_reader: Reader used for the getReserves/token0/token1 calls
        strict_pair_check: Also read token1 and require the requested pair
            to be exactly the pool's pair
    """

    def __init__(self, pair_reader: UniswapV2PairReader, strict_pair_check: bool = True):
        self.pair_reader = pair_reader
        self.strict_pair_check = strict_pair_check
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    async def _stage(self, stage: str, operation: Awaitable[T]) -> T:
        """Await a ledger read, tagging failures with the stage name."""
        try:
            return await operation
        except RpcError as e:
            raise RpcFailure(f"failed to {stage.replace('_', ' ')}: {e}", stage=stage) from e
        except DecodeError as e:
            raise DecodeFailure(f"failed to {stage.replace('_', ' ')}: {e}", stage=stage) from e

    async def estimate(
        self,
        pool_address: str,
        src_token: str,
        dst_token: str,
        amount_in: Union[int, str],
    ) -> SwapQuote:
        """
        Estimate the output of swapping amount_in of src_token for dst_token.

        Args:
            pool_address: Uniswap V2 pair address
            src_token: Token sold
            dst_token: Token bought
            amount_in: Input amount in src_token base units

        Returns:
            SwapQuote with the output amount and the reserves it was computed from

        Raises:
            InputError: If an address or the amount is malformed
            RpcFailure: If a pair read fails at the node
            DecodeFailure: If a pair read returns data of the wrong shape
            TokenMismatchError: If the pool does not trade the requested pair
            ZeroReservesError: If the pool is empty
        """
        pool = normalize_address(pool_address, "pool address")
        src = normalize_address(src_token, "src token")
        dst = normalize_address(dst_token, "dst token")
        amount = parse_amount(amount_in, "src amount")

        reads = [
            self._stage("fetch_reserves", self.pair_reader.fetch_reserves(pool)),
            self._stage("fetch_token0", self.pair_reader.fetch_token0(pool)),
        ]
        if self.strict_pair_check:
            reads.append(self._stage("fetch_token1", self.pair_reader.fetch_token1(pool)))

        # Let every read settle so no failed sibling is left unobserved
        results = await asyncio.gather(*reads, return_exceptions=True)
        for result in results:
            if isinstance(result, Exception):
                raise result
        reserves, token0 = results[0], results[1]
        ordering = CanonicalOrdering(
            token0=token0,
            token1=results[2] if self.strict_pair_check else None,
        )

        snapshot = reconcile(reserves, ordering, src, dst)
        amount_out = get_amount_out(amount, snapshot.reserve_in, snapshot.reserve_out)

        self.logger.debug(
            f"Quote {pool}: {amount} {src} -> {amount_out} {dst} "
            f"(reserves {snapshot.reserve_in}/{snapshot.reserve_out})"
        )

        return SwapQuote(
            pool=pool,
            token_in=src,
            token_out=dst,
            amount_in=amount,
            amount_out=amount_out,
            snapshot=snapshot,
        )
