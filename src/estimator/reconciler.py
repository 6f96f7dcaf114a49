"""
Orient pool reserves to a requested trade direction.
"""

from eth_typing import ChecksumAddress

from src.ledger.uniswap_v2_pair import ReservePair

from .errors import TokenMismatchError
from .types import CanonicalOrdering, ReserveSnapshot


def reconcile(
    reserves: ReservePair,
    ordering: CanonicalOrdering,
    src_token: ChecksumAddress,
    dst_token: ChecksumAddress,
) -> ReserveSnapshot:
    """
    Map (src_token, dst_token) onto (reserve_in, reserve_out).

    token0 == src selects (reserve0, reserve1); token0 == dst selects
    (reserve1, reserve0). When the ordering carries token1 the pair is
    checked in full: {src, dst} must equal {token0, token1}. Without
    token1 only token0 is checked, so an unrelated src paired with
    dst == token0 still quotes against reserve1.

    Addresses must already be checksummed (see types.normalize_address).

    Raises:
        TokenMismatchError: If the pool does not trade the requested pair
    """
    token0, token1 = ordering.token0, ordering.token1

    if token1 is not None and {src_token, dst_token} != {token0, token1}:
        raise TokenMismatchError(
            f"Pool trades {token0}/{token1}, not {src_token}/{dst_token}",
            stage="reconcile",
        )

    if token0 == src_token:
        return ReserveSnapshot(reserve_in=reserves.reserve0, reserve_out=reserves.reserve1)
    if token0 == dst_token:
        return ReserveSnapshot(reserve_in=reserves.reserve1, reserve_out=reserves.reserve0)

    raise TokenMismatchError(
        f"Neither {src_token} nor {dst_token} is the pool's token0 {token0}",
        stage="reconcile",
    )
