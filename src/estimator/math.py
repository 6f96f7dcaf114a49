"""
Uniswap V2 swap math.

Integer-only port of UniswapV2Library.getAmountOut / getAmountIn. Python
ints are unbounded, so the intermediate products (which pass 224 bits for
112-bit reserves) never overflow, and // floors exactly like the
Solidity division for non-negative operands.

Key concepts:
- Fee: 0.3%, applied to the input as amount_in * 997 / 1000
- Output: floor(amount_in_with_fee * reserve_out / (reserve_in * 1000 + amount_in_with_fee))
"""

from .errors import InsufficientLiquidityError, InvalidAmountError, ZeroReservesError

FEE_NUMERATOR = 997
FEE_DENOMINATOR = 1000


def _check_reserves(reserve_in: int, reserve_out: int) -> None:
    if reserve_in <= 0 or reserve_out <= 0:
        raise ZeroReservesError(
            f"Pool has no liquidity: reserve_in={reserve_in}, reserve_out={reserve_out}",
            stage="compute",
        )


def get_amount_out(amount_in: int, reserve_in: int, reserve_out: int) -> int:
    """
    Calculate the output amount of a swap.

    Formula:
        amount_in_with_fee = amount_in * 997
        amount_out = amount_in_with_fee * reserve_out // (reserve_in * 1000 + amount_in_with_fee)

    Args:
        amount_in: Input amount in base units
        reserve_in: Pool reserve of the input token
        reserve_out: Pool reserve of the output token

    Returns:
        Output amount, always < reserve_out

    Raises:
        ZeroReservesError: If either reserve is zero
        InvalidAmountError: If amount_in is negative
    """
    _check_reserves(reserve_in, reserve_out)
    if amount_in < 0:
        raise InvalidAmountError(f"amount_in must not be negative, got {amount_in}", stage="compute")

    amount_in_with_fee = amount_in * FEE_NUMERATOR
    numerator = amount_in_with_fee * reserve_out
    denominator = reserve_in * FEE_DENOMINATOR + amount_in_with_fee

    return numerator // denominator


def get_amount_in(amount_out: int, reserve_in: int, reserve_out: int) -> int:
    """
    Calculate the input needed to receive amount_out.

    Rounds up by one, as the router does, so that
    get_amount_out(get_amount_in(x)) >= x.

    Raises:
        ZeroReservesError: If either reserve is zero
        InvalidAmountError: If amount_out is negative
        InsufficientLiquidityError: If amount_out >= reserve_out
    """
    _check_reserves(reserve_in, reserve_out)
    if amount_out < 0:
        raise InvalidAmountError(f"amount_out must not be negative, got {amount_out}", stage="compute")
    if amount_out >= reserve_out:
        raise InsufficientLiquidityError(
            f"amount_out {amount_out} exceeds available reserve {reserve_out}",
            stage="compute",
        )

    numerator = reserve_in * amount_out * FEE_DENOMINATOR
    denominator = (reserve_out - amount_out) * FEE_NUMERATOR

    return numerator // denominator + 1
