"""
Tests for the V2 output formula.

Expected values were computed independently with arbitrary-precision
integers and must match bit for bit.
"""

import pytest

from src.estimator import (
    InsufficientLiquidityError,
    InvalidAmountError,
    ZeroReservesError,
    get_amount_in,
    get_amount_out,
)

# USDT/WETH snapshot: reserve0 = USDT (6 decimals), reserve1 = WETH (18 decimals)
USDT_RESERVE = 16847393527134
WETH_RESERVE = 6912345678901234567890

MAX_UINT112 = 2**112 - 1


class TestGetAmountOut:

    def test_usdt_to_weth_exact(self):
        # floor(10_000_000 * 997 * R1 / (R0 * 1000 + 10_000_000 * 997))
        assert get_amount_out(10_000_000, USDT_RESERVE, WETH_RESERVE) == 4090605797526543

    def test_weth_to_usdt_exact(self):
        assert get_amount_out(10**18, WETH_RESERVE, USDT_RESERVE) == 2429628057

    def test_matches_solidity_reference(self):
        """Same vector as the router's getAmountOut for a 1000 ETH / 2M USDC pool."""
        assert get_amount_out(2000 * 10**6, 2_000_000 * 10**6, 1000 * 10**18) == 996006981039903216

    @pytest.mark.parametrize("amount_in,expected", [
        (1, 0),
        (2, 1),
        (1000, 996),
        (1003, 998),
    ])
    def test_floors_small_amounts(self, amount_in, expected):
        assert get_amount_out(amount_in, 10**6, 10**6) == expected

    def test_zero_input(self):
        assert get_amount_out(0, USDT_RESERVE, WETH_RESERVE) == 0

    def test_result_is_int(self):
        assert isinstance(get_amount_out(10**25, 10**30, 10**30), int)

    def test_large_amount_does_not_overflow(self):
        amount_out = get_amount_out(10**30, MAX_UINT112, MAX_UINT112)

        assert amount_out == 996808597582367419213564832871
        assert amount_out < MAX_UINT112

    def test_huge_amount_approaches_reserve(self):
        amount_out = get_amount_out(2**256 - 1, MAX_UINT112, MAX_UINT112)

        assert amount_out == MAX_UINT112 - 1

    def test_below_feeless_price(self):
        amount_in = 10_000_000
        assert get_amount_out(amount_in, USDT_RESERVE, WETH_RESERVE) < (
            amount_in * WETH_RESERVE // USDT_RESERVE
        )

    def test_monotonic_in_amount(self):
        amounts = [0, 1, 10, 10**3, 10**6, 10**7, 10**12, 10**18, 10**24, 10**30]
        outputs = [get_amount_out(a, USDT_RESERVE, WETH_RESERVE) for a in amounts]

        assert outputs == sorted(outputs)
        assert all(0 <= out < WETH_RESERVE for out in outputs)

    @pytest.mark.parametrize("reserve_in,reserve_out", [
        (0, WETH_RESERVE),
        (USDT_RESERVE, 0),
        (0, 0),
    ])
    def test_zero_reserves(self, reserve_in, reserve_out):
        with pytest.raises(ZeroReservesError) as exc_info:
            get_amount_out(10_000_000, reserve_in, reserve_out)

        assert exc_info.value.stage == "compute"

    def test_zero_reserves_fail_even_for_zero_input(self):
        with pytest.raises(ZeroReservesError):
            get_amount_out(0, 0, WETH_RESERVE)

    def test_negative_input(self):
        with pytest.raises(InvalidAmountError):
            get_amount_out(-1, USDT_RESERVE, WETH_RESERVE)


class TestGetAmountIn:

    def test_inverse_exact(self):
        assert get_amount_in(10**18, USDT_RESERVE, WETH_RESERVE) == 2444977951

    def test_inverse_covers_requested_output(self):
        amount_in = get_amount_in(10**18, USDT_RESERVE, WETH_RESERVE)

        assert get_amount_out(amount_in, USDT_RESERVE, WETH_RESERVE) >= 10**18
        assert get_amount_out(amount_in - 1, USDT_RESERVE, WETH_RESERVE) < 10**18

    def test_output_at_reserve_is_unreachable(self):
        with pytest.raises(InsufficientLiquidityError):
            get_amount_in(WETH_RESERVE, USDT_RESERVE, WETH_RESERVE)

    def test_zero_reserves(self):
        with pytest.raises(ZeroReservesError):
            get_amount_in(1, 0, WETH_RESERVE)
