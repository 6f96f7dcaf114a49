"""
Value types passed between the estimation stages.

All of them are created per request and frozen; nothing is cached
between estimates.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from eth_typing import ChecksumAddress
from eth_utils import (
    is_address,
    is_checksum_address,
    is_checksum_formatted_address,
    to_checksum_address,
)

from .errors import InvalidAddressError, InvalidAmountError


@dataclass(frozen=True)
class CanonicalOrdering:
    """The pool's token ordering. token1 is only known in strict mode."""

    token0: ChecksumAddress
    token1: Optional[ChecksumAddress] = None


@dataclass(frozen=True)
class ReserveSnapshot:
    """Reserves oriented to the requested trade direction."""

    reserve_in: int
    reserve_out: int


@dataclass(frozen=True)
class SwapQuote:
    """Result of one estimate."""

    pool: ChecksumAddress
    token_in: ChecksumAddress
    token_out: ChecksumAddress
    amount_in: int
    amount_out: int
    snapshot: ReserveSnapshot

    def to_dict(self) -> dict:
        # amounts as strings; they routinely exceed 2**53
        return {
            "pool": self.pool,
            "src": self.token_in,
            "dst": self.token_out,
            "src_amount": str(self.amount_in),
            "dst_amount": str(self.amount_out),
            "reserve_in": str(self.snapshot.reserve_in),
            "reserve_out": str(self.snapshot.reserve_out),
        }


def normalize_address(value: Union[str, bytes], name: str = "address") -> ChecksumAddress:
    """
    Normalize a 20-byte address to its checksummed form.

    Accepts any case of 0x-prefixed hex, or 20 raw bytes. Mixed-case input
    with a wrong checksum is rejected rather than silently re-cased.

    Raises:
        InvalidAddressError: If value is not an address
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 20:
            raise InvalidAddressError(f"Invalid {name}: expected 20 bytes, got {len(value)}")
        return to_checksum_address(value)

    if not isinstance(value, str) or not is_address(value.strip()):
        raise InvalidAddressError(f"Invalid {name}: {value!r}")

    value = value.strip()
    if is_checksum_formatted_address(value) and not is_checksum_address(value):
        raise InvalidAddressError(f"Invalid {name}: bad checksum {value!r}")
    return to_checksum_address(value)


_AMOUNT_RE = re.compile(r"[+-]?[0-9]+")

# Largest value an on-chain amount can hold
MAX_UINT256 = 2**256 - 1


def parse_amount(value: Union[str, int], name: str = "amount") -> int:
    """
    Parse a non-negative integer amount in base units.

    Raises:
        InvalidAmountError: If value is not a non-negative decimal integer
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid {name}: {value!r}")

    if isinstance(value, int):
        amount = value
    elif isinstance(value, str) and _AMOUNT_RE.fullmatch(value.strip()):
        try:
            amount = int(value.strip())
        except ValueError:
            raise InvalidAmountError(f"Invalid {name}: too many digits")
    else:
        raise InvalidAmountError(f"Invalid {name} format: {value!r}")

    if amount < 0:
        raise InvalidAmountError(f"Invalid {name}: must not be negative, got {amount}")
    if amount > MAX_UINT256:
        raise InvalidAmountError(f"Invalid {name}: exceeds uint256")
    return amount
