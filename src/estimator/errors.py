"""
Exceptions raised by swap estimation.

Every error carries the stage that failed and a stable code, so the API
layer can map it to a status and message without inspecting text.
"""

from typing import Optional


class EstimationError(Exception):
    """Base exception for a failed estimate."""

    code = "estimation_error"

    def __init__(self, message: str, stage: Optional[str] = None):
        super().__init__(message)
        self.stage = stage


class InputError(EstimationError):
    """Caller-supplied data is malformed. Never reaches the ledger."""

    code = "invalid_input"

    def __init__(self, message: str, stage: Optional[str] = "parse"):
        super().__init__(message, stage)


class MissingParameterError(InputError):
    code = "missing_parameter"


class InvalidAddressError(InputError):
    code = "invalid_address"


class InvalidAmountError(InputError):
    code = "invalid_amount"


class RpcFailure(EstimationError):
    """The node call behind a ledger read failed."""

    code = "rpc_failure"


class DecodeFailure(EstimationError):
    """A ledger read returned data of the wrong shape."""

    code = "decode_failure"


class TokenMismatchError(EstimationError):
    """The requested token pair is not the pool's pair."""

    code = "token_mismatch"


class ZeroReservesError(EstimationError):
    """The pool has an empty reserve, so no price exists."""

    code = "zero_reserves"


class InsufficientLiquidityError(EstimationError):
    """Requested output is not reachable with the pool's reserves."""

    code = "insufficient_liquidity"
