"""
Constant-product swap estimation.

This package turns live pair state into an exact integer quote:
types and errors shared by the stages, the reserve reconciler, the V2
output formula and the SwapEstimator that wires them together.
"""

from .errors import (
    DecodeFailure,
    EstimationError,
    InputError,
    InsufficientLiquidityError,
    InvalidAddressError,
    InvalidAmountError,
    MissingParameterError,
    RpcFailure,
    TokenMismatchError,
    ZeroReservesError,
)
from .estimator import SwapEstimator
from .math import FEE_DENOMINATOR, FEE_NUMERATOR, get_amount_in, get_amount_out
from .reconciler import reconcile
from .types import CanonicalOrdering, ReserveSnapshot, SwapQuote, normalize_address, parse_amount

__all__ = [
    'SwapEstimator',
    'get_amount_out',
    'get_amount_in',
    'FEE_NUMERATOR',
    'FEE_DENOMINATOR',
    'reconcile',
    'CanonicalOrdering',
    'ReserveSnapshot',
    'SwapQuote',
    'normalize_address',
    'parse_amount',
    'EstimationError',
    'InputError',
    'MissingParameterError',
    'InvalidAddressError',
    'InvalidAmountError',
    'RpcFailure',
    'DecodeFailure',
    'TokenMismatchError',
    'ZeroReservesError',
    'InsufficientLiquidityError',
]
