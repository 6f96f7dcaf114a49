"""
Read-only ledger access.

This package wraps eth.call() against pair contracts and decodes the
results into typed values, so nothing above it handles raw ABI data.
"""

from .base import CallConfig, ContractReader
from .errors import DecodeError, ErrorHandler, LedgerError, RpcError
from .uniswap_v2_pair import ReservePair, UniswapV2PairReader

__all__ = [
    'CallConfig',
    'ContractReader',
    'LedgerError',
    'RpcError',
    'DecodeError',
    'ErrorHandler',
    'ReservePair',
    'UniswapV2PairReader',
]
