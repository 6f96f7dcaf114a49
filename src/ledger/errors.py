"""
Error handling utilities for ledger read operations.

This module provides the exception classes raised by the pair reader and
an ErrorHandler that classifies and logs failed node calls.
"""

from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class LedgerError(Exception):
    """Base exception for ledger reads."""

    def __init__(self, message: str, method: Optional[str] = None, address: Optional[str] = None):
        super().__init__(message)
        self.method = method
        self.address = address


class RpcError(LedgerError):
    """Raised when the node call fails (transport error, rejection, revert, timeout)."""
    pass


class DecodeError(LedgerError):
    """Raised when a call returns a payload that does not match the expected ABI types."""
    pass


class ErrorHandler:
    """
    Centralized error classification and logging for ledger reads.

    Reads are point-in-time, so nothing here retries; the handler only
    decides how loudly a failure is reported.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def classify_error(self, error: Exception) -> str:
        """
        Classify an error into a category for logging.

        Args:
            error: Exception to classify

        Returns:
            Error category string
        """
        if isinstance(error, DecodeError):
            return 'decode'

        if isinstance(error, TimeoutError):
            return 'timeout'

        error_str = str(error).lower()

        if 'timed out' in error_str or 'timeout' in error_str:
            return 'timeout'

        # Contract execution errors
        if any(keyword in error_str for keyword in ['revert', 'execution reverted', 'out of gas']):
            return 'contract'

        # Network connectivity errors
        if any(keyword in error_str for keyword in ['connection', 'network', 'dns', 'refused']):
            return 'network'

        return 'unknown'

    def log_error(self, error: Exception, context: Dict[str, Any]):
        """
        Log error with appropriate level and context.

        Args:
            error: Exception to log
            context: Additional context for logging
        """
        error_category = self.classify_error(error)

        log_data = {
            'error_type': type(error).__name__,
            'error_category': error_category,
            'error_message': str(error),
            **context
        }

        # Decode and revert failures mean the address is not a V2 pair
        if error_category in ('decode', 'contract'):
            self.logger.error("Pair read returned unusable data", extra=log_data)
        else:
            self.logger.warning("Pair read failed", extra=log_data)
