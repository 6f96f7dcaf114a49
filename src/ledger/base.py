"""
Base classes for read-only contract calls.

This module provides the "call a view method and decode typed results"
primitive that the pair reader is built on, using direct eth.call()
operations and eth_abi decoding.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError
from eth_typing import ChecksumAddress
from eth_utils import encode_hex, function_signature_to_4byte_selector
from web3 import Web3

from .errors import DecodeError, ErrorHandler, RpcError

logger = logging.getLogger(__name__)


@dataclass
class CallConfig:
    """Configuration for read-only calls."""

    timeout: float = 10.0
    block_identifier: Union[int, str] = "latest"


class ContractReader:
    """
    Base class for read-only contract access using eth.call().

    The Web3 instance is owned by the caller; one reader can serve any
    number of concurrent requests since it holds no per-call state.
    """

    def __init__(self, web3: Web3, config: Optional[CallConfig] = None):
        self.web3 = web3
        self.config = config or CallConfig()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.error_handler = ErrorHandler(self.logger)

    @staticmethod
    def _method_name(signature: str) -> str:
        """'getReserves()' -> 'getReserves'."""
        return signature.split("(", 1)[0]

    def _validate_address(self, address: str) -> ChecksumAddress:
        """Validate and normalize an Ethereum address."""
        try:
            return Web3.to_checksum_address(address)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid address {address!r}: {e}") from e

    def _prepare_call_data(
        self, signature: str, arg_types: Sequence[str] = (), args: Sequence[Any] = ()
    ) -> str:
        """
        Prepare call data from a method signature and its arguments.

        Args:
            signature: Canonical method signature, e.g. "getReserves()"
            arg_types: ABI types of the arguments
            args: Argument values

        Returns:
            Complete call data as hex string
        """
        selector = function_signature_to_4byte_selector(signature)
        return encode_hex(selector + encode(list(arg_types), list(args)))

    def _make_call(
        self, address: ChecksumAddress, call_data: str, method: str
    ) -> bytes:
        """
        Make a zero-value eth.call() against a contract.

        Args:
            address: Contract address
            call_data: Encoded selector and arguments
            method: Method name, for error context

        Returns:
            Raw bytes response from the call
        """
        try:
            return self.web3.eth.call(
                {"to": address, "data": call_data},
                block_identifier=self.config.block_identifier,
            )
        except Exception as e:
            raise RpcError(f"{method} call to {address} failed: {e}", method, address) from e

    def _decode(
        self, output_types: List[str], raw_response: bytes, method: str, address: str
    ) -> Tuple[Any, ...]:
        """
        Decode a raw call response into typed values.

        Raises:
            DecodeError: If the payload does not match output_types
        """
        try:
            return decode(output_types, bytes(raw_response))
        except (DecodingError, TypeError, ValueError) as e:
            raise DecodeError(
                f"Failed to decode {method} result from {address} "
                f"as ({', '.join(output_types)}): {e}",
                method,
                address,
            ) from e

    async def call_view(
        self,
        address: str,
        signature: str,
        output_types: List[str],
        arg_types: Sequence[str] = (),
        args: Sequence[Any] = (),
    ) -> Tuple[Any, ...]:
        """
        Call a read-only contract method and decode its return values.

        The blocking node call runs in a worker thread and is bounded by
        config.timeout. Cancelling the awaiting task abandons the call.

        Args:
            address: Contract address
            signature: Canonical method signature
            output_types: ABI types of the return values
            arg_types: ABI types of the arguments
            args: Argument values

        Returns:
            Tuple of decoded values, one per output type

        Raises:
            RpcError: If the node call fails or times out
            DecodeError: If the result does not match output_types
        """
        method = self._method_name(signature)
        checksum_address = self._validate_address(address)
        call_data = self._prepare_call_data(signature, arg_types, args)
        context = {
            "method": method,
            "address": checksum_address,
            "block_identifier": self.config.block_identifier,
        }

        try:
            raw_response = await asyncio.wait_for(
                asyncio.to_thread(self._make_call, checksum_address, call_data, method),
                timeout=self.config.timeout,
            )
            values = self._decode(output_types, raw_response, method, checksum_address)
        except asyncio.TimeoutError as e:
            error = RpcError(
                f"{method} call to {checksum_address} timed out after {self.config.timeout}s",
                method,
                checksum_address,
            )
            self.error_handler.log_error(error, context)
            raise error from e
        except (RpcError, DecodeError) as e:
            self.error_handler.log_error(e, context)
            raise

        self.logger.debug(f"{method} on {checksum_address} -> {values}")
        return values
