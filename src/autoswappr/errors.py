"""Error taxonomy for SDK operations.

Every failure surfaces as one of four kinds: invalid input, network,
contract, or other. Lower layers raise these; the swap entrypoints
convert them into ErrorResponse values.
"""

import asyncio
import logging

import aiohttp
from starknet_py.net.client_errors import ClientError

from autoswappr.types import ErrorKind, ErrorResponse

logger = logging.getLogger(__name__)


class AutoSwapprError(Exception):
    """Base exception for all SDK failures."""

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> ErrorResponse:
        """Convert to the error variant of a swap response."""
        return ErrorResponse(error_type=self.kind, message=self.message)


class InvalidInputError(AutoSwapprError):
    """Malformed address, key, URL or amount."""
    kind = ErrorKind.INVALID_INPUT


class ZeroAmountError(InvalidInputError):
    """Swap or approval amount is zero."""

    def __init__(self, message: str = "SWAP AMOUNT IS ZERO"):
        super().__init__(message)


class UnsupportedTokenError(InvalidInputError):
    """Token is not in the supported registry."""

    def __init__(self, token: str):
        super().__init__(f"Unsupported token: {token}")
        self.token = token


class NetworkError(AutoSwapprError):
    """RPC endpoint unreachable or transport failure."""
    kind = ErrorKind.NETWORK


class ContractError(AutoSwapprError):
    """Contract call rejected or reverted."""
    kind = ErrorKind.CONTRACT


class OtherError(AutoSwapprError):
    """Anything that does not fit the other categories."""
    kind = ErrorKind.OTHER


def wrap_rpc_error(exc: Exception, operation: str) -> AutoSwapprError:
    """Map an exception raised by the RPC client to the SDK taxonomy.

    Args:
        exc: Exception raised while talking to the node
        operation: Short label used as message prefix (e.g. "balance_of")

    Returns:
        Matching AutoSwapprError subclass carrying the underlying message
    """
    if isinstance(exc, AutoSwapprError):
        return exc

    if isinstance(exc, ClientError):
        # HTTP status failures carry the status as a string code,
        # JSON-RPC errors carry an int code
        if isinstance(exc.code, str):
            error: AutoSwapprError = NetworkError(f"{operation} failed: {exc.message}")
        else:
            error = ContractError(f"{operation} failed: {exc.message}")
    elif isinstance(exc, (aiohttp.ClientError, asyncio.TimeoutError, OSError)):
        error = NetworkError(f"{operation} failed: {type(exc).__name__}: {exc}")
    else:
        error = OtherError(f"{operation} failed: {type(exc).__name__}: {exc}")

    logger.debug(f"Mapped {type(exc).__name__} to {error.kind.value}: {error.message}")
    return error
