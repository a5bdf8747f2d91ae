"""Offline client: configuration checks, swap records and dry-run swaps.

Nothing here touches the network; use AutoSwappr for real swaps.
"""

import logging
import re

from autoswappr.errors import InvalidInputError
from autoswappr.types import SimpleConfig, SwapData

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^0x[0-9a-fA-F]{1,64}$")


def _check_hex(value: str, label: str) -> None:
    if not value:
        raise InvalidInputError(f"{label} cannot be empty")
    if not value.startswith("0x"):
        raise InvalidInputError(f"{label} must start with 0x")
    if not _HEX_RE.match(value):
        raise InvalidInputError(f"{label} is not a valid hex string")


class SimpleAutoSwapprClient:
    """Client that validates configuration and prepares swaps without RPC."""

    def __init__(self, config: SimpleConfig):
        self.config = config

    @property
    def contract_address(self) -> str:
        return self.config.contract_address

    @property
    def account_address(self) -> str:
        return self.config.account_address

    @property
    def rpc_url(self) -> str:
        return self.config.rpc_url

    def validate_config(self) -> None:
        """Validate configuration string formats.

        Raises:
            InvalidInputError: If a field is empty or an address/key is not
                0x-prefixed hex
        """
        _check_hex(self.config.contract_address, "Contract address")
        if not self.config.rpc_url:
            raise InvalidInputError("RPC URL cannot be empty")
        _check_hex(self.config.account_address, "Account address")
        _check_hex(self.config.private_key, "Private key")

    def create_swap_data(self, token_in: str, token_out: str, amount: str) -> SwapData:
        """Create a swap record with the configured account as caller.

        Raises:
            InvalidInputError: If the config is invalid or any argument is empty
        """
        self.validate_config()

        if not token_in or not token_out or not amount:
            raise InvalidInputError("Token addresses and amount cannot be empty")

        return SwapData(
            token_in=token_in,
            token_out=token_out,
            amount=amount,
            caller=self.config.account_address,
        )

    async def simulate_swap(self, swap_data: SwapData) -> str:
        """Describe the swap that would be submitted. No network access."""
        self.validate_config()

        result = (
            f"Simulated swap: {swap_data.amount} {swap_data.token_in} -> "
            f"{swap_data.token_out} (caller: {swap_data.caller})"
        )
        logger.info(result)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(account={self.account_address}, contract={self.contract_address})"
