"""High-level swapper entrypoints.

AutoSwappr.config() builds a configured swapper; ekubo_manual_swap() and
ekubo_auto_swap() never raise and always return a SuccessResponse or an
ErrorResponse. Query helpers forward to the client and raise on failure.
"""

import logging
from decimal import Decimal
from typing import Optional, Union

import httpx
from starknet_py.net.account.base_account import BaseAccount
from starknet_py.net.client import Client

from autoswappr.calldata import to_hex
from autoswappr.client import AutoSwapprClient, TokenRef
from autoswappr.config import Settings, get_settings
from autoswappr.contracts import execute
from autoswappr.errors import (
    AutoSwapprError,
    InvalidInputError,
    NetworkError,
    OtherError,
    ZeroAmountError,
)
from autoswappr.tokens import AUTOSWAPPR_ADDRESS, resolve_token, to_base_units
from autoswappr.types import AutoSwapprConfig, SuccessResponse, SwapResponse

logger = logging.getLogger(__name__)

Amount = Union[Decimal, int, str]


class AutoSwappr:
    """Configured swapper bound to one wallet and one AutoSwappr deployment."""

    def __init__(self, client: AutoSwapprClient, backend_url: Optional[str] = None):
        self.client = client
        self.backend_url = backend_url
        self.backend_timeout = 30.0

    @classmethod
    def config(
        cls,
        rpc_url: str,
        account_address: str,
        private_key: str,
        contract_address: str = AUTOSWAPPR_ADDRESS,
        network: str = "mainnet",
        *,
        client: Optional[Client] = None,
        account: Optional[BaseAccount] = None,
        backend_url: Optional[str] = None,
    ) -> "AutoSwappr":
        """Configure a swapper with wallet credentials.

        Args:
            rpc_url: Starknet RPC endpoint (Alchemy, Infura, Blast, ...)
            account_address: Wallet address
            private_key: Wallet private key
            contract_address: AutoSwappr contract address
            network: mainnet or sepolia; selects the signing chain id
            client: Optional pre-built RPC client
            account: Optional pre-built account
            backend_url: AutoSwappr backend endpoint used by ekubo_auto_swap

        Raises:
            InvalidInputError: If any string is empty or malformed
        """
        if not rpc_url:
            raise InvalidInputError("EMPTY RPC STRING")
        if not account_address:
            raise InvalidInputError("EMPTY ACCOUNT ADDRESS STRING")
        if not private_key:
            raise InvalidInputError("EMPTY PRIVATE KEY STRING")
        if not contract_address:
            raise InvalidInputError("EMPTY CONTRACT ADDRESS STRING")

        swapper_config = AutoSwapprConfig(
            contract_address=contract_address,
            rpc_url=rpc_url,
            account_address=account_address,
            private_key=private_key,
            network=network,
        )
        swapper = cls(
            AutoSwapprClient(swapper_config, client=client, account=account),
            backend_url=backend_url,
        )
        logger.debug(f"Configured {swapper.client!r}")
        return swapper

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AutoSwappr":
        """Configure a swapper from environment settings."""
        settings = settings or get_settings()
        swapper = cls.config(
            rpc_url=settings.rpc_url,
            account_address=settings.account_address,
            private_key=settings.private_key,
            contract_address=settings.contract_address,
            network=settings.network,
            backend_url=settings.autoswap_backend_url,
        )
        swapper.backend_timeout = settings.backend_timeout
        return swapper

    # ======================
    # Swaps
    # ======================

    async def ekubo_manual_swap(self, token_in: str, token_out: str, amount: Amount) -> SwapResponse:
        """Swap through the contract's ekubo_manual_swap entrypoint.

        Args:
            token_in: Symbol or address of the token to sell (must be supported)
            token_out: Symbol or address of the token to buy
            amount: Amount of token_in in whole units (e.g. Decimal("1.5"))

        Returns:
            SuccessResponse with the transaction hash, or ErrorResponse
        """
        try:
            source = resolve_token(token_in)
            base_amount = to_base_units(amount, source.decimals)
            if base_amount == 0:
                raise ZeroAmountError()

            swap_data = self.client.build_swap_data(source.address, token_out, base_amount)
            logger.info(f"Swapping {amount} {source.symbol} -> {token_out} via Ekubo")

            tx_hash = await self.client.execute_swap_with_approval(
                source.address, swap_data, base_amount
            )
            return SuccessResponse(tx_hash=tx_hash)

        except AutoSwapprError as e:
            logger.error(f"Swap failed ({e.kind.value}): {e.message}")
            return e.to_response()
        except Exception as e:
            logger.error(f"Swap execution error: {type(e).__name__}: {e}")
            return OtherError(f"FAILED TO SWAP: {e}").to_response()

    async def ekubo_auto_swap(
        self,
        token_in: str,
        token_out: str,
        amount: Amount,
        backend_url: Optional[str] = None,
    ) -> SwapResponse:
        """Approve the contract and hand the swap to the AutoSwappr backend.

        The approval is submitted on-chain, then the backend is notified with
        the approval transaction hash and performs the swap itself.

        Returns:
            SuccessResponse carrying the approval hash and backend reply, or
            ErrorResponse
        """
        url = backend_url or self.backend_url
        try:
            if not url:
                raise InvalidInputError("Backend URL is not configured")

            source = resolve_token(token_in)
            base_amount = to_base_units(amount, source.decimals)
            if base_amount == 0:
                raise ZeroAmountError()
            destination = resolve_token(token_out)

            erc20 = self.client.erc20(source.address)
            approve_call = erc20.approve_call(int(self.client.contract_address, 16), base_amount)
            approve_hash = to_hex(await execute(self.client.account, [approve_call], "approve"))

            payload = {
                "wallet_address": self.client.account_address,
                "user_address": self.client.account_address,
                "from_token": source.address,
                "to_token": destination.address,
                "swap_amount": str(base_amount),
                "approve_tx_hash": approve_hash,
            }
            reply = await self._notify_backend(url, payload)
            return SuccessResponse(tx_hash=approve_hash, message=reply)

        except AutoSwapprError as e:
            logger.error(f"Auto swap failed ({e.kind.value}): {e.message}")
            return e.to_response()
        except Exception as e:
            logger.error(f"Auto swap error: {type(e).__name__}: {e}")
            return OtherError(str(e)).to_response()

    async def _notify_backend(self, url: str, payload: dict) -> str:
        """POST the swap request to the backend and return its reply body."""
        try:
            async with httpx.AsyncClient(timeout=self.backend_timeout) as http:
                response = await http.post(url, json=payload)
        except httpx.RequestError as e:
            raise NetworkError(f"network error: {type(e).__name__}: {e}") from e

        if response.is_success:
            logger.info(f"Backend accepted auto swap: {response.status_code}")
            return response.text
        raise OtherError(f"backend error: {response.status_code} - {response.text}")

    # ======================
    # Read-only queries
    # ======================

    async def get_balance(self, token: TokenRef) -> int:
        """Token balance of this wallet in base units."""
        return await self.client.get_token_balance(token)

    async def get_allowance(self, token: TokenRef) -> int:
        """Allowance this wallet granted the AutoSwappr contract."""
        return await self.client.get_allowance(token)

    async def get_decimals(self, token: TokenRef) -> int:
        return await self.client.get_token_decimals(token)

    async def get_symbol(self, token: TokenRef) -> str:
        return await self.client.get_token_symbol(token)

    async def get_token_amount_in_usd(self, token: str, amount: Amount) -> int:
        """Raw oracle USD value of a whole-unit amount of a supported token."""
        source = resolve_token(token)
        return await self.client.get_token_amount_in_usd(
            source.address, to_base_units(amount, source.decimals)
        )
