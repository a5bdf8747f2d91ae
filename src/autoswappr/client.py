"""Full AutoSwappr client with Starknet integration.

Wraps the AutoSwappr and ERC20 contracts behind one object that owns the
RPC client and the signing account. Every method performs at most one
network round trip (the approval-aware swap reads the allowance first)
and raises AutoSwapprError subclasses on failure.
"""

import logging
from decimal import Decimal
from typing import Optional, Union

from starknet_py.net.account.account import Account
from starknet_py.net.account.base_account import BaseAccount
from starknet_py.net.client import Client
from starknet_py.net.signer.stark_curve_signer import KeyPair

from autoswappr.calldata import build_swap_data, parse_felt, to_hex
from autoswappr.contracts import AutoSwapprContract, Erc20Contract, execute
from autoswappr.errors import InvalidInputError, ZeroAmountError
from autoswappr.network import StarknetProvider
from autoswappr.tokens import from_base_units, get_token_address
from autoswappr.types import (
    AutoSwapprConfig,
    ContractInfo,
    EkuboSwapData,
    FeeType,
    Route,
    RouteParams,
    SwapParams,
    TokenInfo,
)

logger = logging.getLogger(__name__)

TokenRef = Union[str, int]


def token_felt(token: TokenRef) -> int:
    """Resolve a token reference (symbol, 0x address or int) to a felt."""
    if isinstance(token, int):
        return parse_felt(token, "token address")
    if token.strip().lower().startswith("0x"):
        return parse_felt(token, "token address")
    return parse_felt(get_token_address(token), "token address")


class AutoSwapprClient:
    """Client for the AutoSwappr contract and the ERC20 tokens it trades."""

    def __init__(
        self,
        config: AutoSwapprConfig,
        client: Optional[Client] = None,
        account: Optional[BaseAccount] = None,
    ):
        """Initialize client.

        Args:
            config: Connection settings
            client: Optional pre-built RPC client (created lazily otherwise)
            account: Optional pre-built account (created lazily otherwise)

        Raises:
            InvalidInputError: If the URL, addresses or key are malformed
        """
        if not config.rpc_url:
            raise InvalidInputError("Invalid RPC URL: empty string")

        self.config = config
        self.provider = StarknetProvider(
            network=config.network, rpc_url=config.rpc_url, client=client
        )
        self._account_address = parse_felt(config.account_address, "account address")
        self._contract_address = parse_felt(config.contract_address, "contract address")
        self._private_key = parse_felt(config.private_key, "private key")
        self._account = account
        self.autoswappr_contract = AutoSwapprContract(self._contract_address, self.provider.client)

    @property
    def account(self) -> BaseAccount:
        """Lazy load the signing account."""
        if self._account is None:
            self._account = Account(
                address=self._account_address,
                client=self.provider.client,
                key_pair=KeyPair.from_private_key(self._private_key),
                chain=self.provider.network.chain_id,
            )
        return self._account

    @property
    def account_address(self) -> str:
        return to_hex(self._account_address)

    @property
    def contract_address(self) -> str:
        return to_hex(self._contract_address)

    def erc20(self, token: TokenRef) -> Erc20Contract:
        """Get a wrapper for an ERC20 token."""
        return Erc20Contract(token_felt(token), self.provider.client)

    def build_swap_data(self, token_in: TokenRef, token_out: TokenRef, amount: int) -> EkuboSwapData:
        """Build Ekubo swap data for the default pool, with this account as caller."""
        if amount <= 0:
            raise ZeroAmountError()
        return build_swap_data(token_felt(token_in), token_felt(token_out), amount, self._account_address)

    # ======================
    # Read-only queries
    # ======================

    async def get_contract_parameters(self) -> ContractInfo:
        return await self.autoswappr_contract.get_contract_parameters()

    async def get_token_amount_in_usd(self, token: TokenRef, token_amount: int) -> int:
        """Get the raw USD value of a base-unit token amount."""
        return await self.autoswappr_contract.get_token_amount_in_usd(token_felt(token), token_amount)

    async def get_token_amount_in_usd_formatted(
        self,
        token: TokenRef,
        token_amount: int,
        decimals: int,
    ) -> Decimal:
        """Get the USD value of a base-unit amount, scaled down by decimals."""
        raw = await self.get_token_amount_in_usd(token, token_amount)
        return from_base_units(raw, decimals)

    async def get_allowance(
        self,
        token: TokenRef,
        owner: Optional[str] = None,
        spender: Optional[str] = None,
    ) -> int:
        """Get allowance; defaults to this account approving the AutoSwappr contract."""
        owner_felt = parse_felt(owner, "owner address") if owner else self._account_address
        spender_felt = parse_felt(spender, "spender address") if spender else self._contract_address
        return await self.erc20(token).allowance(owner_felt, spender_felt)

    async def get_token_balance(self, token: TokenRef, owner: Optional[str] = None) -> int:
        """Get token balance in base units; defaults to this account."""
        owner_felt = parse_felt(owner, "owner address") if owner else self._account_address
        return await self.erc20(token).balance_of(owner_felt)

    async def get_token_decimals(self, token: TokenRef) -> int:
        return await self.erc20(token).decimals()

    async def get_token_symbol(self, token: TokenRef) -> str:
        return await self.erc20(token).symbol()

    async def get_token_info(self, token: TokenRef) -> TokenInfo:
        """Read name, symbol and decimals from the token contract."""
        contract = self.erc20(token)
        name = await contract.name()
        symbol = await contract.symbol()
        decimals = await contract.decimals()
        return TokenInfo(address=to_hex(contract.address), symbol=symbol, decimals=decimals, name=name)

    async def get_token_from_status_and_value(self, token: TokenRef) -> tuple[bool, int]:
        return await self.autoswappr_contract.get_token_from_status_and_value(token_felt(token))

    # ======================
    # Transactions
    # ======================

    async def approve_token(self, token: TokenRef, spender: str, amount: int) -> str:
        """Approve spender for a base-unit amount. Returns the transaction hash."""
        if amount <= 0:
            raise ZeroAmountError("Approval amount is zero")
        tx_hash = await self.erc20(token).approve(
            self.account, parse_felt(spender, "spender address"), amount
        )
        return to_hex(tx_hash)

    async def execute_ekubo_manual_swap(self, swap_data: EkuboSwapData) -> str:
        return to_hex(await self.autoswappr_contract.ekubo_manual_swap(self.account, swap_data))

    async def execute_ekubo_swap(self, swap_data: EkuboSwapData) -> str:
        return to_hex(await self.autoswappr_contract.ekubo_swap(self.account, swap_data))

    async def execute_avnu_swap(
        self,
        protocol_swapper: str,
        token_from_address: str,
        token_from_amount: int,
        token_to_address: str,
        token_to_min_amount: int,
        beneficiary: str,
        integrator_fee_amount_bps: int,
        integrator_fee_recipient: str,
        routes: list[Route],
    ) -> str:
        """Swap through AVNU routes via the AutoSwappr contract."""
        tx_hash = await self.autoswappr_contract.avnu_swap(
            self.account,
            parse_felt(protocol_swapper, "protocol swapper address"),
            parse_felt(token_from_address, "token from address"),
            token_from_amount,
            parse_felt(token_to_address, "token to address"),
            token_to_min_amount,
            parse_felt(beneficiary, "beneficiary address"),
            integrator_fee_amount_bps,
            parse_felt(integrator_fee_recipient, "integrator fee recipient address"),
            routes,
        )
        return to_hex(tx_hash)

    async def execute_fibrous_swap(
        self,
        protocol_swapper: str,
        beneficiary: str,
        route_params: RouteParams,
        swap_params: list[SwapParams],
    ) -> str:
        """Swap through a Fibrous route via the AutoSwappr contract."""
        tx_hash = await self.autoswappr_contract.fibrous_swap(
            self.account,
            route_params,
            swap_params,
            parse_felt(protocol_swapper, "protocol swapper address"),
            parse_felt(beneficiary, "beneficiary address"),
        )
        return to_hex(tx_hash)

    async def execute_swap_with_approval(
        self,
        token_in: TokenRef,
        swap_data: EkuboSwapData,
        amount: int,
        check_allowance: bool = True,
    ) -> str:
        """Approve the contract and run ekubo_manual_swap in one transaction.

        Args:
            token_in: Input token
            swap_data: Prepared swap data
            amount: Base-unit amount the contract needs to spend
            check_allowance: Skip the approval when the current allowance covers amount

        Returns:
            Transaction hash
        """
        erc20 = self.erc20(token_in)
        calls = []

        needs_approval = True
        if check_allowance:
            allowance = await erc20.allowance(self._account_address, self._contract_address)
            needs_approval = allowance < amount
            logger.debug(f"Allowance {allowance}, required {amount}")

        if needs_approval:
            logger.info(f"Approving {amount} of {to_hex(erc20.address)} for AutoSwappr")
            calls.append(erc20.approve_call(self._contract_address, amount))
        calls.append(self.autoswappr_contract.ekubo_manual_swap_call(swap_data))

        return to_hex(await execute(self.account, calls, "ekubo_manual_swap"))

    # Owner-only

    async def set_fee_type(self, fee_type: FeeType, percentage_fee: int) -> str:
        return to_hex(
            await self.autoswappr_contract.set_fee_type(self.account, fee_type, percentage_fee)
        )

    async def support_new_token_from(self, token: TokenRef, feed_id: int) -> str:
        return to_hex(
            await self.autoswappr_contract.support_new_token_from(
                self.account, token_felt(token), feed_id
            )
        )

    async def remove_token_from(self, token: TokenRef) -> str:
        return to_hex(
            await self.autoswappr_contract.remove_token_from(self.account, token_felt(token))
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(account={self.account_address}, "
            f"contract={self.contract_address}, network={self.provider.network.value})"
        )
