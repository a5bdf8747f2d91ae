"""AutoSwappr contract wrapper.

Entrypoints follow the deployed Cairo ABI. Swap routing itself runs
on-chain; this module only builds calls and decodes view results.
"""

import logging

from starknet_py.net.account.base_account import BaseAccount
from starknet_py.net.client_models import Call

from autoswappr.calldata import (
    from_uint256,
    serialize_avnu_swap,
    serialize_fibrous_swap,
    serialize_swap_data,
    to_hex,
    to_uint256,
)
from autoswappr.contracts.base import ContractWrapper, execute
from autoswappr.errors import ContractError
from autoswappr.types import ContractInfo, EkuboSwapData, FeeType, Route, RouteParams, SwapParams

logger = logging.getLogger(__name__)

# Entrypoint names
EKUBO_SWAP = "ekubo_swap"
EKUBO_MANUAL_SWAP = "ekubo_manual_swap"
AVNU_SWAP = "avnu_swap"
FIBROUS_SWAP = "fibrous_swap"
CONTRACT_PARAMETERS = "contract_parameters"
GET_TOKEN_AMOUNT_IN_USD = "get_token_amount_in_usd"
GET_TOKEN_FROM_STATUS_AND_VALUE = "get_token_from_status_and_value"
SET_FEE_TYPE = "set_fee_type"
SUPPORT_NEW_TOKEN_FROM = "support_new_token_from"
REMOVE_TOKEN_FROM = "remove_token_from"


class AutoSwapprContract(ContractWrapper):
    """The deployed AutoSwappr contract."""

    # ======================
    # Views
    # ======================

    async def get_contract_parameters(self) -> ContractInfo:
        """Read fee and integration settings."""
        result = await self.view(CONTRACT_PARAMETERS)
        if len(result) < 7:
            raise ContractError(
                f"{CONTRACT_PARAMETERS} returned {len(result)} values, expected 7"
            )

        try:
            fee_type = FeeType(result[5])
        except ValueError:
            logger.warning(f"Unknown fee type {result[5]}, treating as fixed")
            fee_type = FeeType.FIXED

        return ContractInfo(
            fees_collector=to_hex(result[0]),
            fibrous_exchange_address=to_hex(result[1]),
            avnu_exchange_address=to_hex(result[2]),
            oracle_address=to_hex(result[3]),
            owner=to_hex(result[4]),
            fee_type=fee_type,
            percentage_fee=result[6],
        )

    async def get_token_amount_in_usd(self, token: int, amount: int) -> int:
        """Price an amount of token in USD via the contract's oracle."""
        result = await self.view(GET_TOKEN_AMOUNT_IN_USD, [token, *to_uint256(amount)])
        if not result:
            raise ContractError(f"{GET_TOKEN_AMOUNT_IN_USD} returned no data")
        if len(result) == 1:
            return result[0]
        return from_uint256(result[0], result[1])

    async def get_token_from_status_and_value(self, token_from: int) -> tuple[bool, int]:
        """Check whether a token is accepted as swap input.

        Returns:
            Tuple of (is_supported, price_feed_id)
        """
        result = await self.view(GET_TOKEN_FROM_STATUS_AND_VALUE, [token_from])
        status = bool(result[0]) if result else False
        value = result[1] if len(result) > 1 else 0
        return status, value

    # ======================
    # Call builders
    # ======================

    def ekubo_manual_swap_call(self, swap_data: EkuboSwapData) -> Call:
        return self.build_call(EKUBO_MANUAL_SWAP, serialize_swap_data(swap_data))

    def ekubo_swap_call(self, swap_data: EkuboSwapData) -> Call:
        return self.build_call(EKUBO_SWAP, serialize_swap_data(swap_data))

    # ======================
    # Executions
    # ======================

    async def ekubo_manual_swap(self, account: BaseAccount, swap_data: EkuboSwapData) -> int:
        return await execute(account, [self.ekubo_manual_swap_call(swap_data)], EKUBO_MANUAL_SWAP)

    async def ekubo_swap(self, account: BaseAccount, swap_data: EkuboSwapData) -> int:
        return await execute(account, [self.ekubo_swap_call(swap_data)], EKUBO_SWAP)

    async def avnu_swap(
        self,
        account: BaseAccount,
        protocol_swapper: int,
        token_from_address: int,
        token_from_amount: int,
        token_to_address: int,
        token_to_min_amount: int,
        beneficiary: int,
        integrator_fee_amount_bps: int,
        integrator_fee_recipient: int,
        routes: list[Route],
    ) -> int:
        calldata = serialize_avnu_swap(
            protocol_swapper,
            token_from_address,
            token_from_amount,
            token_to_address,
            token_to_min_amount,
            beneficiary,
            integrator_fee_amount_bps,
            integrator_fee_recipient,
            routes,
        )
        return await execute(account, [self.build_call(AVNU_SWAP, calldata)], AVNU_SWAP)

    async def fibrous_swap(
        self,
        account: BaseAccount,
        route_params: RouteParams,
        swap_params: list[SwapParams],
        protocol_swapper: int,
        beneficiary: int,
    ) -> int:
        calldata = serialize_fibrous_swap(route_params, swap_params, protocol_swapper, beneficiary)
        return await execute(account, [self.build_call(FIBROUS_SWAP, calldata)], FIBROUS_SWAP)

    # Owner-only

    async def set_fee_type(self, account: BaseAccount, fee_type: FeeType, percentage_fee: int) -> int:
        call = self.build_call(SET_FEE_TYPE, [int(fee_type), percentage_fee])
        return await execute(account, [call], SET_FEE_TYPE)

    async def support_new_token_from(self, account: BaseAccount, token_from: int, feed_id: int) -> int:
        call = self.build_call(SUPPORT_NEW_TOKEN_FROM, [token_from, feed_id])
        return await execute(account, [call], SUPPORT_NEW_TOKEN_FROM)

    async def remove_token_from(self, account: BaseAccount, token_from: int) -> int:
        call = self.build_call(REMOVE_TOKEN_FROM, [token_from])
        return await execute(account, [call], REMOVE_TOKEN_FROM)
