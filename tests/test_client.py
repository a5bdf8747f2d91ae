"""Tests for the full contract client."""

from decimal import Decimal

import pytest
from starknet_py.hash.selector import get_selector_from_name
from starknet_py.net.client_errors import ClientError

from autoswappr.calldata import FIELD_PRIME
from autoswappr.client import AutoSwapprClient, token_felt
from autoswappr.errors import ContractError, InvalidInputError, ZeroAmountError
from autoswappr.tokens import AUTOSWAPPR_ADDRESS, ETH, STRK, USDC
from autoswappr.types import FeeType, Route, RouteParams, SwapParams, TokenInfo

from conftest import ACCOUNT, PRIVATE_KEY, TX_HASH


def _short(text: str) -> int:
    return int.from_bytes(text.encode(), "big")


class TestClientSetup:
    """Tests for client construction."""

    def test_empty_rpc_url(self, client_config):
        with pytest.raises(InvalidInputError, match="empty string"):
            AutoSwapprClient(client_config.model_copy(update={"rpc_url": ""}))

    def test_non_http_rpc_url(self, client_config):
        with pytest.raises(InvalidInputError, match="Invalid RPC URL"):
            AutoSwapprClient(client_config.model_copy(update={"rpc_url": "ftp://node"}))

    def test_invalid_private_key(self, client_config):
        with pytest.raises(InvalidInputError, match="private key"):
            AutoSwapprClient(client_config.model_copy(update={"private_key": "0xnothex"}))

    def test_private_key_outside_field(self, client_config):
        """Test a key at or above the Stark prime is rejected."""
        key = "0x0fedcba9876543210fedcba9876543210fedcba9876543210fedcba987654321"
        with pytest.raises(InvalidInputError, match="outside the Stark field"):
            AutoSwapprClient(client_config.model_copy(update={"private_key": key}))

    def test_fixture_key_is_field_element(self, client):
        assert client._private_key == int(PRIVATE_KEY, 16)
        assert client._private_key < FIELD_PRIME

    def test_addresses_normalized(self, client):
        assert client.account_address == hex(int(ACCOUNT, 16))
        assert client.contract_address == hex(int(AUTOSWAPPR_ADDRESS, 16))

    def test_injected_account_used(self, client, account):
        assert client.account is account

    def test_repr(self, client):
        assert "sepolia" in repr(client)
        assert client.config.private_key not in repr(client)

    def test_token_felt(self):
        assert token_felt("strk") == int(STRK, 16)
        assert token_felt(ETH) == int(ETH, 16)
        assert token_felt(0x123) == 0x123


class TestContractViews:
    """Tests for AutoSwappr view calls."""

    @pytest.mark.asyncio
    async def test_get_contract_parameters(self, client, node):
        node.set("contract_parameters", [0xFEE, 0xF1B, 0xA7, 0x0AC, 0x0E4, 1, 50])

        info = await client.get_contract_parameters()

        assert info.fees_collector == "0xfee"
        assert info.fibrous_exchange_address == "0xf1b"
        assert info.avnu_exchange_address == "0xa7"
        assert info.oracle_address == "0xac"
        assert info.owner == "0xe4"
        assert info.fee_type == FeeType.PERCENTAGE
        assert info.percentage_fee == 50

    @pytest.mark.asyncio
    async def test_get_contract_parameters_unknown_fee_type(self, client, node):
        node.set("contract_parameters", [1, 2, 3, 4, 5, 9, 0])

        info = await client.get_contract_parameters()

        assert info.fee_type == FeeType.FIXED

    @pytest.mark.asyncio
    async def test_get_contract_parameters_short_result(self, client, node):
        node.set("contract_parameters", [1, 2, 3])

        with pytest.raises(ContractError, match="expected 7"):
            await client.get_contract_parameters()

    @pytest.mark.asyncio
    async def test_get_token_amount_in_usd_formatted(self, client, node):
        node.set("get_token_amount_in_usd", [3_250_500_000, 0])

        value = await client.get_token_amount_in_usd_formatted("ETH", 10**18, 6)

        assert value == Decimal("3250.5")

    @pytest.mark.asyncio
    async def test_get_token_from_status_and_value(self, client, node):
        node.set("get_token_from_status_and_value", [1, 0x5354524B])

        supported, feed_id = await client.get_token_from_status_and_value("STRK")

        assert supported is True
        assert feed_id == 0x5354524B
        call = node.call_contract.call_args.kwargs["call"]
        assert call.calldata == [int(STRK, 16)]

    @pytest.mark.asyncio
    async def test_view_revert_maps_to_contract_error(self, client, node):
        node.set("contract_parameters", ClientError("Contract not found"))

        with pytest.raises(ContractError, match="Contract not found"):
            await client.get_contract_parameters()


class TestTokenQueries:
    """Tests for ERC20 reads."""

    @pytest.mark.asyncio
    async def test_get_token_info_short_strings(self, client):
        info = await client.get_token_info("STRK")

        assert info == TokenInfo(address=hex(int(STRK, 16)), symbol="STRK", decimals=18, name="Starknet Token")

    @pytest.mark.asyncio
    async def test_get_token_info_byte_array(self, client, node):
        """Test ByteArray encoded names are decoded."""
        node.set("name", [0, _short("USD Coin"), 8])
        node.set("symbol", [0, _short("USDC"), 4])
        node.set("decimals", [6])

        info = await client.get_token_info(USDC)

        assert info.name == "USD Coin"
        assert info.symbol == "USDC"
        assert info.decimals == 6

    @pytest.mark.asyncio
    async def test_get_token_balance_other_owner(self, client, node):
        await client.get_token_balance("ETH", owner="0xabc")

        call = node.call_contract.call_args.kwargs["call"]
        assert call.calldata == [0xABC]
        assert call.selector == get_selector_from_name("balance_of")

    @pytest.mark.asyncio
    async def test_single_felt_balance(self, client, node):
        """Test tokens returning a felt instead of u256 are handled."""
        node.set("balance_of", [42])

        assert await client.get_token_balance("ETH") == 42

    @pytest.mark.asyncio
    async def test_empty_balance_result(self, client, node):
        node.set("balance_of", [])

        with pytest.raises(ContractError):
            await client.get_token_balance("ETH")

    @pytest.mark.asyncio
    async def test_repeated_reads_match(self, client):
        first = await client.get_token_info("STRK")
        second = await client.get_token_info("STRK")
        assert first == second


class TestTransactions:
    """Tests for submitted transactions."""

    @pytest.mark.asyncio
    async def test_approve_token(self, client, account):
        tx_hash = await client.approve_token("STRK", AUTOSWAPPR_ADDRESS, 5)

        assert tx_hash == hex(TX_HASH)
        call = account.execute_v3.call_args.kwargs["calls"][0]
        assert call.to_addr == int(STRK, 16)
        assert call.calldata == [int(AUTOSWAPPR_ADDRESS, 16), 5, 0]
        assert account.execute_v3.call_args.kwargs["auto_estimate"] is True

    @pytest.mark.asyncio
    async def test_approve_zero(self, client, account):
        with pytest.raises(ZeroAmountError):
            await client.approve_token("STRK", AUTOSWAPPR_ADDRESS, 0)
        account.execute_v3.assert_not_called()

    def test_build_swap_data_zero(self, client):
        with pytest.raises(ZeroAmountError):
            client.build_swap_data("ETH", "USDC", 0)

    def test_build_swap_data_same_token(self, client):
        with pytest.raises(InvalidInputError):
            client.build_swap_data("ETH", ETH, 1)

    @pytest.mark.asyncio
    async def test_execute_ekubo_swap(self, client, account):
        swap_data = client.build_swap_data("ETH", "USDC", 100)

        tx_hash = await client.execute_ekubo_swap(swap_data)

        assert tx_hash == hex(TX_HASH)
        call = account.execute_v3.call_args.kwargs["calls"][0]
        assert call.selector == get_selector_from_name("ekubo_swap")
        assert len(call.calldata) == 12

    @pytest.mark.asyncio
    async def test_execute_swap_with_approval_forced(self, client, node, account):
        """Test disabling the allowance check always approves."""
        node.set("allowance", [10**30, 0])
        swap_data = client.build_swap_data("ETH", "USDC", 100)

        await client.execute_swap_with_approval("ETH", swap_data, 100, check_allowance=False)

        node.call_contract.assert_not_called()
        assert len(account.execute_v3.call_args.kwargs["calls"]) == 2

    @pytest.mark.asyncio
    async def test_execute_avnu_swap(self, client, account):
        route = Route(token_from=int(ETH, 16), token_to=int(USDC, 16), exchange_address=0xE1, percent=100)

        await client.execute_avnu_swap(
            protocol_swapper="0x1",
            token_from_address=ETH,
            token_from_amount=1000,
            token_to_address=USDC,
            token_to_min_amount=990,
            beneficiary=ACCOUNT,
            integrator_fee_amount_bps=0,
            integrator_fee_recipient="0x0",
            routes=[route],
        )

        call = account.execute_v3.call_args.kwargs["calls"][0]
        assert call.selector == get_selector_from_name("avnu_swap")
        assert call.calldata[:4] == [0x1, int(ETH, 16), 1000, 0]
        assert call.calldata[-6:] == [1, int(ETH, 16), int(USDC, 16), 0xE1, 100, 0]

    @pytest.mark.asyncio
    async def test_execute_fibrous_swap(self, client, account):
        route_params = RouteParams(
            token_in=int(ETH, 16),
            token_out=int(USDC, 16),
            amount_in=1000,
            min_received=990,
            destination=int(ACCOUNT, 16),
        )
        hop = SwapParams(
            token_in=int(ETH, 16),
            token_out=int(USDC, 16),
            rate=1_000_000,
            protocol_id=2,
            pool_address=0xB00,
        )

        await client.execute_fibrous_swap("0x1", ACCOUNT, route_params, [hop])

        call = account.execute_v3.call_args.kwargs["calls"][0]
        assert call.selector == get_selector_from_name("fibrous_swap")
        assert call.calldata[-2:] == [0x1, int(ACCOUNT, 16)]

    @pytest.mark.asyncio
    async def test_owner_operations(self, client, account):
        await client.set_fee_type(FeeType.PERCENTAGE, 25)
        call = account.execute_v3.call_args.kwargs["calls"][0]
        assert call.selector == get_selector_from_name("set_fee_type")
        assert call.calldata == [1, 25]

        await client.support_new_token_from("STRK", 0xF33D)
        call = account.execute_v3.call_args.kwargs["calls"][0]
        assert call.calldata == [int(STRK, 16), 0xF33D]

        await client.remove_token_from("STRK")
        call = account.execute_v3.call_args.kwargs["calls"][0]
        assert call.selector == get_selector_from_name("remove_token_from")
        assert call.calldata == [int(STRK, 16)]
