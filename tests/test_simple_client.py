"""Tests for the offline client."""

import pytest

from autoswappr.errors import InvalidInputError
from autoswappr.simple_client import SimpleAutoSwapprClient
from autoswappr.types import SimpleConfig, SwapData

from conftest import ACCOUNT, PRIVATE_KEY, RPC_URL


def _config(**overrides) -> SimpleConfig:
    values = {
        "contract_address": "0x123",
        "rpc_url": RPC_URL,
        "account_address": ACCOUNT,
        "private_key": PRIVATE_KEY,
    }
    values.update(overrides)
    return SimpleConfig(**values)


class TestValidateConfig:
    """Tests for configuration format checks."""

    def test_valid_config(self, simple_config):
        """Test a well-formed configuration passes."""
        SimpleAutoSwapprClient(simple_config).validate_config()

    def test_short_hex_accepted(self):
        """Test short hex addresses are accepted."""
        SimpleAutoSwapprClient(_config(contract_address="0x1")).validate_config()

    @pytest.mark.parametrize("field", ["contract_address", "account_address", "private_key"])
    def test_missing_prefix(self, field):
        """Test hex fields without 0x are rejected."""
        client = SimpleAutoSwapprClient(_config(**{field: "123abc"}))
        with pytest.raises(InvalidInputError, match="must start with 0x"):
            client.validate_config()

    @pytest.mark.parametrize("field", ["contract_address", "account_address", "private_key"])
    def test_empty_field(self, field):
        """Test empty hex fields are rejected."""
        client = SimpleAutoSwapprClient(_config(**{field: ""}))
        with pytest.raises(InvalidInputError, match="cannot be empty"):
            client.validate_config()

    def test_empty_rpc_url(self):
        client = SimpleAutoSwapprClient(_config(rpc_url=""))
        with pytest.raises(InvalidInputError, match="RPC URL"):
            client.validate_config()

    def test_non_hex_digits(self):
        """Test 0x followed by non-hex characters is rejected."""
        client = SimpleAutoSwapprClient(_config(account_address="0xzz"))
        with pytest.raises(InvalidInputError, match="not a valid hex"):
            client.validate_config()

    def test_bare_prefix(self):
        client = SimpleAutoSwapprClient(_config(contract_address="0x"))
        with pytest.raises(InvalidInputError):
            client.validate_config()


class TestCreateSwapData:
    """Tests for swap record creation."""

    def test_fields_pass_through(self, simple_config):
        """Test arguments are kept verbatim and caller is the account."""
        client = SimpleAutoSwapprClient(simple_config)
        swap_data = client.create_swap_data("0xETH", "0xUSDC", "1000000000000000000")

        assert swap_data == SwapData(
            token_in="0xETH",
            token_out="0xUSDC",
            amount="1000000000000000000",
            caller=ACCOUNT,
        )

    @pytest.mark.parametrize(
        "token_in,token_out,amount",
        [("", "0x2", "1"), ("0x1", "", "1"), ("0x1", "0x2", "")],
    )
    def test_empty_arguments(self, simple_config, token_in, token_out, amount):
        client = SimpleAutoSwapprClient(simple_config)
        with pytest.raises(InvalidInputError, match="cannot be empty"):
            client.create_swap_data(token_in, token_out, amount)

    def test_invalid_config_rejected(self):
        """Test swap data is not created from an invalid configuration."""
        client = SimpleAutoSwapprClient(_config(private_key="nothex"))
        with pytest.raises(InvalidInputError):
            client.create_swap_data("0x1", "0x2", "1")


class TestSimulateSwap:
    """Tests for dry-run swaps."""

    @pytest.mark.asyncio
    async def test_simulate_swap_describes_swap(self, simple_config):
        client = SimpleAutoSwapprClient(simple_config)
        swap_data = client.create_swap_data("0xETH", "0xUSDC", "1000")

        result = await client.simulate_swap(swap_data)

        assert result.startswith("Simulated swap:")
        assert "1000 0xETH -> 0xUSDC" in result
        assert ACCOUNT in result

    @pytest.mark.asyncio
    async def test_simulate_swap_invalid_config(self):
        client = SimpleAutoSwapprClient(_config(rpc_url=""))
        swap_data = SwapData(token_in="0x1", token_out="0x2", amount="1", caller=ACCOUNT)

        with pytest.raises(InvalidInputError):
            await client.simulate_swap(swap_data)

    def test_repr_hides_private_key(self, simple_config):
        client = SimpleAutoSwapprClient(simple_config)
        assert PRIVATE_KEY not in repr(client)
        assert PRIVATE_KEY not in repr(simple_config)
