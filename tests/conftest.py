"""Pytest configuration and fixtures."""

import os
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from starknet_py.hash.selector import get_selector_from_name

# Set test environment
os.environ["RPC_URL"] = "https://starknet-sepolia.example.com/rpc/v0_8"
os.environ["NETWORK"] = "sepolia"
os.environ["ACCOUNT_ADDRESS"] = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
os.environ["PRIVATE_KEY"] = "0x00fedcba9876543210fedcba9876543210fedcba9876543210fedcba98765432"
os.environ["DEBUG"] = "true"

from autoswappr.client import AutoSwapprClient
from autoswappr.swappr import AutoSwappr
from autoswappr.tokens import AUTOSWAPPR_ADDRESS
from autoswappr.types import AutoSwapprConfig, SimpleConfig

ACCOUNT = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
PRIVATE_KEY = "0x00fedcba9876543210fedcba9876543210fedcba9876543210fedcba98765432"
RPC_URL = "https://starknet-sepolia.example.com/rpc/v0_8"
TX_HASH = 0x5A17E


class FakeNode:
    """Stand-in RPC client answering view calls by entrypoint name."""

    def __init__(self, responses: Optional[dict] = None):
        self.responses = {}
        self.call_contract = AsyncMock(side_effect=self._call_contract)
        for name, value in (responses or {}).items():
            self.set(name, value)

    def set(self, entrypoint: str, value):
        """Register a list of felts (or an exception) for an entrypoint."""
        self.responses[get_selector_from_name(entrypoint)] = value

    async def _call_contract(self, call, block_number=None):
        value = self.responses.get(call.selector)
        if value is None:
            raise AssertionError(f"Unexpected view call to selector {hex(call.selector)}")
        if isinstance(value, Exception):
            raise value
        return list(value)


def make_account(tx_hash: int = TX_HASH) -> MagicMock:
    account = MagicMock()
    account.execute_v3 = AsyncMock(return_value=MagicMock(transaction_hash=tx_hash))
    return account


@pytest.fixture
def simple_config() -> SimpleConfig:
    """Valid configuration for the offline client."""
    return SimpleConfig(
        contract_address=AUTOSWAPPR_ADDRESS,
        rpc_url=RPC_URL,
        account_address=ACCOUNT,
        private_key=PRIVATE_KEY,
    )


@pytest.fixture
def client_config() -> AutoSwapprConfig:
    return AutoSwapprConfig(
        contract_address=AUTOSWAPPR_ADDRESS,
        rpc_url=RPC_URL,
        account_address=ACCOUNT,
        private_key=PRIVATE_KEY,
        network="sepolia",
    )


@pytest.fixture
def node() -> FakeNode:
    """RPC client with typical ERC20 and AutoSwappr answers."""
    return FakeNode({
        "balance_of": [1500, 0],
        "allowance": [0, 0],
        "decimals": [18],
        # "STRK" and "Starknet Token" as short strings
        "symbol": [int.from_bytes(b"STRK", "big")],
        "name": [int.from_bytes(b"Starknet Token", "big")],
    })


@pytest.fixture
def account() -> MagicMock:
    return make_account()


@pytest.fixture
def client(client_config, node, account) -> AutoSwapprClient:
    """Full client wired to the fake node and account."""
    return AutoSwapprClient(client_config, client=node, account=account)


@pytest.fixture
def swapper(client) -> AutoSwappr:
    return AutoSwappr(client, backend_url="https://backend.example.com/auto-swap")
