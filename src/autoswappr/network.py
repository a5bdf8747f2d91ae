"""Starknet network selection and RPC provider wrapper."""

import logging
from enum import Enum
from typing import Optional

from starknet_py.net.full_node_client import FullNodeClient
from starknet_py.net.models import StarknetChainId

from autoswappr.calldata import is_valid_address
from autoswappr.errors import InvalidInputError, wrap_rpc_error

logger = logging.getLogger(__name__)

# Public RPC (rate limited)
PUBLIC_RPC_MAINNET = "https://starknet-mainnet.public.blastapi.io/rpc/v0_8"
PUBLIC_RPC_SEPOLIA = "https://starknet-sepolia.public.blastapi.io/rpc/v0_8"


class Network(str, Enum):
    """Starknet network."""
    MAINNET = "mainnet"
    SEPOLIA = "sepolia"

    @classmethod
    def parse(cls, value: "str | Network") -> "Network":
        """Parse a network name, accepting 'testnet' as sepolia."""
        if isinstance(value, Network):
            return value
        name = value.strip().lower()
        if name == "testnet":
            return cls.SEPOLIA
        try:
            return cls(name)
        except ValueError:
            raise InvalidInputError(f"Unknown network: {value}")

    @property
    def default_rpc_url(self) -> str:
        return PUBLIC_RPC_SEPOLIA if self is Network.SEPOLIA else PUBLIC_RPC_MAINNET

    @property
    def chain_id(self) -> StarknetChainId:
        return StarknetChainId.SEPOLIA if self is Network.SEPOLIA else StarknetChainId.MAINNET


class StarknetProvider:
    """Holds the network choice and a lazily created RPC client."""

    def __init__(
        self,
        network: Network = Network.MAINNET,
        rpc_url: Optional[str] = None,
        client: Optional[FullNodeClient] = None,
    ):
        self.network = Network.parse(network)
        self.rpc_url = rpc_url or self.network.default_rpc_url
        if not self.rpc_url.startswith(("http://", "https://")):
            raise InvalidInputError(f"Invalid RPC URL: {self.rpc_url}")
        self._client = client

    @property
    def client(self) -> FullNodeClient:
        """Lazy load the RPC client."""
        if self._client is None:
            self._client = FullNodeClient(node_url=self.rpc_url)
        return self._client

    @staticmethod
    def validate_private_key(private_key: str) -> None:
        """Basic private key format check.

        Raises:
            InvalidInputError: If the key is too short, not 0x-prefixed or not hex
        """
        if len(private_key) < 64:
            raise InvalidInputError("Invalid private key: too short")
        if not private_key.startswith("0x"):
            raise InvalidInputError("Invalid private key: must start with 0x")
        if not is_valid_address(private_key):
            raise InvalidInputError("Invalid private key: not a field element")

    @staticmethod
    def validate_address(address: str) -> None:
        """Basic full-length address format check.

        Raises:
            InvalidInputError: If the address is too short, not 0x-prefixed or not hex
        """
        if len(address) < 64:
            raise InvalidInputError("Invalid address: too short")
        if not address.startswith("0x"):
            raise InvalidInputError("Invalid address: must start with 0x")
        if not is_valid_address(address):
            raise InvalidInputError("Invalid address: not a field element")

    async def chain_id(self) -> int:
        """Get the chain id reported by the node."""
        try:
            chain_id = await self.client.get_chain_id()
        except Exception as e:
            raise wrap_rpc_error(e, "get_chain_id") from e
        return int(chain_id, 16) if isinstance(chain_id, str) else int(chain_id)

    async def block_number(self) -> int:
        """Get the latest block number."""
        try:
            return await self.client.get_block_number()
        except Exception as e:
            raise wrap_rpc_error(e, "get_block_number") from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(network={self.network.value}, rpc_url={self.rpc_url})"
