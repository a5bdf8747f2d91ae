"""Data types shared across the SDK.

Configuration and response contracts are pydantic models so they can be
serialised straight to JSON. Call records are plain dataclasses.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Category of a failed operation."""
    INVALID_INPUT = "invalid_input"   # Malformed address/amount string
    NETWORK = "network"               # RPC unreachable or transport failure
    CONTRACT = "contract"             # On-chain revert or rejected call
    OTHER = "other"


class FeeType(IntEnum):
    """AutoSwappr fee mode as stored on-chain."""
    FIXED = 0
    PERCENTAGE = 1


# ======================
# Configuration
# ======================

class SimpleConfig(BaseModel):
    """Connection settings for the offline client."""

    model_config = ConfigDict(frozen=True)

    contract_address: str = Field(..., description="AutoSwappr contract address")
    rpc_url: str = Field(..., description="Starknet JSON-RPC endpoint")
    account_address: str = Field(..., description="Wallet address")
    private_key: str = Field(..., repr=False, description="Wallet private key")


class AutoSwapprConfig(SimpleConfig):
    """Connection settings for the full client."""

    network: str = Field(default="mainnet", description="mainnet or sepolia")


# ======================
# Responses
# ======================

class SuccessResponse(BaseModel):
    """Successful submission."""

    success: Literal[True] = True
    tx_hash: str = Field(..., description="Transaction hash as 0x-prefixed hex")
    message: str = Field(default="", description="Optional extra detail")


class ErrorResponse(BaseModel):
    """Failed operation."""

    success: Literal[False] = False
    error_type: ErrorKind = ErrorKind.OTHER
    message: str


SwapResponse = Union[SuccessResponse, ErrorResponse]


# ======================
# Swap records
# ======================

@dataclass(frozen=True)
class SwapData:
    """Flat swap request record."""
    token_in: str
    token_out: str
    amount: str
    caller: str


@dataclass(frozen=True)
class I129:
    """Signed 129-bit integer as Ekubo represents it."""
    mag: int
    sign: bool = False  # True means negative


@dataclass(frozen=True)
class PoolKey:
    """Ekubo pool identifier. token0 must be the lower address."""
    token0: int
    token1: int
    fee: int
    tick_spacing: int
    extension: int = 0


@dataclass(frozen=True)
class SwapParameters:
    """Ekubo swap parameters."""
    amount: I129
    is_token1: bool
    sqrt_ratio_limit: int
    skip_ahead: int = 0


@dataclass(frozen=True)
class EkuboSwapData:
    """Argument of the ekubo_swap / ekubo_manual_swap entrypoints."""
    params: SwapParameters
    pool_key: PoolKey
    caller: int


@dataclass(frozen=True)
class TokenInfo:
    """Supported token metadata."""
    address: str
    symbol: str
    decimals: int
    name: str


@dataclass
class ContractInfo:
    """Values returned by contract_parameters."""
    fees_collector: str
    fibrous_exchange_address: str
    avnu_exchange_address: str
    oracle_address: str
    owner: str
    fee_type: FeeType
    percentage_fee: int


# ======================
# Aggregator routes
# ======================

@dataclass
class Route:
    """One AVNU route leg."""
    token_from: int
    token_to: int
    exchange_address: int
    percent: int
    additional_swap_params: list[int] = field(default_factory=list)


@dataclass
class RouteParams:
    """Fibrous route header."""
    token_in: int
    token_out: int
    amount_in: int
    min_received: int
    destination: int


@dataclass
class SwapParams:
    """One Fibrous swap hop."""
    token_in: int
    token_out: int
    rate: int
    protocol_id: int
    pool_address: int
    extra_data: list[int] = field(default_factory=list)
