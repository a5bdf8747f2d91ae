"""AutoSwappr SDK - swap tokens on Starknet through the AutoSwappr contract.

Entry points:
- AutoSwappr: configured swapper (config, ekubo_manual_swap, queries)
- AutoSwapprClient: full contract client (Ekubo, AVNU, Fibrous, ERC20)
- SimpleAutoSwapprClient: offline validation, swap records and dry runs
"""

from autoswappr.client import AutoSwapprClient
from autoswappr.config import Settings, get_settings
from autoswappr.errors import (
    AutoSwapprError,
    ContractError,
    InvalidInputError,
    NetworkError,
    OtherError,
    UnsupportedTokenError,
    ZeroAmountError,
)
from autoswappr.network import Network, StarknetProvider
from autoswappr.simple_client import SimpleAutoSwapprClient
from autoswappr.swappr import AutoSwappr
from autoswappr.types import (
    AutoSwapprConfig,
    ContractInfo,
    EkuboSwapData,
    ErrorKind,
    ErrorResponse,
    FeeType,
    I129,
    PoolKey,
    Route,
    RouteParams,
    SimpleConfig,
    SuccessResponse,
    SwapData,
    SwapParameters,
    SwapParams,
    SwapResponse,
    TokenInfo,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "AutoSwappr",
    "AutoSwapprClient",
    "SimpleAutoSwapprClient",
    "StarknetProvider",
    "Network",
    # Configuration
    "Settings",
    "get_settings",
    "SimpleConfig",
    "AutoSwapprConfig",
    # Responses
    "SuccessResponse",
    "ErrorResponse",
    "SwapResponse",
    "ErrorKind",
    # Errors
    "AutoSwapprError",
    "InvalidInputError",
    "ZeroAmountError",
    "UnsupportedTokenError",
    "NetworkError",
    "ContractError",
    "OtherError",
    # Records
    "SwapData",
    "EkuboSwapData",
    "SwapParameters",
    "PoolKey",
    "I129",
    "TokenInfo",
    "ContractInfo",
    "FeeType",
    "Route",
    "RouteParams",
    "SwapParams",
]
