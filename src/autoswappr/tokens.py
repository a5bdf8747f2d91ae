"""Supported Starknet mainnet tokens and contract addresses."""

from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

from autoswappr.errors import InvalidInputError, UnsupportedTokenError
from autoswappr.types import TokenInfo

# Contract addresses on Starknet mainnet
AUTOSWAPPR_ADDRESS = "0x05582ad635c43b4c14dbfa53cbde0df32266164a0d1b36e5b510e5b34aeb364b"
EKUBO_CORE_ADDRESS = "0x00000005dd3d2f4429af886cd1a3b08289dbcea99a294197e9eb43b0e0325b4b"
FIBROUS_EXCHANGE_ADDRESS = "0x00f6f4cf62e3c010e0ac2451cc7807b5eec19a40b0faacd00cca3914280fdf5a"
AVNU_EXCHANGE_ADDRESS = "0x04270219d365d6b017231b52e92b3fb5d7c8378b05e9abc97724537a80e93b0f"

# Token addresses on Starknet mainnet
ETH = "0x049d36570d4e46f48e99674bd3fcc84644ddd6b96f7c741b1562b82f9e004dc7"
STRK = "0x04718f5a0fc34cc1af16a1cdee98ffb20c31f5cd61d6ab07201858f4287c938d"
USDC = "0x053c91253bc9682c04929ca02ed00b3e423f6710d2ee7e0d5ebb06f3ecf368a8"
USDT = "0x068f5c6a61780768455de69077e07e89787839bf8166decfbf92b645209c0fb8"
WBTC = "0x03fe2b97c1fd336e750087d68b9b867997fd64a2661ff3ca5a7c771641e8e7ac"

SUPPORTED_TOKENS = {
    "ETH": TokenInfo(address=ETH, symbol="ETH", decimals=18, name="Ether"),
    "USDC": TokenInfo(address=USDC, symbol="USDC", decimals=6, name="USD Coin"),
    "USDT": TokenInfo(address=USDT, symbol="USDT", decimals=6, name="Tether USD"),
    "WBTC": TokenInfo(address=WBTC, symbol="WBTC", decimals=8, name="Wrapped BTC"),
    "STRK": TokenInfo(address=STRK, symbol="STRK", decimals=18, name="Starknet Token"),
}


def get_token_info(symbol: str) -> TokenInfo:
    """Look up a supported token by symbol (case-insensitive)."""
    token = SUPPORTED_TOKENS.get(symbol.strip().upper())
    if token is None:
        raise UnsupportedTokenError(symbol)
    return token


def get_token_address(symbol: str) -> str:
    """Get the contract address of a supported token."""
    return get_token_info(symbol).address


def get_token_by_address(address: Union[str, int]) -> TokenInfo:
    """Look up a supported token by contract address.

    Addresses compare as felts, so leading zeros and letter case do not matter.
    """
    try:
        value = address if isinstance(address, int) else int(address, 16)
    except ValueError:
        raise UnsupportedTokenError(str(address))

    for token in SUPPORTED_TOKENS.values():
        if int(token.address, 16) == value:
            return token
    raise UnsupportedTokenError(address if isinstance(address, str) else hex(address))


def resolve_token(token: str) -> TokenInfo:
    """Resolve a symbol or a 0x address to a supported token."""
    if token.strip().lower().startswith("0x"):
        return get_token_by_address(token.strip())
    return get_token_info(token)


def to_base_units(amount: Union[Decimal, int, str], decimals: int) -> int:
    """Scale a human-readable amount to integer base units.

    Raises:
        InvalidInputError: If the amount is not a number, is negative, or
            has more fractional digits than the token supports
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise InvalidInputError(f"Invalid amount: {amount!r}")

    if not value.is_finite() or value < 0:
        raise InvalidInputError(f"Invalid amount: {amount!r}")

    # Exact scaling; the default context rounds past 28 digits
    with localcontext() as ctx:
        ctx.prec = len(value.as_tuple().digits) + decimals + 1
        scaled = value.scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise InvalidInputError(
            f"Amount {amount} has more than {decimals} decimal places"
        )
    return int(scaled)


def from_base_units(amount: int, decimals: int) -> Decimal:
    """Convert integer base units to a human-readable Decimal."""
    with localcontext() as ctx:
        ctx.prec = len(str(abs(amount))) + decimals + 1
        return Decimal(amount) / Decimal(10 ** decimals)
