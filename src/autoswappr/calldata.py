"""Calldata building for AutoSwappr and ERC20 calls.

Values follow the Cairo serde layout: u256 is two felts (low, high),
i129 is (mag, sign), bools are 0/1 and arrays are length-prefixed.
"""

from typing import Union

from starknet_py.cairo.felt import decode_shortstring

from autoswappr.errors import InvalidInputError
from autoswappr.types import EkuboSwapData, I129, PoolKey, Route, RouteParams, SwapParams, SwapParameters

# Stark field prime
FIELD_PRIME = 2**251 + 17 * 2**192 + 1

U128_MASK = (1 << 128) - 1
U256_MAX = (1 << 256) - 1

# Ekubo price bounds
MIN_SQRT_RATIO = 18446748437148339061
MAX_SQRT_RATIO = 6277100250585753475930931601400621808602321654880405518632

# Ekubo fee is a 0.128 fixed point fraction; 0.05% pools use 0.1% tick spacing
DEFAULT_POOL_FEE = 2**128 * 5 // 10000
DEFAULT_TICK_SPACING = 1000


def parse_felt(value: Union[str, int], field: str = "value") -> int:
    """Parse a hex string or int into a field element.

    Raises:
        InvalidInputError: If the value is empty, not hex, or outside the field
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"Invalid {field}: {value!r}")

    if isinstance(value, int):
        felt = value
    else:
        text = (value or "").strip()
        if not text:
            raise InvalidInputError(f"Invalid {field}: empty string")
        if not text.lower().startswith("0x"):
            raise InvalidInputError(f"Invalid {field}: must start with 0x")
        try:
            felt = int(text, 16)
        except ValueError:
            raise InvalidInputError(f"Invalid {field}: {text!r} is not hex")

    if not 0 <= felt < FIELD_PRIME:
        raise InvalidInputError(f"Invalid {field}: outside the Stark field")
    return felt


def is_valid_address(address: str) -> bool:
    """Check that a string is a 0x-prefixed hex felt."""
    if not isinstance(address, str) or len(address) < 3:
        return False
    try:
        parse_felt(address)
    except InvalidInputError:
        return False
    return True


def to_hex(felt: int) -> str:
    """Format a felt as 0x-prefixed hex."""
    return hex(felt)


def to_uint256(amount: int) -> tuple[int, int]:
    """Split an integer into (low, high) 128-bit halves."""
    if amount < 0 or amount > U256_MAX:
        raise InvalidInputError(f"Amount {amount} does not fit in u256")
    return amount & U128_MASK, amount >> 128


def from_uint256(low: int, high: int) -> int:
    """Join (low, high) 128-bit halves into an integer."""
    return (high << 128) | low


def decode_string(felts: list[int]) -> str:
    """Decode a Cairo string returned by a view call.

    Handles both legacy short strings (a single felt) and ByteArray
    (word count, 31-byte words, pending word, pending length).
    """
    if not felts:
        return ""
    if len(felts) == 1:
        return decode_shortstring(felts[0])

    word_count = felts[0]
    if len(felts) != word_count + 3:
        return decode_shortstring(felts[0])

    data = b"".join(word.to_bytes(31, "big") for word in felts[1 : 1 + word_count])
    pending_word, pending_len = felts[1 + word_count], felts[2 + word_count]
    if pending_len:
        data += pending_word.to_bytes(pending_len, "big")
    return data.decode("utf-8", errors="replace")


def build_pool_key(
    token_in: int,
    token_out: int,
    fee: int = DEFAULT_POOL_FEE,
    tick_spacing: int = DEFAULT_TICK_SPACING,
    extension: int = 0,
) -> tuple[PoolKey, bool]:
    """Build an Ekubo pool key for a token pair.

    Returns:
        Tuple of (pool_key, is_token1) where is_token1 tells whether the
        input token sorts as token1 of the pool
    """
    if token_in == token_out:
        raise InvalidInputError("Input and output tokens must differ")

    token0, token1 = sorted((token_in, token_out))
    pool_key = PoolKey(
        token0=token0,
        token1=token1,
        fee=fee,
        tick_spacing=tick_spacing,
        extension=extension,
    )
    return pool_key, token_in == token1


def build_swap_data(token_in: int, token_out: int, amount: int, caller: int) -> EkuboSwapData:
    """Build an exact-input Ekubo swap for the default pool of a pair."""
    if amount > U128_MASK:
        raise InvalidInputError(f"Amount {amount} does not fit in u128")

    pool_key, is_token1 = build_pool_key(token_in, token_out)
    # Selling token1 pushes the price up, selling token0 pushes it down
    limit = MAX_SQRT_RATIO if is_token1 else MIN_SQRT_RATIO
    params = SwapParameters(
        amount=I129(mag=amount, sign=False),
        is_token1=is_token1,
        sqrt_ratio_limit=limit,
        skip_ahead=0,
    )
    return EkuboSwapData(params=params, pool_key=pool_key, caller=caller)


def serialize_swap_data(swap_data: EkuboSwapData) -> list[int]:
    """Serialize swap data for ekubo_swap / ekubo_manual_swap."""
    params = swap_data.params
    pool_key = swap_data.pool_key
    sqrt_low, sqrt_high = to_uint256(params.sqrt_ratio_limit)
    return [
        params.amount.mag,
        int(params.amount.sign),
        int(params.is_token1),
        sqrt_low,
        sqrt_high,
        params.skip_ahead,
        pool_key.token0,
        pool_key.token1,
        pool_key.fee,
        pool_key.tick_spacing,
        pool_key.extension,
        swap_data.caller,
    ]


def serialize_avnu_swap(
    protocol_swapper: int,
    token_from_address: int,
    token_from_amount: int,
    token_to_address: int,
    token_to_min_amount: int,
    beneficiary: int,
    integrator_fee_amount_bps: int,
    integrator_fee_recipient: int,
    routes: list[Route],
) -> list[int]:
    """Serialize arguments of avnu_swap."""
    calldata = [
        protocol_swapper,
        token_from_address,
        *to_uint256(token_from_amount),
        token_to_address,
        *to_uint256(token_to_min_amount),
        beneficiary,
        integrator_fee_amount_bps,
        integrator_fee_recipient,
        len(routes),
    ]
    for route in routes:
        calldata.extend([route.token_from, route.token_to, route.exchange_address, route.percent])
        calldata.append(len(route.additional_swap_params))
        calldata.extend(route.additional_swap_params)
    return calldata


def serialize_fibrous_swap(
    route_params: RouteParams,
    swap_params: list[SwapParams],
    protocol_swapper: int,
    beneficiary: int,
) -> list[int]:
    """Serialize arguments of fibrous_swap."""
    calldata = [
        route_params.token_in,
        route_params.token_out,
        *to_uint256(route_params.amount_in),
        *to_uint256(route_params.min_received),
        route_params.destination,
        len(swap_params),
    ]
    for hop in swap_params:
        calldata.extend([hop.token_in, hop.token_out, hop.rate, hop.protocol_id, hop.pool_address])
        calldata.append(len(hop.extra_data))
        calldata.extend(hop.extra_data)
    calldata.extend([protocol_swapper, beneficiary])
    return calldata
