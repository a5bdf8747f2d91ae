#!/usr/bin/env python3
"""Tour of the SDK data types. Runs without credentials or network."""

from autoswappr import AutoSwapprConfig
from autoswappr.calldata import build_swap_data, from_uint256, is_valid_address, serialize_swap_data, to_uint256
from autoswappr.tokens import (
    AUTOSWAPPR_ADDRESS,
    AVNU_EXCHANGE_ADDRESS,
    EKUBO_CORE_ADDRESS,
    FIBROUS_EXCHANGE_ADDRESS,
    SUPPORTED_TOKENS,
    ETH,
    STRK,
    to_base_units,
)

PLACEHOLDER = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"


def main():
    config = AutoSwapprConfig(
        contract_address=AUTOSWAPPR_ADDRESS,
        rpc_url="https://starknet-mainnet.public.blastapi.io/rpc/v0_8",
        account_address=PLACEHOLDER,
        private_key=PLACEHOLDER,
    )
    print("Configuration:")
    print(f"  {config!r}")

    one_eth = to_base_units("1", 18)
    low, high = to_uint256(one_eth)
    print("\nu256 conversion:")
    print(f"  1 ETH = {one_eth} wei -> low={low}, high={high} -> {from_uint256(low, high)}")

    swap_data = build_swap_data(int(ETH, 16), int(STRK, 16), one_eth, int(PLACEHOLDER, 16))
    print("\nEkubo swap data (ETH -> STRK):")
    print(f"  token0={hex(swap_data.pool_key.token0)}")
    print(f"  token1={hex(swap_data.pool_key.token1)}")
    print(f"  is_token1={swap_data.params.is_token1}")
    print(f"  calldata={[hex(felt) for felt in serialize_swap_data(swap_data)]}")

    print("\nAddress validation:")
    for address in (ETH, STRK, AUTOSWAPPR_ADDRESS, "0xnothex", "1234"):
        print(f"  {address}: {'valid' if is_valid_address(address) else 'invalid'}")

    print("\nSupported tokens:")
    for token in SUPPORTED_TOKENS.values():
        print(f"  {token.symbol:5} {token.decimals:>2} decimals  {token.address}")

    print("\nContracts:")
    print(f"  AutoSwappr: {AUTOSWAPPR_ADDRESS}")
    print(f"  Ekubo Core: {EKUBO_CORE_ADDRESS}")
    print(f"  Fibrous:    {FIBROUS_EXCHANGE_ADDRESS}")
    print(f"  AVNU:       {AVNU_EXCHANGE_ADDRESS}")


if __name__ == "__main__":
    main()
