#!/usr/bin/env python3
"""Basic usage of the offline client.

Validates a configuration, builds a swap record and dry-runs it. No
network access and no real credentials needed.

Usage:
    python examples/basic_usage.py
"""

import asyncio
import logging
import sys

from autoswappr import InvalidInputError, SimpleAutoSwapprClient, SimpleConfig
from autoswappr.tokens import ETH, USDC

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

PLACEHOLDER = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"


async def main() -> int:
    config = SimpleConfig(
        contract_address=PLACEHOLDER,
        rpc_url="https://starknet-sepolia.public.blastapi.io/rpc/v0_8",
        account_address=PLACEHOLDER,
        private_key=PLACEHOLDER,
    )
    client = SimpleAutoSwapprClient(config)

    print("AutoSwappr client created")
    print(f"Account address: {client.account_address}")
    print(f"Contract address: {client.contract_address}")

    try:
        client.validate_config()
    except InvalidInputError as e:
        print(f"Configuration error: {e}")
        return 1
    print("Configuration is valid")

    # 1 ETH in wei
    swap_data = client.create_swap_data(ETH, USDC, "1000000000000000000")
    print(f"Created swap data: {swap_data}")

    print(await client.simulate_swap(swap_data))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
