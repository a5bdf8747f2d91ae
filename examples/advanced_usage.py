#!/usr/bin/env python3
"""Read-only tour of the full client against a live node.

Reads RPC_URL, PRIVATE_KEY, ACCOUNT_ADDRESS and CONTRACT_ADDRESS from the
environment (or .env). Nothing is signed or submitted.

Usage:
    python examples/advanced_usage.py [--token ETH]
"""

import argparse
import asyncio
import logging
import os

from dotenv import load_dotenv

from autoswappr import AutoSwapprClient, AutoSwapprConfig, AutoSwapprError
from autoswappr.network import PUBLIC_RPC_MAINNET
from autoswappr.tokens import AUTOSWAPPR_ADDRESS, STRK

load_dotenv()

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

PLACEHOLDER = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"


async def main():
    parser = argparse.ArgumentParser(description="AutoSwappr read-only queries")
    parser.add_argument("--token", type=str, default="ETH", help="Token symbol or address")
    args = parser.parse_args()

    config = AutoSwapprConfig(
        rpc_url=os.getenv("RPC_URL", PUBLIC_RPC_MAINNET),
        private_key=os.getenv("PRIVATE_KEY", PLACEHOLDER),
        account_address=os.getenv("ACCOUNT_ADDRESS", PLACEHOLDER),
        contract_address=os.getenv("CONTRACT_ADDRESS", AUTOSWAPPR_ADDRESS),
    )
    if config.private_key == PLACEHOLDER:
        logger.warning("Using placeholder credentials; set PRIVATE_KEY and ACCOUNT_ADDRESS for real values")

    try:
        client = AutoSwapprClient(config)
    except AutoSwapprError as e:
        logger.error(f"Client creation failed: {e}")
        return

    logger.info(f"Account: {client.account_address}")
    logger.info(f"Contract: {client.contract_address}")

    try:
        params = await client.get_contract_parameters()
        logger.info(f"Contract parameters: {params}")
    except AutoSwapprError as e:
        logger.error(f"Failed to get contract parameters: {e}")

    try:
        info = await client.get_token_info(args.token)
        logger.info(f"Token: {info.name} ({info.symbol}), {info.decimals} decimals")

        balance = await client.get_token_balance(args.token)
        allowance = await client.get_allowance(args.token)
        logger.info(f"Balance: {balance}, allowance for AutoSwappr: {allowance}")

        usd = await client.get_token_amount_in_usd(args.token, 10 ** info.decimals)
        logger.info(f"1 {info.symbol} in USD (raw oracle value): {usd}")
    except AutoSwapprError as e:
        logger.error(f"Token query failed ({e.kind.value}): {e}")

    try:
        supported, feed_id = await client.get_token_from_status_and_value(STRK)
        logger.info(f"STRK accepted as input: {supported} (feed {hex(feed_id)})")
    except AutoSwapprError as e:
        logger.error(f"Failed to read STRK status: {e}")


if __name__ == "__main__":
    asyncio.run(main())
