#!/usr/bin/env python3
"""Execute a real Ekubo swap through the AutoSwappr contract.

Requires RPC_URL, PRIVATE_KEY and ACCOUNT_ADDRESS in the environment (or
.env); CONTRACT_ADDRESS defaults to the mainnet deployment. This spends
real funds.

Usage:
    python examples/real_contract_usage.py STRK USDC 1
"""

import argparse
import asyncio
import logging
import sys
from decimal import Decimal

from dotenv import load_dotenv

from autoswappr import AutoSwappr, InvalidInputError, SuccessResponse, get_settings

load_dotenv()

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Swap tokens via AutoSwappr (Ekubo)")
    parser.add_argument("token_in", type=str, help="Token to sell (symbol or address)")
    parser.add_argument("token_out", type=str, help="Token to buy (symbol or address)")
    parser.add_argument("amount", type=Decimal, help="Amount of token_in in whole units")
    args = parser.parse_args()

    settings = get_settings()
    logger.info(f"Settings: {settings.get_safe_dict()}")

    try:
        swapper = AutoSwappr.from_settings(settings)
    except InvalidInputError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    balance = await swapper.get_balance(args.token_in)
    logger.info(f"{args.token_in} balance: {balance}")

    result = await swapper.ekubo_manual_swap(args.token_in, args.token_out, args.amount)
    if isinstance(result, SuccessResponse):
        logger.info(f"Swap submitted: {result.tx_hash}")
        return 0

    logger.error(f"Swap failed ({result.error_type.value}): {result.message}")
    return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
