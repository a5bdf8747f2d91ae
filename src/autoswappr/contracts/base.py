"""Shared plumbing for contract wrappers.

Reads go through call_contract at the latest block; writes are signed and
submitted by the account as a single v3 invoke.
"""

import logging
from typing import Optional

from starknet_py.hash.selector import get_selector_from_name
from starknet_py.net.account.base_account import BaseAccount
from starknet_py.net.client import Client
from starknet_py.net.client_models import Call

from autoswappr.errors import wrap_rpc_error

logger = logging.getLogger(__name__)


class ContractWrapper:
    """Base class for thin contract wrappers."""

    def __init__(self, address: int, client: Client):
        self.address = address
        self.client = client

    def build_call(self, entrypoint: str, calldata: Optional[list[int]] = None) -> Call:
        """Build an invoke call to this contract."""
        return Call(
            to_addr=self.address,
            selector=get_selector_from_name(entrypoint),
            calldata=calldata or [],
        )

    async def view(self, entrypoint: str, calldata: Optional[list[int]] = None) -> list[int]:
        """Call a view entrypoint and return the raw felts."""
        call = self.build_call(entrypoint, calldata)
        try:
            return await self.client.call_contract(call=call, block_number="latest")
        except Exception as e:
            raise wrap_rpc_error(e, entrypoint) from e


async def execute(account: BaseAccount, calls: list[Call], operation: str) -> int:
    """Sign and submit calls as one transaction.

    Returns:
        Transaction hash
    """
    try:
        response = await account.execute_v3(calls=calls, auto_estimate=True)
    except Exception as e:
        raise wrap_rpc_error(e, operation) from e

    logger.info(f"Submitted {operation} ({len(calls)} call(s)): {hex(response.transaction_hash)}")
    return response.transaction_hash
