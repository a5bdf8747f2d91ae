"""ERC20 token contract wrapper."""

import logging

from starknet_py.net.account.base_account import BaseAccount
from starknet_py.net.client_models import Call

from autoswappr.calldata import decode_string, from_uint256, to_uint256
from autoswappr.contracts.base import ContractWrapper, execute
from autoswappr.errors import ContractError

logger = logging.getLogger(__name__)


def _read_u256(result: list[int], entrypoint: str) -> int:
    """Read a u256 return value; some older tokens return a single felt."""
    if not result:
        raise ContractError(f"{entrypoint} returned no data")
    if len(result) == 1:
        return result[0]
    return from_uint256(result[0], result[1])


class Erc20Contract(ContractWrapper):
    """ERC20 token on Starknet."""

    async def balance_of(self, account: int) -> int:
        """Get token balance in base units."""
        return _read_u256(await self.view("balance_of", [account]), "balance_of")

    async def allowance(self, owner: int, spender: int) -> int:
        """Get remaining allowance in base units."""
        return _read_u256(await self.view("allowance", [owner, spender]), "allowance")

    async def decimals(self) -> int:
        result = await self.view("decimals")
        if not result:
            raise ContractError("decimals returned no data")
        return result[0]

    async def symbol(self) -> str:
        return decode_string(await self.view("symbol"))

    async def name(self) -> str:
        return decode_string(await self.view("name"))

    def approve_call(self, spender: int, amount: int) -> Call:
        """Build an approve call without submitting it."""
        return self.build_call("approve", [spender, *to_uint256(amount)])

    async def approve(self, account: BaseAccount, spender: int, amount: int) -> int:
        """Approve spender and return the transaction hash."""
        return await execute(account, [self.approve_call(spender, amount)], "approve")
