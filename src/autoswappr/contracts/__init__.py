"""Thin wrappers over the on-chain contracts the SDK talks to."""

from autoswappr.contracts.autoswappr import AutoSwapprContract
from autoswappr.contracts.base import ContractWrapper, execute
from autoswappr.contracts.erc20 import Erc20Contract

__all__ = [
    "AutoSwapprContract",
    "ContractWrapper",
    "Erc20Contract",
    "execute",
]
