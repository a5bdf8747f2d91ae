"""SDK configuration using pydantic-settings.

Values come from environment variables (RPC_URL, PRIVATE_KEY,
ACCOUNT_ADDRESS, CONTRACT_ADDRESS, ...) or a local .env file.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from autoswappr.tokens import AUTOSWAPPR_ADDRESS
from autoswappr.types import AutoSwapprConfig


class Settings(BaseSettings):
    """SDK settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Starknet connection
    # ======================
    rpc_url: str = Field(default="", description="Starknet JSON-RPC endpoint")
    network: str = Field(default="mainnet", description="mainnet or sepolia")

    # ======================
    # Wallet
    # ======================
    account_address: str = Field(default="", description="Wallet address")
    private_key: str = Field(default="", description="Wallet private key")

    # ======================
    # AutoSwappr
    # ======================
    contract_address: str = Field(
        default=AUTOSWAPPR_ADDRESS, description="AutoSwappr contract address"
    )
    autoswap_backend_url: Optional[str] = Field(
        default=None, description="AutoSwappr backend endpoint for automatic swaps"
    )
    backend_timeout: float = Field(default=30.0, description="Backend request timeout in seconds")

    # ======================
    # Environment
    # ======================
    debug: bool = Field(default=False, description="Enable debug logging")

    @property
    def has_credentials(self) -> bool:
        """Check if all connection strings are configured."""
        return bool(
            self.rpc_url and self.account_address and self.private_key and self.contract_address
        )

    def to_client_config(self) -> AutoSwapprConfig:
        """Build the full client configuration."""
        return AutoSwapprConfig(
            contract_address=self.contract_address,
            rpc_url=self.rpc_url,
            account_address=self.account_address,
            private_key=self.private_key,
            network=self.network,
        )

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "rpc_url": self.rpc_url or "(not set)",
            "network": self.network,
            "account_address": self.account_address or "(not set)",
            "private_key": "***" if self.private_key else "(not set)",
            "contract_address": self.contract_address,
            "autoswap_backend_url": self.autoswap_backend_url or "(not set)",
            "debug": self.debug,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
