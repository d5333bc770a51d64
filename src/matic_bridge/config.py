"""
Client configuration.

Network presets are plain dataclasses; the user-facing client
configuration is a set of frozen pydantic models.

Example:
    ```python
    config = BridgeClientConfig(
        network="testnet",
        version="amoy",
        parent=RoleConfig(
            rpc_url=os.environ["SEPOLIA_RPC"],
            private_key=os.environ["BRIDGE_KEY"],
        ),
        child=RoleConfig(
            rpc_url=os.environ["AMOY_RPC"],
            private_key=os.environ["BRIDGE_KEY"],
        ),
        root_chain_manager="0x...",
    )
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from matic_bridge.constants import DEFAULT_ABI_BASE_URL, PROVIDER_TIMEOUT_SECONDS
from matic_bridge.types import TransactionOption

__all__ = [
    "Network",
    "NetworkConfig",
    "NETWORKS",
    "get_network_config",
    "RoleConfig",
    "BridgeClientConfig",
]


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"


@dataclass
class NetworkConfig:
    network: Network
    version: str
    parent_chain_id: int
    child_chain_id: int


NETWORKS: Dict[Tuple[Network, str], NetworkConfig] = {
    (Network.MAINNET, "v1"): NetworkConfig(
        network=Network.MAINNET,
        version="v1",
        parent_chain_id=1,  # Ethereum
        child_chain_id=137,  # Polygon PoS
    ),
    (Network.TESTNET, "amoy"): NetworkConfig(
        network=Network.TESTNET,
        version="amoy",
        parent_chain_id=11155111,  # Sepolia
        child_chain_id=80002,  # Amoy
    ),
}

DEFAULT_VERSIONS = {
    Network.MAINNET: "v1",
    Network.TESTNET: "amoy",
}


def get_network_config(network: Network, version: Optional[str] = None) -> NetworkConfig:
    network = Network(network)
    return NETWORKS[(network, version or DEFAULT_VERSIONS[network])]


class RoleConfig(BaseModel):
    """
    Connection and defaults for one chain role.

    Either ``rpc_url`` or an already-built ``web3`` (AsyncWeb3) is required.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    rpc_url: Optional[str] = Field(
        default=None,
        description="JSON-RPC endpoint of the chain",
    )
    web3: Optional[Any] = Field(
        default=None,
        exclude=True,
        repr=False,
        description="Pre-built AsyncWeb3 instance (takes precedence over rpc_url)",
    )
    private_key: Optional[str] = Field(
        default=None,
        repr=False,
        description="Signing key. SECURITY: Store in environment variable",
    )
    default_config: TransactionOption = Field(
        default_factory=TransactionOption,
        description="Transaction defaults applied to every call on this role",
    )
    timeout: int = Field(
        default=PROVIDER_TIMEOUT_SECONDS,
        ge=1,
        description="HTTP provider timeout in seconds",
    )

    @model_validator(mode="after")
    def _require_endpoint(self) -> "RoleConfig":
        if self.rpc_url is None and self.web3 is None:
            raise ValueError("either rpc_url or web3 is required")
        return self


class BridgeClientConfig(BaseModel):
    """Configuration of a two-chain bridge client."""

    model_config = ConfigDict(frozen=True)

    network: Network = Field(
        default=Network.TESTNET,
        description="Polygon network family, used for ABI lookup",
    )
    version: Optional[str] = Field(
        default=None,
        description="Network version (defaults to v1 on mainnet, amoy on testnet)",
    )
    parent: RoleConfig = Field(..., description="Origin chain")
    child: RoleConfig = Field(..., description="Linked chain")
    root_chain_manager: Optional[str] = Field(
        default=None,
        description="RootChainManager (proxy) address on the origin chain",
    )
    abi_base_url: str = Field(
        default=DEFAULT_ABI_BASE_URL,
        description="Base URL of the contract artifact store",
    )
    fetch_abi: bool = Field(
        default=True,
        description="Fetch ABIs missing from the local registry over HTTP",
    )
    log: bool = Field(
        default=False,
        description="Trace orchestration steps at DEBUG level",
    )

    @property
    def resolved_version(self) -> str:
        return self.version or DEFAULT_VERSIONS[self.network]
