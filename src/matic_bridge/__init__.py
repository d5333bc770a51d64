"""
matic_bridge - Python client for the Polygon POS lock/mint bridge.

Moves tokens between an origin ("parent") chain and a linked ("child")
chain by calling the bridge contracts with fully resolved transaction
parameters.

Quick Start:
    >>> import asyncio
    >>> from matic_bridge import BridgeClientConfig, POSClient, RoleConfig
    >>>
    >>> async def main():
    ...     pos = await POSClient(
    ...         BridgeClientConfig(
    ...             parent=RoleConfig(rpc_url=SEPOLIA_RPC, private_key=KEY),
    ...             child=RoleConfig(rpc_url=AMOY_RPC, private_key=KEY),
    ...             root_chain_manager=ROOT_CHAIN_MANAGER,
    ...         ),
    ...         exit_manager=my_exit_manager,
    ...     ).init()
    ...     token = pos.erc721(ROOT_TOKEN, is_parent=True)
    ...     result = await token.approve(7)
    ...     print(result.transaction_hash)
    ...
    >>> asyncio.run(main())

Modules:
- `client`: SideChainClient, shared two-chain state
- `chain`: per-role web3.py facade, contract handles, ABI lookup
- `core`: transaction configuration resolution and the base wrapper
- `pos`: RootChainManager, ERC20 / ERC721 wrappers, POSClient
- `errors`: exception hierarchy
- `utils`: conversion, validation and logging helpers
"""

from matic_bridge.version import __version__, __version_info__

# Configuration
from matic_bridge.config import (
    NETWORKS,
    BridgeClientConfig,
    Network,
    NetworkConfig,
    RoleConfig,
    get_network_config,
)

# Constants
from matic_bridge.constants import (
    EXTRA_GAS_FOR_PROXY_CALL,
    MAX_BATCH_SIZE,
    LogEventSignature,
)

# Types
from matic_bridge.types import (
    ChainRole,
    ContractParam,
    TransactionConfig,
    TransactionOption,
    TransactionReceipt,
)

# Chain layer
from matic_bridge.chain import (
    ABIService,
    ChainRoleClient,
    ContractHandle,
    ContractMethod,
    WriteResult,
)

# Client
from matic_bridge.client import SideChainClient

# Core
from matic_bridge.core import ContractToken, TransactionConfigResolver

# POS bridge
from matic_bridge.pos import (
    ERC20,
    ERC721,
    ExitManager,
    POSClient,
    POSToken,
    RootChainManager,
)

# Errors
from matic_bridge.errors import (
    AbiNotFoundError,
    BatchSizeExceededError,
    ErrorType,
    ExitProofError,
    InvalidAddressError,
    InvalidTokenIdError,
    MaticBridgeError,
    MissingArgumentError,
    MissingSenderError,
    RoleMismatchError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    # Configuration
    "Network",
    "NetworkConfig",
    "NETWORKS",
    "get_network_config",
    "RoleConfig",
    "BridgeClientConfig",
    # Constants
    "EXTRA_GAS_FOR_PROXY_CALL",
    "MAX_BATCH_SIZE",
    "LogEventSignature",
    # Types
    "ChainRole",
    "ContractParam",
    "TransactionOption",
    "TransactionConfig",
    "TransactionReceipt",
    # Chain layer
    "ABIService",
    "ChainRoleClient",
    "ContractHandle",
    "ContractMethod",
    "WriteResult",
    # Client
    "SideChainClient",
    # Core
    "ContractToken",
    "TransactionConfigResolver",
    # POS bridge
    "POSClient",
    "POSToken",
    "ERC20",
    "ERC721",
    "ExitManager",
    "RootChainManager",
    # Errors
    "MaticBridgeError",
    "ErrorType",
    "ValidationError",
    "BatchSizeExceededError",
    "MissingArgumentError",
    "InvalidAddressError",
    "InvalidTokenIdError",
    "RoleMismatchError",
    "MissingSenderError",
    "AbiNotFoundError",
    "ExitProofError",
]
