"""Constants for the matic_bridge SDK.

This module defines the constant values used across the SDK,
including gas parameters, batching limits, event-signature selectors
and ABI source settings.
"""

from enum import Enum

# Gas Constants
# Root contracts sit behind delegated proxies; estimates through the proxy
# come in short, so parent-chain writes get this much on top.
EXTRA_GAS_FOR_PROXY_CALL = 1_000_000

# Batching Constants
MAX_BATCH_SIZE = 20

# uint256
MAX_UINT256 = 2**256 - 1

# ABI source (Polygon static artifacts)
DEFAULT_ABI_BASE_URL = "https://static.polygon.technology/network"
ABI_FETCH_TIMEOUT_SECONDS = 30

# Network Constants
PROVIDER_TIMEOUT_SECONDS = 30

DEFAULT_BRIDGE_TYPE = "pos"


class LogEventSignature(str, Enum):
    """Topic0 selectors of the burn events an exit proof is built from.

    ERC20 and ERC721 share the ``Transfer(address,address,uint256)`` topic,
    so ``ERC721_TRANSFER`` is an alias of ``ERC20_TRANSFER``.
    """

    ERC20_TRANSFER = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
    ERC721_TRANSFER = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"
    ERC1155_TRANSFER = "0xc3d58168c5ae7397731d063d5bbf3d657854427343f4c083240f7aacaa2d0f62"
    ERC721_BATCH_TRANSFER = "0xf871896b17e9cb7a64941c62c188a4f5c621b86800e3d15452ece01ce56073df"
    ERC1155_BATCH_TRANSFER = "0x4a39dc06d4c0dbc64b70af90fd698a233a518aa5d07e595d983b8c0526c8f7fb"
    ERC721_TRANSFER_WITH_METADATA = "0xf94915c6d1fd521cee85359239227480c7e8776d7caf1fc3bacad5c269b66a14"


__all__ = [
    "EXTRA_GAS_FOR_PROXY_CALL",
    "MAX_BATCH_SIZE",
    "MAX_UINT256",
    "DEFAULT_ABI_BASE_URL",
    "ABI_FETCH_TIMEOUT_SECONDS",
    "PROVIDER_TIMEOUT_SECONDS",
    "DEFAULT_BRIDGE_TYPE",
    "LogEventSignature",
]
