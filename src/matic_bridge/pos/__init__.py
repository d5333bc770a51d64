"""
POS bridge: RootChainManager, token wrappers and the POSClient factory.
"""

from matic_bridge.pos.client import POSClient
from matic_bridge.pos.erc20 import ERC20
from matic_bridge.pos.erc721 import ERC721
from matic_bridge.pos.exit_manager import ExitManager
from matic_bridge.pos.pos_token import POSToken
from matic_bridge.pos.root_chain_manager import RootChainManager

__all__ = [
    "POSClient",
    "POSToken",
    "ERC20",
    "ERC721",
    "ExitManager",
    "RootChainManager",
]
