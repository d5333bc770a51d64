"""
Types for the matic_bridge SDK.
"""

from matic_bridge.types.contract import ChainRole, ContractParam
from matic_bridge.types.transaction import (
    TransactionConfig,
    TransactionOption,
    TransactionReceipt,
)

__all__ = [
    "ChainRole",
    "ContractParam",
    "TransactionOption",
    "TransactionConfig",
    "TransactionReceipt",
]
