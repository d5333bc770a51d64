"""
Orchestration core: transaction configuration resolution and the base
contract wrapper.
"""

from matic_bridge.core.base_token import ContractToken, WriteOutcome
from matic_bridge.core.transaction_config import TransactionConfigResolver

__all__ = [
    "ContractToken",
    "TransactionConfigResolver",
    "WriteOutcome",
]
