"""
Chain access layer: per-role web3.py facade, contract handles, write
results and ABI lookup.
"""

from matic_bridge.chain.abi_service import ABIService
from matic_bridge.chain.contract import ContractHandle, ContractMethod
from matic_bridge.chain.role_client import ChainRoleClient
from matic_bridge.chain.write_result import WriteResult

__all__ = [
    "ABIService",
    "ChainRoleClient",
    "ContractHandle",
    "ContractMethod",
    "WriteResult",
]
