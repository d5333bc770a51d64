"""
Contract handles over web3.py AsyncContract.

A ContractHandle is what a wrapper memoizes after its ABI is fetched; each
call on it produces a ContractMethod bound to one function name and its
positional arguments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Sequence, Tuple

from web3.contract import AsyncContract

from matic_bridge.types import ChainRole, TransactionConfig

if TYPE_CHECKING:
    from matic_bridge.chain.role_client import ChainRoleClient
    from matic_bridge.chain.write_result import WriteResult


# The contract function supplies these itself; web3.py rejects them in
# build_transaction / estimate_gas params.
_METHOD_OWNED_KEYS = ("to", "data")


class ContractMethod:
    """One bound call ``name(*args)`` on a contract."""

    def __init__(
        self,
        handle: "ContractHandle",
        name: str,
        args: Sequence[Any],
    ) -> None:
        self.handle = handle
        self.name = name
        self.args: Tuple[Any, ...] = tuple(args)
        self._function = handle.contract.functions[name](*self.args)

    def __repr__(self) -> str:
        return f"ContractMethod({self.name}, args={self.args!r}, address={self.handle.address})"

    def _params(self, config: TransactionConfig) -> Dict[str, Any]:
        params = self.handle.client.to_tx_params(config)
        for key in _METHOD_OWNED_KEYS:
            params.pop(key, None)
        return params

    async def read(self, config: TransactionConfig) -> Any:
        """``eth_call`` the method and return the decoded value."""
        return await self._function.call(self._params(config))

    async def estimate_gas(self, config: TransactionConfig) -> int:
        return await self._function.estimate_gas(self._params(config))

    async def build_transaction(self, config: TransactionConfig) -> Dict[str, Any]:
        return await self._function.build_transaction(self._params(config))

    async def write(self, config: TransactionConfig) -> "WriteResult":
        """Build the transaction with ``config`` and submit it."""
        tx = await self.build_transaction(config)
        return await self.handle.client.send(tx)

    def encode_abi(self) -> str:
        """Hex call data (selector + encoded arguments)."""
        return self.handle.contract.encode_abi(self.name, args=list(self.args))


class ContractHandle:
    """
    A deployed contract on one chain role.

    Attributes:
        address: Contract address
        abi: Contract ABI
        role: Chain role the contract lives on
    """

    def __init__(
        self,
        address: str,
        abi: List[Dict[str, Any]],
        role: ChainRole,
        contract: AsyncContract,
        client: "ChainRoleClient",
    ) -> None:
        self.address = address
        self.abi = abi
        self.role = role
        self.contract = contract
        self.client = client

    def __repr__(self) -> str:
        return f"ContractHandle(address={self.address}, role={self.role.value})"

    def method(self, name: str, *args: Any) -> ContractMethod:
        return ContractMethod(self, name, args)
