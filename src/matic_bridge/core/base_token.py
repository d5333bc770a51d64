"""
Base contract wrapper.

A ContractToken binds one logical contract to one chain role for its whole
lifetime and provides the guarded read/write primitives every bridge
operation is built from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Union

from matic_bridge.chain import ChainRoleClient, ContractHandle, ContractMethod, WriteResult
from matic_bridge.core.transaction_config import OptionLike, TransactionConfigResolver
from matic_bridge.errors import ErrorType
from matic_bridge.types import ChainRole, ContractParam, TransactionConfig, TransactionOption
from matic_bridge.utils.concurrency import SingleFlight

if TYPE_CHECKING:
    from matic_bridge.client import SideChainClient

WriteOutcome = Union[WriteResult, TransactionConfig]
"""A submitted write, or the unexecuted transaction when ``return_transaction`` is set."""


class ContractToken:
    """
    Wrapper around one contract on one chain role.

    Args:
        contract_param: Address, logical name, role and bridge type
        client: Shared SideChainClient (not owned)
    """

    def __init__(self, contract_param: ContractParam, client: "SideChainClient") -> None:
        self.contract_param = contract_param
        self.client = client
        self._resolver = TransactionConfigResolver(client)
        self._contract: SingleFlight[ContractHandle] = SingleFlight()

    def __repr__(self) -> str:
        param = self.contract_param
        return f"{self.__class__.__name__}(address={param.address}, role={param.role.value})"

    @property
    def address(self) -> str:
        return self.contract_param.address

    @property
    def is_parent(self) -> bool:
        return self.contract_param.is_parent

    @property
    def role(self) -> ChainRole:
        return self.contract_param.role

    @property
    def resolver(self) -> TransactionConfigResolver:
        return self._resolver

    # ------------------------------------------------------------------
    # Contract handle
    # ------------------------------------------------------------------
    async def get_contract(self) -> ContractHandle:
        """
        Memoized contract handle.

        Concurrent first callers share one ABI fetch. A failed fetch is not
        cached; the next call retries.
        """
        return await self._contract.get(self._load_contract)

    async def _load_contract(self) -> ContractHandle:
        param = self.contract_param
        abi = await self.client.get_abi(param.name, param.bridge_type)
        return self.get_role_client().get_contract(param.address, abi)

    def get_role_client(self, is_parent: Optional[bool] = None) -> ChainRoleClient:
        return self.client.get_client(self.is_parent if is_parent is None else is_parent)

    # ------------------------------------------------------------------
    # Read / write primitives
    # ------------------------------------------------------------------
    async def process_read(self, method: ContractMethod, option: OptionLike = None) -> Any:
        """
        Read through ``method`` with role defaults merged with ``option``.

        Returns:
            The decoded value, or the unexecuted call when
            ``return_transaction`` is set
        """
        option = TransactionOption.coerce(option)
        self.client.logger.log("process read", method=method.name)
        config = await self._resolver.resolve(option, method, self.is_parent, is_write=False)
        self.client.logger.log("process read config", method=method.name)
        if option.return_transaction:
            return self._describe(method, config)
        return await method.read(config)

    async def process_write(self, method: ContractMethod, option: OptionLike = None) -> WriteOutcome:
        """
        Resolve a full write configuration and submit ``method``.

        With ``return_transaction`` the resolved transaction (target address,
        call data, gas, price, nonce, chain id) is returned unsent.

        Raises:
            MissingSenderError: If no ``from`` can be resolved
        """
        option = TransactionOption.coerce(option)
        self.client.logger.log("process write", method=method.name)
        config = await self._resolver.resolve(option, method, self.is_parent, is_write=True)
        self.client.logger.log(
            "process write config",
            method=method.name,
            gas_limit=config.gas_limit,
            nonce=config.nonce,
            chain_id=config.chain_id,
        )
        if option.return_transaction:
            return self._describe(method, config)
        return await method.write(config)

    async def send_transaction(self, option: OptionLike = None) -> WriteOutcome:
        """Role-level write not bound to a contract method (e.g. a value transfer)."""
        option = TransactionOption.coerce(option)
        self.client.logger.log("process write", method=None)
        config = await self._resolver.resolve(option, None, self.is_parent, is_write=True)
        if option.return_transaction:
            return config
        return await self.get_role_client().write(config)

    async def read_transaction(self, option: OptionLike = None) -> Any:
        """Role-level ``eth_call`` not bound to a contract method."""
        option = TransactionOption.coerce(option)
        self.client.logger.log("process read", method=None)
        config = await self._resolver.resolve(option, None, self.is_parent, is_write=False)
        if option.return_transaction:
            return config
        return await self.get_role_client().read(config)

    @staticmethod
    def _describe(method: ContractMethod, config: TransactionConfig) -> TransactionConfig:
        return config.model_copy(
            update={"to": method.handle.address, "data": method.encode_abi()}
        )

    # ------------------------------------------------------------------
    # Role guards
    # ------------------------------------------------------------------
    def check_for_parent(self, method_name: str) -> None:
        if not self.is_parent:
            self.client.logger.error(ErrorType.ALLOWED_ON_ROOT, method_name).throw()

    def check_for_child(self, method_name: str) -> None:
        if self.is_parent:
            self.client.logger.error(ErrorType.ALLOWED_ON_CHILD, method_name).throw()
