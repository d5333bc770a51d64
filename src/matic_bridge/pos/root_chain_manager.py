"""
RootChainManager: the origin-chain entry point of the POS bridge.

Deposits lock assets in the predicate for the token type; exits release
them once a burn on the child chain is proven.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from matic_bridge.chain import ContractMethod
from matic_bridge.core import ContractToken, WriteOutcome
from matic_bridge.core.transaction_config import OptionLike
from matic_bridge.types import ContractParam, TransactionOption

if TYPE_CHECKING:
    from matic_bridge.client import SideChainClient


class RootChainManager(ContractToken):
    """Wrapper of the RootChainManager proxy on the origin chain."""

    def __init__(self, client: "SideChainClient", address: str) -> None:
        super().__init__(
            ContractParam(
                address=address,
                name="RootChainManager",
                bridge_type="pos",
                is_parent=True,
            ),
            client,
        )

    async def method(self, name: str, *args: Any) -> ContractMethod:
        contract = await self.get_contract()
        return contract.method(name, *args)

    async def deposit(
        self,
        user_address: str,
        token_address: str,
        deposit_data: Union[bytes, str],
        option: OptionLike = None,
    ) -> WriteOutcome:
        """``depositFor(user, rootToken, depositData)``."""
        method = await self.method("depositFor", user_address, token_address, deposit_data)
        return await self.process_write(method, option)

    async def deposit_ether(
        self,
        amount: int,
        user_address: str,
        option: OptionLike = None,
    ) -> WriteOutcome:
        """``depositEtherFor(user)`` carrying ``amount`` wei."""
        option = TransactionOption.coerce(option).model_copy(update={"value": amount})
        method = await self.method("depositEtherFor", user_address)
        return await self.process_write(method, option)

    async def exit(self, payload: Union[bytes, str], option: OptionLike = None) -> WriteOutcome:
        method = await self.method("exit", payload)
        return await self.process_write(method, option)

    async def is_exit_processed(self, exit_hash: Union[bytes, str]) -> bool:
        method = await self.method("processedExits", exit_hash)
        return bool(await self.process_read(method))

    async def token_to_type(self, root_token: str) -> bytes:
        method = await self.method("tokenToType", root_token)
        return await self.process_read(method)

    async def type_to_predicate(self, token_type: Union[bytes, str]) -> str:
        method = await self.method("typeToPredicate", token_type)
        return await self.process_read(method)
