"""
ERC20 (fungible) token bridged over POS.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from matic_bridge.constants import MAX_UINT256, LogEventSignature
from matic_bridge.core import WriteOutcome
from matic_bridge.core.transaction_config import OptionLike
from matic_bridge.pos.exit_manager import ExitManager
from matic_bridge.pos.pos_token import POSToken
from matic_bridge.pos.root_chain_manager import RootChainManager
from matic_bridge.types import ContractParam
from matic_bridge.utils.converter import TokenAmount, to_uint256

if TYPE_CHECKING:
    from matic_bridge.client import SideChainClient


class ERC20(POSToken):
    """
    Fungible POS token.

    Spender arguments default to the token's predicate, which only exists
    for root tokens.

    Example:
        >>> root = pos.erc20("0xRootToken...", is_parent=True)
        >>> await root.approve(10**18)
        >>> await root.deposit(10**18, "0xUser...")
        >>> child = pos.erc20("0xChildToken...")
        >>> burn = await child.withdraw_start(10**18)
        >>> await root.withdraw_exit(burn.transaction_hash)
    """

    def __init__(
        self,
        token_address: str,
        is_parent: bool,
        client: "SideChainClient",
        root_chain_manager: RootChainManager,
        exit_manager: ExitManager,
    ) -> None:
        super().__init__(
            ContractParam(
                address=token_address,
                name="ChildERC20",
                bridge_type="pos",
                is_parent=is_parent,
            ),
            client,
            root_chain_manager,
            exit_manager,
        )

    async def _spender(self, spender_address: Optional[str], method_name: str) -> str:
        if spender_address:
            return spender_address
        self.check_for_parent(method_name)
        return await self.get_predicate_address()

    async def get_balance(self, user_address: str, option: OptionLike = None) -> int:
        contract = await self.get_contract()
        method = contract.method("balanceOf", user_address)
        return int(await self.process_read(method, option))

    async def get_allowance(
        self,
        user_address: str,
        spender_address: Optional[str] = None,
        option: OptionLike = None,
    ) -> int:
        spender = await self._spender(spender_address, "get_allowance")
        contract = await self.get_contract()
        method = contract.method("allowance", user_address, spender)
        return int(await self.process_read(method, option))

    async def approve(
        self,
        amount: TokenAmount,
        spender_address: Optional[str] = None,
        option: OptionLike = None,
    ) -> WriteOutcome:
        amount = to_uint256(amount, "amount")
        spender = await self._spender(spender_address, "approve")
        contract = await self.get_contract()
        method = contract.method("approve", spender, amount)
        return await self.process_write(method, option)

    async def approve_max(
        self,
        spender_address: Optional[str] = None,
        option: OptionLike = None,
    ) -> WriteOutcome:
        return await self.approve(MAX_UINT256, spender_address, option)

    async def deposit(
        self,
        amount: TokenAmount,
        user_address: str,
        option: OptionLike = None,
    ) -> WriteOutcome:
        """Lock ``amount`` on root for ``user_address`` on child."""
        self.check_for_parent("deposit")
        deposit_data = self.client.parent.encode_parameters(
            [to_uint256(amount, "amount")], ["uint256"]
        )
        return await self.root_chain_manager.deposit(
            user_address,
            self.contract_param.address,
            deposit_data,
            option,
        )

    async def withdraw_start(self, amount: TokenAmount, option: OptionLike = None) -> WriteOutcome:
        """Burn ``amount`` on child. Keep the transaction hash for the exit."""
        self.check_for_child("withdraw_start")
        amount = to_uint256(amount, "amount")
        contract = await self.get_contract()
        method = contract.method("withdraw", amount)
        return await self.process_write(method, option)

    async def withdraw_exit(self, burn_tx_hash: str, option: OptionLike = None) -> WriteOutcome:
        self.check_for_parent("withdraw_exit")
        return await self._withdraw_exit(
            burn_tx_hash, LogEventSignature.ERC20_TRANSFER, False, option
        )

    async def withdraw_exit_faster(self, burn_tx_hash: str, option: OptionLike = None) -> WriteOutcome:
        self.check_for_parent("withdraw_exit_faster")
        return await self._withdraw_exit(
            burn_tx_hash, LogEventSignature.ERC20_TRANSFER, True, option
        )

    async def is_withdraw_exited(self, burn_tx_hash: str) -> bool:
        """
        Whether the exit of ``burn_tx_hash`` was processed.

        Raises:
            MissingArgumentError: If ``burn_tx_hash`` is empty
        """
        return await self._is_exited(burn_tx_hash, LogEventSignature.ERC20_TRANSFER)

    async def transfer(
        self,
        amount: TokenAmount,
        to_address: str,
        option: OptionLike = None,
    ) -> WriteOutcome:
        amount = to_uint256(amount, "amount")
        contract = await self.get_contract()
        method = contract.method("transfer", to_address, amount)
        return await self.process_write(method, option)
