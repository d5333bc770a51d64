"""
ERC721 (non-fungible) token bridged over POS.

Flow for one token id:

    approve / approve_all   (root)   authorize the predicate
    deposit / deposit_many  (root)   escrow on root, minted on child
    withdraw_start[_many]   (child)  burn on child, keep the tx hash
    withdraw_exit*          (root)   prove the burn and release on root
    is_exited[_many]                 has the exit been processed?

Batch forms accept at most MAX_BATCH_SIZE ids.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, List, Optional, Sequence

from matic_bridge.constants import LogEventSignature
from matic_bridge.core import WriteOutcome
from matic_bridge.core.transaction_config import OptionLike
from matic_bridge.pos.exit_manager import ExitManager
from matic_bridge.pos.pos_token import POSToken
from matic_bridge.pos.root_chain_manager import RootChainManager
from matic_bridge.types import ContractParam
from matic_bridge.utils.converter import TokenAmount, to_uint256, validate_many

if TYPE_CHECKING:
    from matic_bridge.client import SideChainClient


class ERC721(POSToken):
    """
    Non-fungible POS token.

    Example:
        >>> token = pos.erc721("0xRootToken...", is_parent=True)
        >>> await (await token.approve(7)).get_receipt()
        >>> await token.deposit(7, "0xUser...")
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
                name="ChildERC721",
                bridge_type="pos",
                is_parent=is_parent,
            ),
            client,
            root_chain_manager,
            exit_manager,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    async def get_tokens_count(self, user_address: str, option: OptionLike = None) -> int:
        contract = await self.get_contract()
        method = contract.method("balanceOf", user_address)
        return int(await self.process_read(method, option))

    async def get_token_id_at_index(
        self, index: int, user_address: str, option: OptionLike = None
    ) -> int:
        contract = await self.get_contract()
        method = contract.method("tokenOfOwnerByIndex", user_address, index)
        return int(await self.process_read(method, option))

    async def get_all_tokens(self, user_address: str, limit: Optional[int] = None) -> List[int]:
        """Token ids owned by ``user_address``, at most ``limit`` of them."""
        count = await self.get_tokens_count(user_address)
        if limit is not None:
            count = min(count, limit)
        return list(
            await asyncio.gather(
                *(self.get_token_id_at_index(index, user_address) for index in range(count))
            )
        )

    async def is_approved(self, token_id: TokenAmount, option: OptionLike = None) -> bool:
        """Whether the predicate is the approved spender of ``token_id``."""
        self.check_for_parent("is_approved")
        contract = await self.get_contract()
        method = contract.method("getApproved", to_uint256(token_id))
        approved, predicate = await asyncio.gather(
            self.process_read(method, option),
            self.get_predicate_address(),
        )
        return str(approved).lower() == str(predicate).lower()

    async def is_approved_all(self, user_address: str, option: OptionLike = None) -> bool:
        """Whether the predicate may move every token of ``user_address``."""
        self.check_for_parent("is_approved_all")
        contract, predicate = await asyncio.gather(
            self.get_contract(),
            self.get_predicate_address(),
        )
        method = contract.method("isApprovedForAll", user_address, predicate)
        return bool(await self.process_read(method, option))

    # ------------------------------------------------------------------
    # Approvals and deposits (root)
    # ------------------------------------------------------------------
    async def approve(self, token_id: TokenAmount, option: OptionLike = None) -> WriteOutcome:
        self.check_for_parent("approve")
        token_id = to_uint256(token_id)
        contract, predicate = await asyncio.gather(
            self.get_contract(),
            self.get_predicate_address(),
        )
        method = contract.method("approve", predicate, token_id)
        return await self.process_write(method, option)

    async def approve_all(self, option: OptionLike = None) -> WriteOutcome:
        self.check_for_parent("approve_all")
        contract, predicate = await asyncio.gather(
            self.get_contract(),
            self.get_predicate_address(),
        )
        method = contract.method("setApprovalForAll", predicate, True)
        return await self.process_write(method, option)

    async def deposit(
        self,
        token_id: TokenAmount,
        user_address: str,
        option: OptionLike = None,
    ) -> WriteOutcome:
        """Escrow ``token_id`` on root for ``user_address`` on child."""
        self.check_for_parent("deposit")
        deposit_data = self.client.parent.encode_parameters([to_uint256(token_id)], ["uint256"])
        return await self.root_chain_manager.deposit(
            user_address,
            self.contract_param.address,
            deposit_data,
            option,
        )

    async def deposit_many(
        self,
        token_ids: Sequence[TokenAmount],
        user_address: str,
        option: OptionLike = None,
    ) -> WriteOutcome:
        """
        Escrow several ids in one transaction.

        Raises:
            BatchSizeExceededError: If more than MAX_BATCH_SIZE ids are given
        """
        self.check_for_parent("deposit_many")
        ids = validate_many(token_ids)
        deposit_data = self.client.parent.encode_parameters([ids], ["uint256[]"])
        return await self.root_chain_manager.deposit(
            user_address,
            self.contract_param.address,
            deposit_data,
            option,
        )

    # ------------------------------------------------------------------
    # Withdrawals (child, then root)
    # ------------------------------------------------------------------
    async def withdraw_start(self, token_id: TokenAmount, option: OptionLike = None) -> WriteOutcome:
        """Burn ``token_id`` on child. Keep the transaction hash for the exit."""
        self.check_for_child("withdraw_start")
        token_id = to_uint256(token_id)
        contract = await self.get_contract()
        method = contract.method("withdraw", token_id)
        return await self.process_write(method, option)

    async def withdraw_start_many(
        self,
        token_ids: Sequence[TokenAmount],
        option: OptionLike = None,
    ) -> WriteOutcome:
        """
        Burn several ids on child in one transaction.

        Raises:
            BatchSizeExceededError: If more than MAX_BATCH_SIZE ids are given
        """
        self.check_for_child("withdraw_start_many")
        ids = validate_many(token_ids)
        contract = await self.get_contract()
        method = contract.method("withdrawBatch", ids)
        return await self.process_write(method, option)

    async def withdraw_exit(self, burn_tx_hash: str, option: OptionLike = None) -> WriteOutcome:
        self.check_for_parent("withdraw_exit")
        return await self._withdraw_exit(
            burn_tx_hash, LogEventSignature.ERC721_TRANSFER, False, option
        )

    async def withdraw_exit_many(self, burn_tx_hash: str, option: OptionLike = None) -> WriteOutcome:
        self.check_for_parent("withdraw_exit_many")
        return await self._withdraw_exit(
            burn_tx_hash, LogEventSignature.ERC721_BATCH_TRANSFER, False, option
        )

    async def withdraw_exit_faster(self, burn_tx_hash: str, option: OptionLike = None) -> WriteOutcome:
        self.check_for_parent("withdraw_exit_faster")
        return await self._withdraw_exit(
            burn_tx_hash, LogEventSignature.ERC721_TRANSFER, True, option
        )

    async def withdraw_exit_faster_many(
        self, burn_tx_hash: str, option: OptionLike = None
    ) -> WriteOutcome:
        self.check_for_parent("withdraw_exit_faster_many")
        return await self._withdraw_exit(
            burn_tx_hash, LogEventSignature.ERC721_BATCH_TRANSFER, True, option
        )

    async def is_exited(self, tx_hash: str) -> bool:
        """
        Whether the exit of a single-token burn was processed.

        Advisory only: nothing here stops a second exit submission.

        Raises:
            MissingArgumentError: If ``tx_hash`` is empty
        """
        return await self._is_exited(tx_hash, LogEventSignature.ERC721_TRANSFER)

    async def is_exited_many(self, tx_hash: str) -> bool:
        """Same as is_exited, for a batch burn."""
        return await self._is_exited(tx_hash, LogEventSignature.ERC721_BATCH_TRANSFER)

    # ------------------------------------------------------------------
    # Transfers
    # ------------------------------------------------------------------
    async def transfer(
        self,
        token_id: TokenAmount,
        from_address: str,
        to_address: str,
        option: OptionLike = None,
    ) -> WriteOutcome:
        token_id = to_uint256(token_id)
        contract = await self.get_contract()
        method = contract.method("transferFrom", from_address, to_address, token_id)
        return await self.process_write(method, option)
