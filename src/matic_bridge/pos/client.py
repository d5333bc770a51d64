"""
POS bridge entry point.

Example:
    ```python
    pos = await POSClient(config, exit_manager=my_exit_manager).init()

    root = pos.erc721(ROOT_TOKEN, is_parent=True)
    await root.approve_all()
    deposit = await root.deposit(7, user)
    await deposit.get_receipt()

    child = pos.erc721(CHILD_TOKEN)
    burn = await child.withdraw_start(7)
    await burn.get_receipt()

    # after the burn is checkpointed
    await root.withdraw_exit(burn.transaction_hash)
    assert await root.is_exited(burn.transaction_hash)
    ```
"""

from __future__ import annotations

from typing import Optional

from matic_bridge.client import SideChainClient
from matic_bridge.config import BridgeClientConfig
from matic_bridge.core import WriteOutcome
from matic_bridge.core.transaction_config import OptionLike
from matic_bridge.errors import MissingArgumentError
from matic_bridge.pos.erc20 import ERC20
from matic_bridge.pos.erc721 import ERC721
from matic_bridge.pos.exit_manager import ExitManager
from matic_bridge.pos.root_chain_manager import RootChainManager
from matic_bridge.utils.converter import TokenAmount, to_uint256
from matic_bridge.utils.validation import validate_address


class POSClient:
    """
    Factory of POS token wrappers sharing one client, RootChainManager and
    ExitManager.

    Args:
        config: Client configuration; ``root_chain_manager`` is required
        exit_manager: Exit payload builder
        client: Optional pre-built SideChainClient
    """

    def __init__(
        self,
        config: BridgeClientConfig,
        exit_manager: ExitManager,
        *,
        client: Optional[SideChainClient] = None,
    ) -> None:
        if not config.root_chain_manager:
            raise MissingArgumentError("root_chain_manager")
        self.client = client or SideChainClient(config)
        self.exit_manager = exit_manager
        self.root_chain_manager = RootChainManager(self.client, config.root_chain_manager)

    async def init(self) -> "POSClient":
        await self.client.init()
        return self

    def erc20(self, token_address: str, is_parent: bool = False) -> ERC20:
        return ERC20(
            token_address,
            is_parent,
            self.client,
            self.root_chain_manager,
            self.exit_manager,
        )

    def erc721(self, token_address: str, is_parent: bool = False) -> ERC721:
        return ERC721(
            token_address,
            is_parent,
            self.client,
            self.root_chain_manager,
            self.exit_manager,
        )

    async def deposit_ether(
        self,
        amount: TokenAmount,
        user_address: str,
        option: OptionLike = None,
    ) -> WriteOutcome:
        """Bridge native ether to ``user_address`` on the child chain."""
        validate_address(user_address, "user_address")
        return await self.root_chain_manager.deposit_ether(
            to_uint256(amount, "amount"),
            user_address,
            option,
        )
