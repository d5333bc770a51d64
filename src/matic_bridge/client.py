"""
Two-chain client shared by every contract wrapper.

SideChainClient owns one ChainRoleClient per role, the per-role default
transaction configuration, ABI lookup and the client logger. Wrappers keep
a non-owning reference to it.

Example:
    >>> from matic_bridge import BridgeClientConfig, RoleConfig, SideChainClient
    >>> client = SideChainClient(BridgeClientConfig(
    ...     parent=RoleConfig(rpc_url="https://sepolia.example", private_key="0x..."),
    ...     child=RoleConfig(rpc_url="https://amoy.example", private_key="0x..."),
    ... ))
    >>> await client.init()
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Mapping, Optional, Union

from matic_bridge.chain import ABIService, ChainRoleClient
from matic_bridge.config import BridgeClientConfig
from matic_bridge.types import ChainRole, TransactionOption
from matic_bridge.utils.logger import Logger
from matic_bridge.utils.logging import get_logger

_logger = get_logger(__name__)


def _with_sender(default: TransactionOption, client: ChainRoleClient) -> TransactionOption:
    # A configured signing key is the natural sender when the defaults name none.
    if default.from_ is None and client.address is not None:
        return default.model_copy(update={"from_": client.address})
    return default


class SideChainClient:
    """
    Shared state of a bridge session.

    Args:
        config: Client configuration
        parent: Optional pre-built parent-chain client (overrides config.parent)
        child: Optional pre-built child-chain client (overrides config.child)
        abi_service: Optional ABI source (defaults to the artifact store)
    """

    def __init__(
        self,
        config: BridgeClientConfig,
        *,
        parent: Optional[ChainRoleClient] = None,
        child: Optional[ChainRoleClient] = None,
        abi_service: Optional[ABIService] = None,
    ) -> None:
        self.config = config
        self.logger = Logger(config.log, name="matic_bridge.client")
        self.parent = parent or ChainRoleClient.from_config(config.parent, ChainRole.PARENT)
        self.child = child or ChainRoleClient.from_config(config.child, ChainRole.CHILD)
        self.abi_service = abi_service or ABIService(
            config.network.value,
            config.resolved_version,
            base_url=config.abi_base_url,
            fetch=config.fetch_abi,
        )
        self._default_configs: Dict[ChainRole, TransactionOption] = {
            ChainRole.PARENT: _with_sender(config.parent.default_config, self.parent),
            ChainRole.CHILD: _with_sender(config.child.default_config, self.child),
        }

    @property
    def parent_default_config(self) -> TransactionOption:
        return self._default_configs[ChainRole.PARENT]

    @property
    def child_default_config(self) -> TransactionOption:
        return self._default_configs[ChainRole.CHILD]

    def get_client(self, is_parent: bool) -> ChainRoleClient:
        return self.parent if is_parent else self.child

    def get_default_config(self, is_parent: bool) -> TransactionOption:
        return self._default_configs[ChainRole.of(is_parent)]

    def set_default_config(
        self,
        is_parent: bool,
        option: Union[TransactionOption, Mapping[str, Any], None],
    ) -> TransactionOption:
        """
        Replace the default transaction configuration of one role.

        The previous default is left as it was; calls resolved after this
        one start from the new default.
        """
        default = TransactionOption.coerce(option)
        self._default_configs[ChainRole.of(is_parent)] = default
        return default

    def set_parent_default_config(
        self, option: Union[TransactionOption, Mapping[str, Any], None]
    ) -> TransactionOption:
        return self.set_default_config(True, option)

    def set_child_default_config(
        self, option: Union[TransactionOption, Mapping[str, Any], None]
    ) -> TransactionOption:
        return self.set_default_config(False, option)

    async def get_abi(self, name: str, bridge_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        ABI of a logical contract.

        Raises:
            AbiNotFoundError: If no ABI exists for ``name`` / ``bridge_type``
        """
        return await self.abi_service.get_abi(name, bridge_type)

    async def init(self) -> "SideChainClient":
        """Check both endpoints answer and log their chain ids."""
        parent_chain_id, child_chain_id = await asyncio.gather(
            self.parent.get_chain_id(),
            self.child.get_chain_id(),
        )
        _logger.info(
            "Bridge client connected",
            extra={
                "network": self.config.network.value,
                "version": self.config.resolved_version,
                "parent_chain_id": parent_chain_id,
                "child_chain_id": child_chain_id,
            },
        )
        return self
