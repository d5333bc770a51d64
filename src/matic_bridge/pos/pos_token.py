"""
Common base of POS bridge tokens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from matic_bridge.constants import LogEventSignature
from matic_bridge.core import ContractToken, WriteOutcome
from matic_bridge.core.transaction_config import OptionLike
from matic_bridge.errors import ExitProofError
from matic_bridge.pos.exit_manager import ExitManager
from matic_bridge.pos.root_chain_manager import RootChainManager
from matic_bridge.types import ContractParam
from matic_bridge.utils.concurrency import SingleFlight
from matic_bridge.utils.logging import get_logger
from matic_bridge.utils.validation import require_tx_hash

if TYPE_CHECKING:
    from matic_bridge.client import SideChainClient

_logger = get_logger(__name__)


class POSToken(ContractToken):
    """
    Token bridged through RootChainManager.

    Args:
        contract_param: Token binding
        client: Shared SideChainClient
        root_chain_manager: Origin-chain bridge entry point
        exit_manager: Exit payload builder
    """

    def __init__(
        self,
        contract_param: ContractParam,
        client: "SideChainClient",
        root_chain_manager: RootChainManager,
        exit_manager: ExitManager,
    ) -> None:
        super().__init__(contract_param, client)
        self.root_chain_manager = root_chain_manager
        self.exit_manager = exit_manager
        self._predicate: SingleFlight[str] = SingleFlight()

    async def get_predicate_address(self) -> str:
        """
        Predicate contract that escrows this token on the origin chain.

        Looked up once per wrapper through ``tokenToType`` then
        ``typeToPredicate``.
        """
        return await self._predicate.get(self._load_predicate_address)

    async def _load_predicate_address(self) -> str:
        token_type = await self.root_chain_manager.token_to_type(self.contract_param.address)
        return await self.root_chain_manager.type_to_predicate(token_type)

    async def _withdraw_exit(
        self,
        burn_tx_hash: str,
        log_event_signature: LogEventSignature,
        is_fast: bool,
        option: OptionLike,
    ) -> WriteOutcome:
        payload = await self.exit_manager.build_payload_for_exit(
            burn_tx_hash,
            log_event_signature.value,
            is_fast,
        )
        if not payload or payload == "0x":
            raise ExitProofError(burn_tx_hash)
        _logger.debug(
            "Exit payload built",
            extra={"burn_tx_hash": burn_tx_hash, "is_fast": is_fast},
        )
        return await self.root_chain_manager.exit(payload, option)

    async def _is_exited(self, tx_hash: str, log_event_signature: LogEventSignature) -> bool:
        require_tx_hash(tx_hash)
        exit_hash = await self.exit_manager.get_exit_hash(tx_hash, log_event_signature.value)
        if not exit_hash:
            raise ExitProofError(tx_hash, what="exit hash")
        return await self.root_chain_manager.is_exit_processed(exit_hash)
