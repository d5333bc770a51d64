"""
Exit proof interface.

Building an exit payload means proving a burn transaction on the child
chain was checkpointed on the root chain (block proof, receipt proof,
log index). That work lives outside this package; POS tokens only need
something that satisfies ExitManager.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ExitManager(Protocol):
    """
    Builder of exit payloads and exit hashes.

    Example:
        ```python
        class ProofApiExitManager:
            async def build_payload_for_exit(self, burn_tx_hash, log_event_signature, is_fast):
                return await proof_api.exit_payload(burn_tx_hash, log_event_signature)

            async def get_exit_hash(self, burn_tx_hash, log_event_signature):
                return await proof_api.exit_hash(burn_tx_hash, log_event_signature)

        pos = POSClient(config, exit_manager=ProofApiExitManager())
        ```
    """

    async def build_payload_for_exit(
        self,
        burn_tx_hash: str,
        log_event_signature: str,
        is_fast: bool,
    ) -> str:
        """
        Build the hex payload RootChainManager.exit expects.

        Args:
            burn_tx_hash: Hash of the burn (withdraw-start) transaction on the child chain
            log_event_signature: Topic0 of the burn event inside that transaction
            is_fast: Use the accelerated proof path
        """
        ...

    async def get_exit_hash(self, burn_tx_hash: str, log_event_signature: str) -> str:
        """Deterministic hash RootChainManager records once the exit is processed."""
        ...
