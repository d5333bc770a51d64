"""
Handle over a submitted transaction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from matic_bridge.types import TransactionReceipt

if TYPE_CHECKING:
    from matic_bridge.chain.role_client import ChainRoleClient


class WriteResult:
    """
    Result of a submitted write.

    Lifecycle: submitted (hash known) -> confirmed (receipt fetched).
    The receipt is fetched at most once and then cached.

    Example:
        >>> result = await token.approve(7)
        >>> print(result.transaction_hash)
        >>> receipt = await result.get_receipt()
    """

    def __init__(self, transaction_hash: str, client: "ChainRoleClient") -> None:
        self._transaction_hash = transaction_hash
        self._client = client
        self._receipt: Optional[TransactionReceipt] = None

    def __repr__(self) -> str:
        state = "confirmed" if self.confirmed else "submitted"
        return f"WriteResult({self._transaction_hash}, {state})"

    @property
    def transaction_hash(self) -> str:
        return self._transaction_hash

    @property
    def confirmed(self) -> bool:
        return self._receipt is not None

    async def get_transaction_hash(self) -> str:
        return self._transaction_hash

    async def get_receipt(self, timeout: Optional[float] = None) -> TransactionReceipt:
        """
        Wait for the transaction to be mined.

        Args:
            timeout: Seconds to wait; None uses the web3.py default

        Returns:
            Transaction receipt
        """
        if self._receipt is None:
            self._receipt = await self._client.wait_for_receipt(self._transaction_hash, timeout)
        return self._receipt
