"""
Per-chain facade over web3.py.

One ChainRoleClient exists per chain role (parent / child). It answers the
network queries transaction resolution needs (gas price, nonce, chain id,
gas estimates), builds contract handles and submits transactions. When a
signing key is configured transactions are signed locally with eth-account
and sent raw; otherwise the node signs them.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional, Sequence, Union

from eth_abi import encode
from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3, Web3

from matic_bridge.chain.contract import ContractHandle
from matic_bridge.chain.write_result import WriteResult
from matic_bridge.config import RoleConfig
from matic_bridge.errors import ValidationError
from matic_bridge.types import ChainRole, TransactionConfig, TransactionReceipt
from matic_bridge.utils.logging import get_logger

_logger = get_logger(__name__)

# Security Note: Default timeout for transaction receipts (5 minutes)
DEFAULT_TX_WAIT_TIMEOUT = 300.0


def _checksum(address: str) -> str:
    # Malformed addresses are passed through for web3.py to reject.
    return Web3.to_checksum_address(address) if Web3.is_address(address) else address


class ChainRoleClient:
    """
    Facade over one chain.

    Args:
        w3: AsyncWeb3 instance connected to the chain
        role: Chain role this client serves
        account: Optional local signing account

    Example:
        >>> client = ChainRoleClient.from_config(role_config, ChainRole.PARENT)
        >>> await client.get_chain_id()
        11155111
    """

    def __init__(
        self,
        w3: AsyncWeb3,
        role: ChainRole,
        account: Optional[LocalAccount] = None,
    ) -> None:
        self._w3 = w3
        self.role = role
        self._account = account

    @classmethod
    def from_config(cls, config: RoleConfig, role: ChainRole) -> "ChainRoleClient":
        w3 = config.web3 or AsyncWeb3(
            AsyncWeb3.AsyncHTTPProvider(
                config.rpc_url,
                request_kwargs={"timeout": config.timeout},
            )
        )
        account = None
        if config.private_key:
            # Sanitize private key errors to prevent key leakage in stack traces
            try:
                account = Account.from_key(config.private_key)
            except Exception:
                raise ValidationError(
                    "Invalid private key format (key not shown for security)",
                    field="private_key",
                ) from None
        return cls(w3, role, account)

    @property
    def w3(self) -> AsyncWeb3:
        return self._w3

    @property
    def address(self) -> Optional[str]:
        """Address of the local signing account, if any."""
        return self._account.address if self._account else None

    # ------------------------------------------------------------------
    # Network queries
    # ------------------------------------------------------------------
    async def get_gas_price(self) -> int:
        return await self._w3.eth.gas_price

    async def get_chain_id(self) -> int:
        return await self._w3.eth.chain_id

    async def get_transaction_count(self, address: str, block: str = "pending") -> int:
        return await self._w3.eth.get_transaction_count(_checksum(address), block)

    async def estimate_gas(self, config: TransactionConfig) -> int:
        return await self._w3.eth.estimate_gas(self.to_tx_params(config))

    async def get_transaction(self, tx_hash: str) -> Dict[str, Any]:
        return dict(await self._w3.eth.get_transaction(tx_hash))

    # ------------------------------------------------------------------
    # Contracts and calls
    # ------------------------------------------------------------------
    def get_contract(self, address: str, abi: List[Dict[str, Any]]) -> ContractHandle:
        contract = self._w3.eth.contract(address=_checksum(address), abi=abi)
        return ContractHandle(address, abi, self.role, contract, self)

    async def read(self, config: TransactionConfig) -> bytes:
        """Raw ``eth_call`` not bound to a contract method."""
        return await self._w3.eth.call(self.to_tx_params(config))

    async def write(self, config: TransactionConfig) -> WriteResult:
        """Submit a transaction built from a resolved config."""
        return await self.send(self.to_tx_params(config))

    async def send(self, tx: Dict[str, Any]) -> WriteResult:
        """
        Submit a fully built transaction.

        Returns:
            WriteResult for the submitted transaction
        """
        if self._account is not None:
            signed = self._account.sign_transaction(tx)
            tx_hash = await self._w3.eth.send_raw_transaction(signed.raw_transaction)
        else:
            tx_hash = await self._w3.eth.send_transaction(tx)

        tx_hash_hex = Web3.to_hex(tx_hash)
        _logger.info(
            "Transaction submitted",
            extra={"role": self.role.value, "tx_hash": tx_hash_hex, "nonce": tx.get("nonce")},
        )
        return WriteResult(tx_hash_hex, self)

    async def wait_for_receipt(
        self,
        tx_hash: str,
        timeout: Optional[float] = None,
    ) -> TransactionReceipt:
        """
        Wait for a transaction receipt.

        Security Note: Uses a timeout to prevent indefinite hangs.

        Raises:
            asyncio.TimeoutError: If the receipt does not arrive in time
        """
        receipt = await asyncio.wait_for(
            self._w3.eth.wait_for_transaction_receipt(tx_hash),
            timeout=timeout or DEFAULT_TX_WAIT_TIMEOUT,
        )
        return TransactionReceipt.from_web3(receipt)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------
    def encode_parameters(self, values: Sequence[Any], types: Sequence[str]) -> bytes:
        """ABI-encode ``values`` as ``types`` (no selector)."""
        return encode(list(types), list(values))

    def to_tx_params(self, config: Union[TransactionConfig, Dict[str, Any]]) -> Dict[str, Any]:
        """web3.py TxParams with checksummed addresses."""
        params = config.to_tx_params() if isinstance(config, TransactionConfig) else dict(config)
        for key in ("from", "to"):
            if key in params:
                params[key] = _checksum(params[key])
        return params
