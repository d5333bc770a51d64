"""
Transaction types for the bridge client.

TransactionOption is the per-call override record a caller passes to any
read or write; after resolution the same model (exported as
TransactionConfig) carries every field the chain needs. Instances are
frozen: resolution always produces a new model and never edits the
per-role default it started from.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# Model field -> web3.py TxParams key
_TX_PARAM_KEYS = {
    "from_": "from",
    "to": "to",
    "value": "value",
    "gas_limit": "gas",
    "gas_price": "gasPrice",
    "max_fee_per_gas": "maxFeePerGas",
    "max_priority_fee_per_gas": "maxPriorityFeePerGas",
    "nonce": "nonce",
    "chain_id": "chainId",
    "data": "data",
}


class TransactionOption(BaseModel):
    """
    Optional transaction fields supplied per call.

    A field is *present* when it is not None. Present fields always win
    over role defaults and are never replaced by network-derived values.

    Example:
        ```python
        option = TransactionOption(from_="0xabc...", gas_limit=250_000)
        option = TransactionOption.model_validate({"from": "0xabc...", "gasPrice": 10**9})
        ```
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    from_: Optional[str] = Field(
        default=None,
        alias="from",
        description="Sender address",
    )
    to: Optional[str] = Field(default=None, description="Target address")
    value: Optional[int] = Field(default=None, ge=0, description="Native value in wei")
    gas_limit: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("gas_limit", "gas"),
        description="Gas limit",
    )
    gas_price: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("gas_price", "gasPrice"),
        description="Legacy gas price in wei",
    )
    max_fee_per_gas: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("max_fee_per_gas", "maxFeePerGas"),
        description="EIP-1559 max fee",
    )
    max_priority_fee_per_gas: Optional[int] = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("max_priority_fee_per_gas", "maxPriorityFeePerGas"),
        description="EIP-1559 priority fee",
    )
    nonce: Optional[int] = Field(default=None, ge=0, description="Sender nonce")
    chain_id: Optional[int] = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("chain_id", "chainId"),
        description="EIP-155 chain id",
    )
    data: Optional[str] = Field(default=None, description="Hex-encoded call data")
    return_transaction: bool = Field(
        default=False,
        description="Return the unexecuted transaction instead of submitting it",
    )

    @classmethod
    def coerce(
        cls, option: Union["TransactionOption", Mapping[str, Any], None]
    ) -> "TransactionOption":
        """Accept a model, a plain mapping (web3-style keys allowed) or None."""
        if option is None:
            return cls()
        if isinstance(option, TransactionOption):
            return option
        return cls.model_validate(dict(option))

    def present_fields(self) -> Dict[str, Any]:
        """Fields the caller actually set, keyed by model field name."""
        fields = self.model_dump(exclude_none=True)
        if not self.return_transaction:
            fields.pop("return_transaction", None)
        return fields

    def merge(self, overrides: "TransactionOption") -> "TransactionOption":
        """Return a new option with every present field of ``overrides`` applied."""
        return self.model_copy(update=overrides.present_fields())

    @property
    def uses_fee_market(self) -> bool:
        return self.max_fee_per_gas is not None or self.max_priority_fee_per_gas is not None

    def to_tx_params(self) -> Dict[str, Any]:
        """Render as a web3.py ``TxParams`` dict, omitting absent fields."""
        params: Dict[str, Any] = {}
        for name, key in _TX_PARAM_KEYS.items():
            value = getattr(self, name)
            if value is not None:
                params[key] = value
        return params


TransactionConfig = TransactionOption
"""A TransactionOption after resolution."""


@dataclass
class TransactionReceipt:
    """Receipt of a mined transaction."""

    transaction_hash: str
    block_number: int
    block_hash: str
    gas_used: int
    effective_gas_price: int
    status: int
    logs: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status == 1

    @classmethod
    def from_web3(cls, receipt: Mapping[str, Any]) -> "TransactionReceipt":
        return cls(
            transaction_hash=_to_hex(receipt["transactionHash"]),
            block_number=receipt["blockNumber"],
            block_hash=_to_hex(receipt["blockHash"]),
            gas_used=receipt["gasUsed"],
            effective_gas_price=receipt.get("effectiveGasPrice", 0),
            status=receipt["status"],
            logs=[dict(log) for log in receipt.get("logs", [])],
        )


def _to_hex(value: Union[str, bytes]) -> str:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    return value if value.startswith("0x") else f"0x{value}"
