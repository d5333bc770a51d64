"""
Contract binding types.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from matic_bridge.constants import DEFAULT_BRIDGE_TYPE


class ChainRole(str, Enum):
    """Which of the two bridged chains an operation targets."""

    PARENT = "parent"
    """Origin chain, where assets are escrowed and exits settle."""

    CHILD = "child"
    """Linked chain, where the bridged representation lives."""

    @classmethod
    def of(cls, is_parent: bool) -> "ChainRole":
        return cls.PARENT if is_parent else cls.CHILD


class ContractParam(BaseModel):
    """
    Binding of one wrapper instance to one logical contract on one chain.

    Frozen: ``is_parent`` fixes the chain role of the wrapper for its
    whole lifetime.
    """

    model_config = ConfigDict(frozen=True)

    address: str = Field(..., description="Contract address on the bound chain")
    name: str = Field(..., description="Logical contract name used for ABI lookup")
    is_parent: bool = Field(..., description="True for the origin chain")
    bridge_type: Optional[str] = Field(
        default=DEFAULT_BRIDGE_TYPE,
        description="Bridge flavour used for ABI lookup",
    )

    @property
    def role(self) -> ChainRole:
        return ChainRole.of(self.is_parent)
