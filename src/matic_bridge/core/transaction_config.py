"""
Transaction configuration resolution.

Turns a caller's partial TransactionOption into a configuration the chain
accepts:

1. Role default overlaid with every field the caller set (new model, the
   default is never touched).
2. Reads stop here.
3. Writes without a sender fail with MissingSenderError before any
   network call.
4. Missing gas limit, gas price, nonce and chain id are looked up
   concurrently. Parent-chain gas estimates get EXTRA_GAS_FOR_PROXY_CALL
   added; caller-supplied gas limits are used as given.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Awaitable, Dict, Mapping, Optional, Union

from matic_bridge.chain import ChainRoleClient, ContractMethod
from matic_bridge.constants import EXTRA_GAS_FOR_PROXY_CALL
from matic_bridge.errors import ErrorType
from matic_bridge.types import TransactionConfig, TransactionOption

if TYPE_CHECKING:
    from matic_bridge.client import SideChainClient

OptionLike = Union[TransactionOption, Mapping[str, Any], None]


class TransactionConfigResolver:
    """
    Resolves transaction configurations against one SideChainClient.

    Example:
        >>> resolver = TransactionConfigResolver(client)
        >>> config = await resolver.resolve({"from": "0xabc..."}, method, is_parent=True, is_write=True)
        >>> config.gas_limit, config.nonce, config.chain_id
    """

    def __init__(self, client: "SideChainClient") -> None:
        self._client = client

    async def resolve(
        self,
        tx_config: OptionLike,
        method: Optional[ContractMethod] = None,
        is_parent: bool = False,
        is_write: bool = False,
    ) -> TransactionConfig:
        """
        Resolve a configuration for one call.

        Args:
            tx_config: Caller overrides
            method: Bound contract method, or None for role-level calls
            is_parent: Target the origin chain
            is_write: Resolve gas, gas price, nonce and chain id

        Returns:
            New TransactionConfig; caller-supplied fields are unchanged

        Raises:
            MissingSenderError: If a write has no ``from``
        """
        option = TransactionOption.coerce(tx_config)
        config = self._client.get_default_config(is_parent).merge(option)
        if not is_write:
            return config

        if config.from_ is None:
            self._client.logger.error(
                ErrorType.MISSING_SENDER, method.name if method else None
            ).throw()

        role_client = self._client.get_client(is_parent)
        lookups: Dict[str, Awaitable[int]] = {}
        if config.gas_limit is None:
            lookups["gas_limit"] = self._estimate_gas(config, method, role_client, is_parent)
        if config.gas_price is None and not config.uses_fee_market:
            lookups["gas_price"] = role_client.get_gas_price()
        if config.nonce is None:
            lookups["nonce"] = role_client.get_transaction_count(config.from_, "pending")
        if config.chain_id is None:
            lookups["chain_id"] = role_client.get_chain_id()

        values = await asyncio.gather(*lookups.values())
        resolved = config.model_copy(update=dict(zip(lookups, values)))
        self._client.logger.log(
            "transaction config resolved",
            role="parent" if is_parent else "child",
            resolved_fields=sorted(lookups),
        )
        return resolved

    @staticmethod
    async def _estimate_gas(
        config: TransactionConfig,
        method: Optional[ContractMethod],
        role_client: ChainRoleClient,
        is_parent: bool,
    ) -> int:
        if method is not None:
            gas = await method.estimate_gas(TransactionOption(from_=config.from_, value=config.value))
        else:
            gas = await role_client.estimate_gas(
                TransactionOption(
                    from_=config.from_,
                    value=config.value,
                    to=config.to,
                    data=config.data,
                )
            )
        return int(gas) + EXTRA_GAS_FOR_PROXY_CALL if is_parent else int(gas)
