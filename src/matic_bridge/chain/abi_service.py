"""
ABI lookup by logical contract name and bridge type.

ABIs come from a local registry first. Missing entries are fetched once
from the Polygon artifact store over HTTP and cached:

    {base_url}/{network}/{version}/artifacts/{bridge_type}/{name}.json

The artifact's ``abi`` key holds the ABI list.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import httpx

from matic_bridge.constants import ABI_FETCH_TIMEOUT_SECONDS, DEFAULT_ABI_BASE_URL
from matic_bridge.errors import AbiNotFoundError
from matic_bridge.utils.logging import get_logger

_logger = get_logger(__name__)

ABI = List[Dict[str, Any]]


class ABIService:
    """
    ABI registry with optional HTTP fallback.

    Example:
        ```python
        abis = ABIService(network="testnet", version="amoy")
        abis.register_abi("ChildERC721", "pos", erc721_abi)
        abi = await abis.get_abi("RootChainManager", "pos")  # fetched
        ```
    """

    def __init__(
        self,
        network: str = "testnet",
        version: str = "amoy",
        *,
        base_url: str = DEFAULT_ABI_BASE_URL,
        fetch: bool = True,
        timeout: float = ABI_FETCH_TIMEOUT_SECONDS,
    ) -> None:
        self._network = network
        self._version = version
        self._base_url = base_url.rstrip("/")
        self._fetch = fetch
        self._timeout = timeout
        self._cache: Dict[Tuple[str, str], ABI] = {}

    @staticmethod
    def _key(name: str, bridge_type: Optional[str]) -> Tuple[str, str]:
        return (bridge_type or "", name)

    def register_abi(self, name: str, bridge_type: Optional[str], abi: ABI) -> None:
        self._cache[self._key(name, bridge_type)] = abi

    def has_abi(self, name: str, bridge_type: Optional[str] = None) -> bool:
        return self._key(name, bridge_type) in self._cache

    def artifact_url(self, name: str, bridge_type: Optional[str] = None) -> str:
        parts = [self._base_url, self._network, self._version, "artifacts"]
        if bridge_type:
            parts.append(bridge_type)
        return "/".join(parts) + f"/{name}.json"

    async def get_abi(self, name: str, bridge_type: Optional[str] = None) -> ABI:
        """
        Get the ABI of a logical contract.

        Raises:
            AbiNotFoundError: If the ABI is not registered and cannot be fetched
            httpx.HTTPError: On transport failures or non-404 HTTP errors
        """
        key = self._key(name, bridge_type)
        if key in self._cache:
            return self._cache[key]

        if not self._fetch:
            raise AbiNotFoundError(name, bridge_type, source="registry")

        url = self.artifact_url(name, bridge_type)
        _logger.debug("Fetching ABI", extra={"url": url})

        async with httpx.AsyncClient(timeout=httpx.Timeout(self._timeout)) as client:
            response = await client.get(url)

        if response.status_code == 404:
            raise AbiNotFoundError(name, bridge_type, source=url)
        response.raise_for_status()

        abi = response.json().get("abi")
        if not abi:
            raise AbiNotFoundError(name, bridge_type, source=url)

        self._cache[key] = abi
        return abi
