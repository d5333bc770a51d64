"""
Shared stubs and fixtures.

No test talks to a chain: ChainRoleClient is replaced by a MagicMock with
AsyncMock network queries, contracts by StubHandle / StubMethod, and ABI
lookup by an AsyncMock.
"""

from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import AsyncMock, MagicMock

import pytest
from eth_abi import encode

from matic_bridge.chain import ChainRoleClient, WriteResult
from matic_bridge.client import SideChainClient
from matic_bridge.config import BridgeClientConfig, RoleConfig
from matic_bridge.pos import ERC20, ERC721, RootChainManager
from matic_bridge.types import ChainRole, TransactionOption


# =============================================================================
# Test Constants
# =============================================================================

PARENT_SENDER = "0x1111111111111111111111111111111111111111"
CHILD_SENDER = "0x2222222222222222222222222222222222222222"
USER = "0x3333333333333333333333333333333333333333"
ROOT_TOKEN = "0x4444444444444444444444444444444444444444"
CHILD_TOKEN = "0x5555555555555555555555555555555555555555"
ROOT_CHAIN_MANAGER = "0x6666666666666666666666666666666666666666"
PREDICATE = "0x7777777777777777777777777777777777777777"

PARENT_CHAIN_ID = 11155111
CHILD_CHAIN_ID = 80002
PARENT_GAS_PRICE = 30_000_000_000
CHILD_GAS_PRICE = 40_000_000_000
PARENT_NONCE = 12
CHILD_NONCE = 3
METHOD_GAS_ESTIMATE = 80_000
ROLE_GAS_ESTIMATE = 21_000

BURN_TX_HASH = "0x" + "b" * 64
SUBMITTED_TX_HASH = "0x" + "ab" * 32
ERC721_TOKEN_TYPE = b"\x73" * 32


# =============================================================================
# Contract stubs
# =============================================================================


class StubMethod:
    """Stand-in for ContractMethod; records every call on its handle."""

    def __init__(self, handle: "StubHandle", name: str, args: Tuple[Any, ...]) -> None:
        self.handle = handle
        self.name = name
        self.args = args

    async def read(self, config: TransactionOption) -> Any:
        self.handle.reads.append((self.name, self.args, config))
        return self.handle.read_results.get(self.name)

    async def estimate_gas(self, config: TransactionOption) -> int:
        self.handle.estimates.append((self.name, config))
        return self.handle.gas_estimate

    async def write(self, config: TransactionOption) -> WriteResult:
        self.handle.writes.append((self.name, self.args, config))
        return WriteResult(SUBMITTED_TX_HASH, self.handle.client)

    def encode_abi(self) -> str:
        return f"0x{self.name}"


class StubHandle:
    """Stand-in for ContractHandle."""

    def __init__(self, address: str, abi: List[Dict[str, Any]], client: Any) -> None:
        self.address = address
        self.abi = abi
        self.role = client.role
        self.client = client
        self.gas_estimate = METHOD_GAS_ESTIMATE
        self.read_results: Dict[str, Any] = {}
        self.reads: List[Tuple[str, Tuple[Any, ...], TransactionOption]] = []
        self.writes: List[Tuple[str, Tuple[Any, ...], TransactionOption]] = []
        self.estimates: List[Tuple[str, TransactionOption]] = []

    def method(self, name: str, *args: Any) -> StubMethod:
        return StubMethod(self, name, args)


def make_role_client(
    role: ChainRole,
    *,
    chain_id: int,
    gas_price: int,
    nonce: int,
) -> MagicMock:
    """ChainRoleClient mock whose contracts are StubHandles, one per address."""
    client = MagicMock(spec=ChainRoleClient)
    client.role = role
    client.address = None
    client.handles = {}
    client.get_chain_id = AsyncMock(return_value=chain_id)
    client.get_gas_price = AsyncMock(return_value=gas_price)
    client.get_transaction_count = AsyncMock(return_value=nonce)
    client.estimate_gas = AsyncMock(return_value=ROLE_GAS_ESTIMATE)
    client.read = AsyncMock(return_value=b"\x01")
    client.write = AsyncMock(side_effect=lambda config: WriteResult(SUBMITTED_TX_HASH, client))
    client.encode_parameters = MagicMock(
        side_effect=lambda values, types: encode(list(types), list(values))
    )

    def get_contract(address: str, abi: List[Dict[str, Any]]) -> StubHandle:
        handle = client.handles.get(address)
        if handle is None:
            handle = StubHandle(address, abi, client)
            client.handles[address] = handle
        return handle

    client.get_contract = MagicMock(side_effect=get_contract)
    return client


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def parent_client() -> MagicMock:
    return make_role_client(
        ChainRole.PARENT,
        chain_id=PARENT_CHAIN_ID,
        gas_price=PARENT_GAS_PRICE,
        nonce=PARENT_NONCE,
    )


@pytest.fixture
def child_client() -> MagicMock:
    return make_role_client(
        ChainRole.CHILD,
        chain_id=CHILD_CHAIN_ID,
        gas_price=CHILD_GAS_PRICE,
        nonce=CHILD_NONCE,
    )


@pytest.fixture
def abi_service() -> MagicMock:
    service = MagicMock()
    service.get_abi = AsyncMock(return_value=[])
    return service


@pytest.fixture
def bridge_config() -> BridgeClientConfig:
    return BridgeClientConfig(
        parent=RoleConfig(
            rpc_url="https://sepolia.example",
            default_config=TransactionOption(from_=PARENT_SENDER),
        ),
        child=RoleConfig(
            rpc_url="https://amoy.example",
            default_config=TransactionOption(from_=CHILD_SENDER),
        ),
        root_chain_manager=ROOT_CHAIN_MANAGER,
    )


@pytest.fixture
def side_chain_client(
    bridge_config: BridgeClientConfig,
    parent_client: MagicMock,
    child_client: MagicMock,
    abi_service: MagicMock,
) -> SideChainClient:
    return SideChainClient(
        bridge_config,
        parent=parent_client,
        child=child_client,
        abi_service=abi_service,
    )


@pytest.fixture
def exit_manager() -> MagicMock:
    manager = MagicMock()
    manager.build_payload_for_exit = AsyncMock(return_value="0xpayload")
    manager.get_exit_hash = AsyncMock(
        side_effect=lambda tx_hash, signature: f"exit:{tx_hash}:{signature}"
    )
    return manager


@pytest.fixture
def root_chain_manager(side_chain_client: SideChainClient, parent_client: MagicMock) -> RootChainManager:
    manager = RootChainManager(side_chain_client, ROOT_CHAIN_MANAGER)
    handle = parent_client.get_contract(ROOT_CHAIN_MANAGER, [])
    handle.read_results.update({
        "tokenToType": ERC721_TOKEN_TYPE,
        "typeToPredicate": PREDICATE,
        "processedExits": False,
    })
    return manager


def make_erc721(
    side_chain_client: SideChainClient,
    root_chain_manager: RootChainManager,
    exit_manager: Any,
    *,
    is_parent: bool,
    address: Optional[str] = None,
) -> ERC721:
    return ERC721(
        address or (ROOT_TOKEN if is_parent else CHILD_TOKEN),
        is_parent,
        side_chain_client,
        root_chain_manager,
        exit_manager,
    )


def make_erc20(
    side_chain_client: SideChainClient,
    root_chain_manager: RootChainManager,
    exit_manager: Any,
    *,
    is_parent: bool,
) -> ERC20:
    return ERC20(
        ROOT_TOKEN if is_parent else CHILD_TOKEN,
        is_parent,
        side_chain_client,
        root_chain_manager,
        exit_manager,
    )
