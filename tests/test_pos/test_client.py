"""
Tests for POSClient and RootChainManager.

Tests cover:
- Factory methods share one client, RootChainManager and exit manager
- Ether deposits
- Missing RootChainManager configuration
"""

import pytest

from matic_bridge.errors import InvalidAddressError, MissingArgumentError
from matic_bridge.pos import ERC20, ERC721, ExitManager, POSClient

from ..conftest import CHILD_TOKEN, ROOT_CHAIN_MANAGER, ROOT_TOKEN, USER


@pytest.fixture
def pos_client(bridge_config, side_chain_client, exit_manager) -> POSClient:
    return POSClient(bridge_config, exit_manager, client=side_chain_client)


class TestPOSClient:
    """Tests for the POS factory."""

    def test_requires_root_chain_manager(self, bridge_config, side_chain_client, exit_manager) -> None:
        config = bridge_config.model_copy(update={"root_chain_manager": None})
        with pytest.raises(MissingArgumentError):
            POSClient(config, exit_manager, client=side_chain_client)

    def test_factories_share_dependencies(self, pos_client, side_chain_client, exit_manager) -> None:
        root = pos_client.erc721(ROOT_TOKEN, is_parent=True)
        child = pos_client.erc20(CHILD_TOKEN)

        assert isinstance(root, ERC721)
        assert isinstance(child, ERC20)
        assert root.is_parent and not child.is_parent
        assert root.client is child.client is side_chain_client
        assert root.root_chain_manager is child.root_chain_manager is pos_client.root_chain_manager
        assert root.exit_manager is exit_manager
        assert pos_client.root_chain_manager.address == ROOT_CHAIN_MANAGER

    @pytest.mark.asyncio
    async def test_init(self, pos_client, parent_client, child_client) -> None:
        assert await pos_client.init() is pos_client
        parent_client.get_chain_id.assert_awaited_once()
        child_client.get_chain_id.assert_awaited_once()


class TestDepositEther:
    """Tests for native ether deposits."""

    @pytest.mark.asyncio
    async def test_deposit_ether_carries_value(self, pos_client, parent_client) -> None:
        await pos_client.deposit_ether("1000", USER)

        handle = parent_client.handles[ROOT_CHAIN_MANAGER]
        (name, args, config), = handle.writes
        assert (name, args) == ("depositEtherFor", (USER,))
        assert config.value == 1000

    @pytest.mark.asyncio
    async def test_amount_overrides_option_value(self, pos_client, parent_client) -> None:
        await pos_client.deposit_ether(5, USER, {"value": 1, "nonce": 0})

        _, _, config = parent_client.handles[ROOT_CHAIN_MANAGER].writes[0]
        assert config.value == 5
        assert config.nonce == 0

    @pytest.mark.asyncio
    async def test_invalid_user_rejected(self, pos_client, parent_client) -> None:
        with pytest.raises(InvalidAddressError):
            await pos_client.deposit_ether(5, "0xnot-an-address")
        assert ROOT_CHAIN_MANAGER not in parent_client.handles


class TestExitManagerProtocol:
    """Structural check of exit-proof builders."""

    def test_duck_typed_builder_satisfies_protocol(self) -> None:
        class ProofBuilder:
            async def build_payload_for_exit(self, burn_tx_hash, log_event_signature, is_fast):
                return "0x"

            async def get_exit_hash(self, burn_tx_hash, log_event_signature):
                return "0x"

        assert isinstance(ProofBuilder(), ExitManager)
        assert not isinstance(object(), ExitManager)
