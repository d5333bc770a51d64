"""
Tests for the POS ERC20 wrapper.

Tests cover:
- Balances and allowances
- Approvals with the predicate as default spender
- Deposits, burns and exits
"""

import pytest
from eth_abi import encode

from matic_bridge.constants import MAX_UINT256, LogEventSignature
from matic_bridge.errors import InvalidTokenIdError, MissingArgumentError, RoleMismatchError

from ..conftest import (
    BURN_TX_HASH,
    CHILD_TOKEN,
    PREDICATE,
    ROOT_CHAIN_MANAGER,
    ROOT_TOKEN,
    USER,
    make_erc20,
)


@pytest.fixture
def root_token(side_chain_client, root_chain_manager, exit_manager):
    return make_erc20(side_chain_client, root_chain_manager, exit_manager, is_parent=True)


@pytest.fixture
def child_token(side_chain_client, root_chain_manager, exit_manager):
    return make_erc20(side_chain_client, root_chain_manager, exit_manager, is_parent=False)


def writes_named(handle, name):
    return [args for method, args, _ in handle.writes if method == name]


class TestQueries:
    """Tests for balance and allowance reads."""

    @pytest.mark.asyncio
    async def test_get_balance(self, child_token) -> None:
        handle = await child_token.get_contract()
        handle.read_results["balanceOf"] = 10**18
        assert await child_token.get_balance(USER) == 10**18

    @pytest.mark.asyncio
    async def test_allowance_defaults_to_predicate(self, root_token) -> None:
        handle = await root_token.get_contract()
        handle.read_results["allowance"] = 5

        assert await root_token.get_allowance(USER) == 5
        name, args, _ = handle.reads[-1]
        assert (name, args) == ("allowance", (USER, PREDICATE))

    @pytest.mark.asyncio
    async def test_allowance_on_child_needs_spender(self, child_token) -> None:
        with pytest.raises(RoleMismatchError):
            await child_token.get_allowance(USER)

    @pytest.mark.asyncio
    async def test_allowance_on_child_with_spender(self, child_token) -> None:
        handle = await child_token.get_contract()
        handle.read_results["allowance"] = 0
        assert await child_token.get_allowance(USER, CHILD_TOKEN) == 0


class TestApprove:
    """Tests for ERC20 approvals."""

    @pytest.mark.asyncio
    async def test_approve_predicate(self, root_token, parent_client) -> None:
        await root_token.approve("1000")
        assert writes_named(parent_client.handles[ROOT_TOKEN], "approve") == [(PREDICATE, 1000)]

    @pytest.mark.asyncio
    async def test_approve_max(self, root_token, parent_client) -> None:
        await root_token.approve_max()
        assert writes_named(parent_client.handles[ROOT_TOKEN], "approve") == [
            (PREDICATE, MAX_UINT256)
        ]

    @pytest.mark.asyncio
    async def test_negative_amount_rejected(self, root_token) -> None:
        with pytest.raises(InvalidTokenIdError) as exc_info:
            await root_token.approve(-1)
        assert exc_info.value.field == "amount"


class TestBridgeFlow:
    """Tests for deposit, burn and exit."""

    @pytest.mark.asyncio
    async def test_deposit(self, root_token, parent_client) -> None:
        await root_token.deposit(10**18, USER)

        rcm = parent_client.handles[ROOT_CHAIN_MANAGER]
        assert writes_named(rcm, "depositFor") == [
            (USER, ROOT_TOKEN, encode(["uint256"], [10**18]))
        ]

    @pytest.mark.asyncio
    async def test_withdraw_start(self, child_token, child_client) -> None:
        await child_token.withdraw_start(10**18)
        assert writes_named(child_client.handles[CHILD_TOKEN], "withdraw") == [(10**18,)]

    @pytest.mark.asyncio
    async def test_withdraw_start_on_root_is_rejected(self, root_token) -> None:
        with pytest.raises(RoleMismatchError):
            await root_token.withdraw_start(1)

    @pytest.mark.asyncio
    async def test_withdraw_exit_faster(self, root_token, exit_manager) -> None:
        await root_token.withdraw_exit_faster(BURN_TX_HASH)
        exit_manager.build_payload_for_exit.assert_awaited_once_with(
            BURN_TX_HASH, LogEventSignature.ERC20_TRANSFER.value, True
        )

    @pytest.mark.asyncio
    async def test_is_withdraw_exited(self, root_token, exit_manager) -> None:
        assert await root_token.is_withdraw_exited(BURN_TX_HASH) is False
        exit_manager.get_exit_hash.assert_awaited_once_with(
            BURN_TX_HASH, LogEventSignature.ERC20_TRANSFER.value
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tx_hash", ["", None])
    async def test_is_withdraw_exited_rejects_empty_hash(self, root_token, exit_manager, tx_hash) -> None:
        with pytest.raises(MissingArgumentError):
            await root_token.is_withdraw_exited(tx_hash)
        exit_manager.get_exit_hash.assert_not_called()

    @pytest.mark.asyncio
    async def test_transfer(self, child_token, child_client) -> None:
        await child_token.transfer(3, USER)
        assert writes_named(child_client.handles[CHILD_TOKEN], "transfer") == [(USER, 3)]
