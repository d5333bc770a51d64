#!/usr/bin/env python3
"""
Example: ERC721 round trip over the POS bridge

Walks one token id through the bridge:
- Root: approve the predicate, deposit for a user
- Child: burn (withdraw_start)
- Root: exit with the burn proof, then check the exit

With DRY_RUN=1 (the default) every write is resolved but not sent, and the
resolved transaction is printed instead.

Environment:
    SEPOLIA_RPC, AMOY_RPC       JSON-RPC endpoints
    BRIDGE_KEY                  signing key used on both chains
    ROOT_CHAIN_MANAGER          RootChainManager proxy on Sepolia
    ROOT_TOKEN, CHILD_TOKEN     mapped ERC721 pair
    TOKEN_ID                    token to bridge
    DRY_RUN                     "0" to submit transactions

Run this example:
    python examples/erc721_bridge.py
"""

import asyncio
import os

from matic_bridge import BridgeClientConfig, POSClient, RoleConfig
from matic_bridge.utils import configure_logging


class ProofServiceRequired:
    """ExitManager placeholder; plug in an exit-proof builder to exit for real."""

    async def build_payload_for_exit(self, burn_tx_hash: str, log_event_signature: str, is_fast: bool) -> str:
        raise NotImplementedError("an exit-proof builder is needed to exit " + burn_tx_hash)

    async def get_exit_hash(self, burn_tx_hash: str, log_event_signature: str) -> str:
        raise NotImplementedError("an exit-proof builder is needed to check " + burn_tx_hash)


def describe(label: str, outcome) -> None:
    if hasattr(outcome, "transaction_hash"):
        print(f"[{label}] submitted {outcome.transaction_hash}")
    else:
        print(f"[{label}] to={outcome.to} gas={outcome.gas_limit} nonce={outcome.nonce} chain={outcome.chain_id}")


async def main() -> None:
    configure_logging("INFO")
    dry_run = os.environ.get("DRY_RUN", "1") != "0"
    option = {"return_transaction": True} if dry_run else None
    token_id = os.environ.get("TOKEN_ID", "1")

    config = BridgeClientConfig(
        network="testnet",
        version="amoy",
        parent=RoleConfig(rpc_url=os.environ["SEPOLIA_RPC"], private_key=os.environ["BRIDGE_KEY"]),
        child=RoleConfig(rpc_url=os.environ["AMOY_RPC"], private_key=os.environ["BRIDGE_KEY"]),
        root_chain_manager=os.environ["ROOT_CHAIN_MANAGER"],
        log=True,
    )
    pos = await POSClient(config, exit_manager=ProofServiceRequired()).init()
    user = pos.client.parent.address

    print("=" * 60)
    print(f"ERC721 bridge round trip for token {token_id} ({'dry run' if dry_run else 'live'})")
    print("=" * 60)

    root = pos.erc721(os.environ["ROOT_TOKEN"], is_parent=True)
    child = pos.erc721(os.environ["CHILD_TOKEN"])

    print(f"[ROOT] predicate: {await root.get_predicate_address()}")
    print(f"[ROOT] approved: {await root.is_approved_all(user)}")

    describe("ROOT approve", await root.approve(token_id, option))
    deposit = await root.deposit(token_id, user, option)
    describe("ROOT deposit", deposit)

    burn = await child.withdraw_start(token_id, option)
    describe("CHILD burn", burn)

    if dry_run:
        print("Dry run: stopping before the exit, which needs a checkpointed burn.")
        return

    await deposit.get_receipt()
    receipt = await burn.get_receipt()
    print(f"[CHILD] burn mined in block {receipt.block_number}")

    # The exit is only accepted once the burn is checkpointed on the root chain.
    exit_result = await root.withdraw_exit(burn.transaction_hash)
    describe("ROOT exit", exit_result)
    print(f"[ROOT] exited: {await root.is_exited(burn.transaction_hash)}")


if __name__ == "__main__":
    asyncio.run(main())
