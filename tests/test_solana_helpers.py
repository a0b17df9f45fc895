from __future__ import annotations

import asyncio

import pytest
from solana.rpc.commitment import Confirmed
from solders.hash import Hash
from solders.keypair import Keypair
from solders.message import MessageV0
from solders.signature import Signature
from solders.system_program import TransferParams, transfer
from solders.transaction import VersionedTransaction

import solana_helpers
from tests.fakes import FakeRpcClient

MINT = "4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R"


def _unsigned_two_signer_tx(payer: Keypair, mint: Keypair) -> bytes:
    # the transfer makes the mint a required signer next to the fee payer
    ix = transfer(TransferParams(from_pubkey=mint.pubkey(), to_pubkey=payer.pubkey(), lamports=1))
    message = MessageV0.try_compile(payer.pubkey(), [ix], [], Hash.default())
    assert message.header.num_required_signatures == 2
    return bytes(VersionedTransaction.populate(message, [Signature.default(), Signature.default()]))


def test_get_sol_balance_converts_lamports() -> None:
    client = FakeRpcClient(lamports=10_000_000)
    owner = Keypair().pubkey()

    balance = asyncio.run(solana_helpers.get_sol_balance(client, str(owner)))

    assert balance == pytest.approx(0.01)
    assert balance >= 0.01
    (call,) = client.calls
    assert call == ("get_balance", owner, {"commitment": Confirmed})


def test_get_mint_decimals_reads_parsed_account() -> None:
    client = FakeRpcClient(parsed_mint={"info": {"decimals": 6, "supply": "1000000000000000"}})

    decimals = asyncio.run(solana_helpers.get_mint_decimals(client, solana_helpers.Pubkey.from_string(MINT)))

    assert decimals == 6


def test_get_mint_decimals_missing_account_raises() -> None:
    client = FakeRpcClient(parsed_mint=None)

    with pytest.raises(ValueError, match="not found"):
        asyncio.run(solana_helpers.get_mint_decimals(client, solana_helpers.Pubkey.from_string(MINT)))


def test_sign_and_send_co_signs_with_every_key_in_any_order() -> None:
    payer, mint = Keypair(), Keypair()
    client = FakeRpcClient()

    signature = asyncio.run(
        solana_helpers.sign_and_send_transaction(client, _unsigned_two_signer_tx(payer, mint), [mint, payer])
    )

    (sent,) = client.sent
    tx = VersionedTransaction.from_bytes(sent)
    assert tx.verify_with_results() == [True, True]
    assert signature == str(tx.signatures[0])
    assert client.calls[-1][2]["opts"].preflight_commitment == Confirmed


def test_tx_url_points_at_solscan() -> None:
    assert solana_helpers.tx_url("abc") == "https://solscan.io/tx/abc"
