from __future__ import annotations

import asyncio
import json
from pathlib import Path

import base58
from solders.keypair import Keypair

import token_creation
from config import AutomationContext
from errors import MetadataUploadError, TradeApiError


def _ctx() -> AutomationContext:
    return AutomationContext(client=object(), session=object())


def _patch_happy_path(monkeypatch, captured: dict) -> None:
    async def _fake_upload(session, config):
        captured["upload_config"] = config
        return {"name": config.token_name, "symbol": config.token_symbol, "uri": "ipfs://meta"}

    async def _fake_request(session, payload):
        captured["payload"] = payload
        return b"unsigned-tx"

    async def _fake_send(client, tx_bytes, signers):
        captured["tx_bytes"] = tx_bytes
        captured["signers"] = signers
        return "CreateSig"

    monkeypatch.setattr(token_creation, "upload_metadata", _fake_upload)
    monkeypatch.setattr(token_creation, "request_transaction", _fake_request)
    monkeypatch.setattr(token_creation, "sign_and_send_transaction", _fake_send)


def test_create_token_signs_with_mint_and_creator_and_saves_mint(tmp_path: Path, monkeypatch, make_config, creator) -> None:
    monkeypatch.chdir(tmp_path)
    captured: dict = {}
    _patch_happy_path(monkeypatch, captured)
    config = make_config()

    mint = asyncio.run(token_creation.create_token(_ctx(), config))

    payload = captured["payload"]
    assert payload["action"] == "create"
    assert payload["mint"] == mint
    assert payload["publicKey"] == str(creator.pubkey())
    assert payload["tokenMetadata"] == {"name": "Zephyr AI", "symbol": "ZPHR", "uri": "ipfs://meta"}
    assert captured["tx_bytes"] == b"unsigned-tx"

    mint_keypair, signer_keypair = captured["signers"]
    assert str(mint_keypair.pubkey()) == mint
    assert signer_keypair.pubkey() == creator.pubkey()

    assert json.loads((tmp_path / "mint.json").read_text(encoding="utf-8")) == {"mint": mint}


def test_create_token_uses_fresh_mint_each_call(tmp_path: Path, monkeypatch, make_config) -> None:
    monkeypatch.chdir(tmp_path)
    _patch_happy_path(monkeypatch, {})
    config = make_config()

    first = asyncio.run(token_creation.create_token(_ctx(), config))
    second = asyncio.run(token_creation.create_token(_ctx(), config))

    assert first and second and first != second


def test_create_token_returns_none_on_trade_api_error(tmp_path: Path, monkeypatch, make_config) -> None:
    monkeypatch.chdir(tmp_path)
    captured: dict = {}
    _patch_happy_path(monkeypatch, captured)

    async def _failing_request(session, payload):
        raise TradeApiError(500, "upstream exploded")

    monkeypatch.setattr(token_creation, "request_transaction", _failing_request)

    assert asyncio.run(token_creation.create_token(_ctx(), make_config())) is None
    assert "signers" not in captured
    assert not (tmp_path / "mint.json").exists()


def test_create_token_returns_none_on_metadata_failure(tmp_path: Path, monkeypatch, make_config) -> None:
    monkeypatch.chdir(tmp_path)
    _patch_happy_path(monkeypatch, {})

    async def _failing_upload(session, config):
        raise MetadataUploadError("ipfs down")

    monkeypatch.setattr(token_creation, "upload_metadata", _failing_upload)

    assert asyncio.run(token_creation.create_token(_ctx(), make_config())) is None


def test_create_token_still_succeeds_when_mint_file_unwritable(tmp_path: Path, monkeypatch, make_config, caplog) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "mint.json").mkdir()
    _patch_happy_path(monkeypatch, {})

    mint = asyncio.run(token_creation.create_token(_ctx(), make_config()))

    assert mint is not None
    assert "Could not save mint address" in caplog.text


def test_load_keypair_round_trips_base58_secret() -> None:
    keypair = Keypair()
    loaded = token_creation.load_keypair(base58.b58encode(bytes(keypair)).decode("utf-8"))
    assert loaded.pubkey() == keypair.pubkey()
