from __future__ import annotations

import base58
import pytest
from solders.keypair import Keypair

from models import LaunchConfig


@pytest.fixture
def creator() -> Keypair:
    return Keypair()


@pytest.fixture
def make_config(creator):
    def _make(**overrides) -> LaunchConfig:
        values = dict(
            wallet_private_key=base58.b58encode(bytes(creator)).decode("utf-8"),
            wallet_public_key=str(creator.pubkey()),
            token_name="Zephyr AI",
            token_symbol="ZPHR",
            token_description="",
            twitter_url="https://x.com/Zephyraisol",
            telegram_url="",
            website_url="https://www.zephyrai.dev/",
            logo_path="./logo.png",
            initial_amount=0.3,
            slippage=10,
            priority_fee=0.000005,
            wait_time_ms=2500,
            cycles=2,
        )
        values.update(overrides)
        return LaunchConfig(**values)

    return _make
