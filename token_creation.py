import json
import logging
from pathlib import Path
from typing import Optional

import base58
from solders.keypair import Keypair

import settings
from config import AutomationContext
from models import LaunchConfig
from pumpportal import build_create_payload, request_transaction, upload_metadata
from solana_helpers import sign_and_send_transaction, tx_url

logger = logging.getLogger(__name__)


def load_keypair(private_key: str) -> Keypair:
    return Keypair.from_bytes(base58.b58decode(private_key))


def save_mint(mint: str, path=settings.MINT_FILE) -> bool:
    try:
        Path(path).write_text(json.dumps({"mint": mint}, indent=2), encoding="utf-8")
    except OSError as e:
        logger.warning(f"Could not save mint address to {path}: {e}")
        return False
    logger.info(f"Mint Address Saved: {mint}")
    return True


async def create_token(ctx: AutomationContext, config: LaunchConfig) -> Optional[str]:
    """Launch a new pump.fun token and return its mint address, or None on any failure."""
    try:
        signer_keypair = load_keypair(config.wallet_private_key)
        mint_keypair = Keypair()
        mint = str(mint_keypair.pubkey())

        metadata = await upload_metadata(ctx.session, config)
        payload = build_create_payload(config, mint, metadata)
        tx_bytes = await request_transaction(ctx.session, payload)

        signature = await sign_and_send_transaction(ctx.client, tx_bytes, [mint_keypair, signer_keypair])
        logger.info(f"Token Created: {tx_url(signature)}")
    except Exception as e:
        logger.error(f"Error in token creation: {e}")
        return None

    save_mint(mint)
    return mint
