import asyncio
import logging
from decimal import ROUND_HALF_UP, Decimal

from solders.pubkey import Pubkey

from config import AutomationContext
from errors import NothingToSellError
from models import LaunchConfig
from pumpportal import build_sell_payload, request_transaction
from solana_helpers import (
    get_mint_decimals,
    get_raw_token_balance,
    get_token_account,
    sign_and_send_transaction,
    tx_url,
)
from token_creation import load_keypair

logger = logging.getLogger(__name__)


def to_whole_units(raw_amount: int, decimals: int) -> str:
    # rounded to the nearest whole token, fractions are never sold
    amount = Decimal(raw_amount) / (Decimal(10) ** decimals)
    return str(amount.quantize(Decimal(1), rounding=ROUND_HALF_UP))


async def sell_token(ctx: AutomationContext, mint: str, config: LaunchConfig) -> str:
    signer_keypair = load_keypair(config.wallet_private_key)
    try:
        mint_pubkey = Pubkey.from_string(mint)
        token_account = get_token_account(signer_keypair.pubkey(), mint_pubkey)

        token_balance, decimals = await asyncio.gather(
            get_raw_token_balance(ctx.client, token_account),
            get_mint_decimals(ctx.client, mint_pubkey),
        )
        if token_balance <= 0:
            raise NothingToSellError(f"No tokens available to sell for mint {mint}")

        amount_to_sell = to_whole_units(token_balance, decimals)
        if amount_to_sell == "0":
            raise NothingToSellError(f"Balance of {token_balance} raw units rounds to zero tokens for mint {mint}")
        logger.info(f"Selling {amount_to_sell} tokens with mint address {mint}")

        payload = build_sell_payload(config, mint, amount_to_sell)
        tx_bytes = await request_transaction(ctx.session, payload)
        signature = await sign_and_send_transaction(ctx.client, tx_bytes, [signer_keypair])
    except Exception as e:
        logger.error(f"Error in selling token {mint}: {e}")
        raise

    logger.info(f"Token Sold: {tx_url(signature)}")
    return signature
