import logging
from typing import Sequence

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Confirmed
from solana.rpc.types import TxOpts
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.transaction import VersionedTransaction
from spl.token.instructions import get_associated_token_address

import settings

LAMPORTS_PER_SOL = 1_000_000_000

logger = logging.getLogger(__name__)


def tx_url(signature: str) -> str:
    return f"{settings.EXPLORER_TX_URL}{signature}"


async def get_sol_balance(client: AsyncClient, public_key: str) -> float:
    response = await client.get_balance(Pubkey.from_string(public_key), commitment=Confirmed)
    return response.value / LAMPORTS_PER_SOL


def get_token_account(owner: Pubkey, mint: Pubkey) -> Pubkey:
    token_account = get_associated_token_address(owner, mint)
    logger.debug(f"Associated token account for {mint}: {token_account}")
    return token_account


async def get_raw_token_balance(client: AsyncClient, token_account: Pubkey) -> int:
    response = await client.get_token_account_balance(token_account, commitment=Confirmed)
    return int(response.value.amount)


async def get_mint_decimals(client: AsyncClient, mint: Pubkey) -> int:
    response = await client.get_account_info_json_parsed(mint, commitment=Confirmed)
    if response.value is None:
        raise ValueError(f"Mint account {mint} not found")
    return int(response.value.data.parsed["info"]["decimals"])


async def sign_and_send_transaction(client: AsyncClient, tx_bytes: bytes, signers: Sequence[Keypair]) -> str:
    logger.debug("Signing transaction...")
    unsigned = VersionedTransaction.from_bytes(tx_bytes)
    signed = VersionedTransaction(unsigned.message, list(signers))
    logger.debug("Sending transaction...")
    response = await client.send_raw_transaction(bytes(signed), opts=TxOpts(preflight_commitment=Confirmed))
    signature = str(response.value)
    logger.info(f"Transaction Signature: {tx_url(signature)}")
    return signature
