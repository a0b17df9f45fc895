import logging
from pathlib import Path

import aiohttp

import settings
from errors import MetadataUploadError, TradeApiError
from models import LaunchConfig

logger = logging.getLogger(__name__)


def build_metadata_form(config: LaunchConfig) -> aiohttp.FormData:
    logo = Path(config.logo_path).read_bytes()
    form = aiohttp.FormData()
    form.add_field("file", logo, filename="logo.png", content_type="image/png")
    form.add_field("name", config.token_name)
    form.add_field("symbol", config.token_symbol)
    form.add_field("description", config.token_description)
    form.add_field("twitter", config.twitter_url)
    form.add_field("telegram", config.telegram_url)
    form.add_field("website", config.website_url)
    form.add_field("showName", "true")
    return form


async def upload_metadata(session: aiohttp.ClientSession, config: LaunchConfig) -> dict:
    """Upload the logo and token fields, return ``{name, symbol, uri}`` for the create call."""
    form = build_metadata_form(config)
    async with session.post(settings.METADATA_API_URL, data=form) as response:
        if response.status != 200:
            raise MetadataUploadError(f"Metadata upload returned {response.status}: {await response.text()}")
        data = await response.json(content_type=None)

    try:
        metadata = {
            "name": data["metadata"]["name"],
            "symbol": data["metadata"]["symbol"],
            "uri": data["metadataUri"],
        }
    except (KeyError, TypeError) as e:
        raise MetadataUploadError(f"Unexpected metadata response: {data!r}") from e
    logger.debug(f"Metadata uploaded: {metadata['uri']}")
    return metadata


def build_create_payload(config: LaunchConfig, mint: str, metadata: dict) -> dict:
    return {
        "publicKey": config.wallet_public_key,
        "action": "create",
        "tokenMetadata": {
            "name": metadata["name"],
            "symbol": metadata["symbol"],
            "uri": metadata["uri"],
        },
        "mint": mint,
        "denominatedInSol": "true",
        "amount": config.initial_amount,
        "slippage": config.slippage,
        "priorityFee": config.priority_fee,
        "pool": settings.POOL,
    }


def build_sell_payload(config: LaunchConfig, mint: str, amount: str) -> dict:
    return {
        "publicKey": config.wallet_public_key,
        "action": "sell",
        "mint": mint,
        "amount": amount,
        "denominatedInSol": "false",
        "slippage": config.slippage,
        "priorityFee": config.priority_fee,
        "pool": settings.POOL,
    }


async def request_transaction(session: aiohttp.ClientSession, payload: dict) -> bytes:
    """Ask the trade API for an unsigned serialized transaction."""
    headers = {"Content-Type": "application/json"}
    logger.debug(f"Requesting {payload['action']} transaction for mint {payload['mint']}")
    async with session.post(settings.TRADE_API_URL, json=payload, headers=headers) as response:
        if response.status != 200:
            raise TradeApiError(response.status, await response.text())
        return await response.read()
