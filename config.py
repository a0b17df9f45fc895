import os
from dataclasses import dataclass
from typing import Optional

import aiohttp
from dotenv import load_dotenv
from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Confirmed

from errors import ConfigurationError


@dataclass(frozen=True)
class EnvSettings:
    rpc: str
    private_key: Optional[str] = None


@dataclass
class AutomationContext:
    """Network handles shared by the creation and sale clients for one run."""

    client: AsyncClient
    session: aiohttp.ClientSession

    async def close(self):
        await self.session.close()
        await self.client.close()


def load_settings(require_private_key: bool = False) -> EnvSettings:
    load_dotenv()
    rpc = os.getenv("RPC")
    private_key = os.getenv("PRIVATE_KEY") or None

    if not rpc:
        raise ConfigurationError("RPC environment variable must be set")
    if require_private_key and not private_key:
        raise ConfigurationError("PRIVATE_KEY and RPC environment variables must be set")
    return EnvSettings(rpc=rpc, private_key=private_key)


def create_context(env: EnvSettings) -> AutomationContext:
    return AutomationContext(
        client=AsyncClient(env.rpc, commitment=Confirmed),
        session=aiohttp.ClientSession(),
    )
