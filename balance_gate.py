import logging
from typing import Callable, Optional

from solana.rpc.async_api import AsyncClient

import settings
from errors import OperatorAbort
from solana_helpers import get_sol_balance

logger = logging.getLogger(__name__)

PROMPT = "Insufficient balance. Please send SOL to the wallet. Enter 'r' to refresh balance or 'q' to quit: "


async def wait_for_sufficient_balance(
    client: AsyncClient,
    public_key: str,
    ask: Callable[[str], str],
    minimum: float = settings.MIN_BALANCE,
    max_attempts: Optional[int] = None,
) -> float:
    """Block until the wallet holds at least ``minimum`` SOL.

    The operator funds the wallet by hand and answers ``r`` to check again or
    ``q`` to give up, which raises ``OperatorAbort``. There is no timeout;
    ``max_attempts`` only caps how many prompts are shown.
    """
    prompts = 0
    while True:
        balance = await get_sol_balance(client, public_key)
        logger.info(f"Current balance: {balance} SOL")

        if balance >= minimum:
            logger.info("Sufficient balance detected. Proceeding with token creation.")
            return balance

        if max_attempts is not None and prompts >= max_attempts:
            raise OperatorAbort(f"Balance still below {minimum} SOL after {prompts} prompts")
        prompts += 1

        response = ask(PROMPT).strip().lower()
        if response == "q":
            raise OperatorAbort("Quit while waiting for wallet funding")
        if response != "r":
            print("Invalid input. Please enter 'r' to refresh or 'q' to quit.")
