import math
from typing import Callable, Optional, TextIO

import settings
from errors import OperatorAbort
from models import LaunchConfig, WalletRecord

Ask = Callable[[str], str]


class Prompter:
    """Line-based terminal questions; reads stdin unless a stream is given."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.closed = False

    def __call__(self, question: str) -> str:
        if self.closed:
            raise OperatorAbort("Prompt input is closed")
        if self.stream is None:
            try:
                return input(question)
            except EOFError:
                raise OperatorAbort("End of input") from None

        print(question, end="", flush=True)
        line = self.stream.readline()
        if not line:
            raise OperatorAbort("End of input")
        return line.rstrip("\r\n")

    def close(self):
        self.closed = True


def ask_text(ask: Ask, question: str, default: str) -> str:
    return ask(question).strip() or default


def _positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def ask_float(ask: Ask, question: str, default: float) -> float:
    try:
        value = float(ask(question).strip())
    except ValueError:
        return default
    return value if _positive(value) else default


def ask_int(ask: Ask, question: str, default: int) -> int:
    try:
        value = int(ask(question).strip())
    except ValueError:
        return default
    return value if value > 0 else default


def gather_launch_config(wallet: WalletRecord, ask: Ask) -> LaunchConfig:
    return LaunchConfig(
        wallet_private_key=wallet.private_key,
        wallet_public_key=wallet.public_key,
        token_name=ask_text(ask, "Enter token name: ", settings.TOKEN_NAME),
        token_symbol=ask_text(ask, "Enter token symbol: ", settings.TOKEN_SYMBOL),
        token_description=ask_text(ask, "Enter token description (optional): ", settings.TOKEN_DESCRIPTION),
        twitter_url=ask_text(ask, "Enter Twitter URL (optional): ", settings.TWITTER_URL),
        telegram_url=ask_text(ask, "Enter Telegram URL (optional): ", settings.TELEGRAM_URL),
        website_url=ask_text(ask, "Enter website URL (optional): ", settings.WEBSITE_URL),
        logo_path=ask_text(ask, f"Enter path to logo image (default: {settings.LOGO_PATH}): ", settings.LOGO_PATH),
        initial_amount=ask_float(
            ask, f"Enter initial amount in SOL (default: {settings.INITIAL_AMOUNT}): ", settings.INITIAL_AMOUNT
        ),
        slippage=ask_int(ask, f"Enter slippage percentage (default: {settings.SLIPPAGE}): ", settings.SLIPPAGE),
        priority_fee=ask_float(
            ask, f"Enter priority fee (default: {settings.PRIORITY_FEE:f}): ", settings.PRIORITY_FEE
        ),
        wait_time_ms=ask_int(
            ask, f"Enter wait time in milliseconds (default: {settings.WAIT_TIME_MS}): ", settings.WAIT_TIME_MS
        ),
        cycles=ask_int(ask, f"Enter number of cycles (default: {settings.CYCLES}): ", settings.CYCLES),
    )
