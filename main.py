#!/usr/bin/env python3
import argparse
import asyncio
import logging
import sys
from functools import partial

import settings
from automation import TokenAutomation
from balance_gate import wait_for_sufficient_balance
from config import create_context, load_settings
from errors import ConfigurationError, OperatorAbort
from logging_config import setup_logging
from models import WalletRecord
from prompts import Prompter, gather_launch_config
from token_creation import create_token, load_keypair
from token_sale import sell_token
from wallet_store import WalletStore, select_wallet

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create pump.fun tokens and sell the dev buy in repeated cycles")
    parser.add_argument("--env-wallet", action="store_true",
                        help="sign with PRIVATE_KEY from the environment instead of a stored wallet")
    parser.add_argument("--wallet-file", default=settings.WALLET_STORAGE_FILE,
                        help="file holding the named wallets")
    parser.add_argument("--min-balance", type=float, default=settings.MIN_BALANCE,
                        help="SOL required in the wallet before the first cycle")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def env_wallet(private_key: str) -> WalletRecord:
    try:
        keypair = load_keypair(private_key)
    except ValueError as e:
        raise ConfigurationError(f"PRIVATE_KEY is not a valid base58 keypair: {e}") from e
    return WalletRecord(name="env", public_key=str(keypair.pubkey()), private_key=private_key)


async def run(args) -> int:
    env = load_settings(require_private_key=args.env_wallet)
    prompter = Prompter()
    try:
        if args.env_wallet:
            wallet = env_wallet(env.private_key)
        else:
            wallet = select_wallet(WalletStore(args.wallet_file), prompter)
        logger.info(f"Using wallet: {wallet.name} ({wallet.public_key})")

        ctx = create_context(env)
        try:
            await wait_for_sufficient_balance(ctx.client, wallet.public_key, prompter, minimum=args.min_balance)
            config = gather_launch_config(wallet, prompter)

            automation = TokenAutomation(
                config,
                create=partial(create_token, ctx),
                sell=partial(sell_token, ctx),
                on_close=prompter.close,
            )
            await automation.start()
        finally:
            await ctx.close()
    finally:
        prompter.close()
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging("DEBUG" if args.debug else "INFO")
    try:
        return asyncio.run(run(args))
    except OperatorAbort as e:
        logger.info(f"Quitting the program: {e}")
        return 0
    except ConfigurationError as e:
        logger.critical(str(e))
        return 1
    except OSError as e:
        logger.critical(f"{type(e).__name__}: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by operator")
        return 130


if __name__ == "__main__":
    sys.exit(main())
