import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

import base58
from solders.keypair import Keypair

import settings
from errors import OperatorAbort
from models import WalletRecord
from prompts import Ask

logger = logging.getLogger(__name__)


class WalletStore:
    def __init__(self, path=settings.WALLET_STORAGE_FILE):
        self.path = Path(path)

    def load(self) -> Dict[str, WalletRecord]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            return {name: WalletRecord.from_json(name, entry) for name, entry in data.items()}
        except FileNotFoundError:
            return {}
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Could not read wallet store {self.path}: {e}")
            return {}

    def save(self, wallets: Dict[str, WalletRecord]):
        payload = {name: record.to_json() for name, record in wallets.items()}
        # temp file in the same directory so os.replace stays on one filesystem
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def generate(self, name: str) -> WalletRecord:
        keypair = Keypair()
        record = WalletRecord(
            name=name,
            public_key=str(keypair.pubkey()),
            private_key=base58.b58encode(bytes(keypair)).decode("utf-8"),
        )
        wallets = self.load()
        if name in wallets:
            logger.warning(f'Wallet "{name}" already exists and will be overwritten')
        wallets[name] = record
        self.save(wallets)
        logger.info(f'Wallet "{name}" has been stored in {self.path}')
        return record

    def delete(self, name: str) -> bool:
        wallets = self.load()
        if name not in wallets:
            return False
        del wallets[name]
        self.save(wallets)
        logger.info(f'Wallet "{name}" has been deleted')
        return True


def _parse_choice(answer: str) -> Optional[int]:
    try:
        return int(answer.strip())
    except (ValueError, AttributeError):
        return None


def create_wallet(store: WalletStore, ask: Ask) -> WalletRecord:
    default_name = f"wallet-{len(store.load()) + 1}"
    name = ask(f"Enter a name for this wallet (default: {default_name}): ").strip() or default_name
    record = store.generate(name)
    print("New wallet generated:")
    print(f"Public Key: {record.public_key}")
    print(f"Private key saved to {store.path}")
    return record


def delete_wallet_menu(store: WalletStore, ask: Ask):
    names = list(store.load())
    if not names:
        print("No stored wallets to delete.")
        return

    print("Select a wallet to delete:")
    for index, name in enumerate(names, start=1):
        print(f"{index}. {name}")

    choice = _parse_choice(ask("Enter the number of the wallet to delete (or 0 to cancel): "))
    if choice == 0:
        return
    if choice is not None and 0 < choice <= len(names):
        store.delete(names[choice - 1])
    else:
        print("Invalid choice. No wallet deleted.")


def select_wallet(store: WalletStore, ask: Ask, max_attempts: int = settings.MAX_PROMPT_ATTEMPTS) -> WalletRecord:
    """Pick a stored wallet, create one, or delete one and ask again.

    An empty store skips the menu and goes straight to wallet creation.
    After ``max_attempts`` invalid answers it raises ``OperatorAbort``.
    """
    invalid = 0
    while True:
        wallets = store.load()
        names = list(wallets)

        if not names:
            print("No stored wallets found. Creating a new one.")
            return create_wallet(store, ask)

        print("Stored wallets:")
        for index, name in enumerate(names, start=1):
            print(f"{index}. {name}")
        print(f"{len(names) + 1}. Create a new wallet")
        print(f"{len(names) + 2}. Delete a wallet")

        choice = _parse_choice(ask("Select an option: "))
        if choice == len(names) + 1:
            return create_wallet(store, ask)
        if choice == len(names) + 2:
            delete_wallet_menu(store, ask)
            continue
        if choice is not None and 0 < choice <= len(names):
            return wallets[names[choice - 1]]

        invalid += 1
        if invalid >= max_attempts:
            raise OperatorAbort(f"No valid wallet selected after {invalid} attempts")
        print("Invalid choice. Please try again.")
