import math
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from errors import ConfigurationError

SUCCESS = "success"
FAILURE = "failure"


@dataclass(frozen=True)
class WalletRecord:
    name: str
    public_key: str
    private_key: str = field(repr=False)

    def to_json(self) -> dict:
        return {"publicKey": self.public_key, "privateKey": self.private_key}

    @classmethod
    def from_json(cls, name: str, data: dict) -> "WalletRecord":
        return cls(name=name, public_key=data["publicKey"], private_key=data["privateKey"])


@dataclass(frozen=True)
class LaunchConfig:
    """Run parameters gathered once at startup and shared by both trade clients."""

    wallet_private_key: str = field(repr=False)
    wallet_public_key: str
    token_name: str
    token_symbol: str
    token_description: str
    twitter_url: str
    telegram_url: str
    website_url: str
    logo_path: str
    initial_amount: float
    slippage: int
    priority_fee: float
    wait_time_ms: int
    cycles: int

    def __post_init__(self):
        for name in ("initial_amount", "slippage", "priority_fee", "wait_time_ms", "cycles"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive finite number, got {value!r}")

    @property
    def wait_seconds(self) -> float:
        return self.wait_time_ms / 1000


@dataclass(frozen=True)
class CycleResult:
    index: int
    outcome: str
    reason: str = ""
    mint: Optional[str] = None
    signature: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome == SUCCESS


@dataclass(frozen=True)
class CycleState:
    current_cycle: int = 0
    successful_cycles: int = 0
    failed_cycles: int = 0
    results: Tuple[CycleResult, ...] = ()

    def record(self, result: CycleResult) -> "CycleState":
        return replace(
            self,
            current_cycle=self.current_cycle + 1,
            successful_cycles=self.successful_cycles + (1 if result.succeeded else 0),
            failed_cycles=self.failed_cycles + (0 if result.succeeded else 1),
            results=self.results + (result,),
        )

    def is_complete(self, config: LaunchConfig) -> bool:
        return self.current_cycle >= config.cycles

    def success_rate(self, total_cycles: int) -> float:
        if total_cycles <= 0:
            return 0.0
        return self.successful_cycles / total_cycles * 100
