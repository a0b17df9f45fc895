import asyncio
import logging
import math
from typing import Awaitable, Callable, Optional

import settings
from errors import TokenCreationError
from models import FAILURE, SUCCESS, CycleResult, CycleState, LaunchConfig
from report import status_report, summary_report, write_history

logger = logging.getLogger(__name__)

CreateFn = Callable[[LaunchConfig], Awaitable[Optional[str]]]
SellFn = Callable[[str, LaunchConfig], Awaitable[str]]
WaitFn = Callable[[LaunchConfig], Awaitable[None]]
SleepFn = Callable[[float], Awaitable[None]]


async def countdown(wait_time_ms: int, sleep: SleepFn = asyncio.sleep):
    remaining_ms = wait_time_ms
    while remaining_ms > 0:
        print(f"\rTime remaining: {math.ceil(remaining_ms / 1000)}s ", end="", flush=True)
        step = min(1000, remaining_ms)
        await sleep(step / 1000)
        remaining_ms -= step
    print("\n")


async def run_cycle(
    state: CycleState,
    config: LaunchConfig,
    create: CreateFn,
    sell: SellFn,
    wait: WaitFn,
) -> CycleState:
    """Run one create -> wait -> sell attempt and return the next state.

    Every error is absorbed here and counted as a failed cycle. A cycle is
    never retried, and when creation yields no mint the wait and the sale are
    skipped.
    """
    index = state.current_cycle
    mint = None
    logger.info(f"Starting cycle {index + 1} of {config.cycles}")
    try:
        logger.info("Creating token...")
        mint = await create(config)
        if not mint:
            raise TokenCreationError("Token creation failed")

        logger.info(f"Token created successfully: {mint}")
        logger.info(f"Waiting {config.wait_seconds:g} seconds before selling...")
        await wait(config)

        logger.info("Selling token...")
        signature = await sell(mint, config)
    except Exception as e:
        logger.error(f"Cycle failed: {e}")
        return state.record(CycleResult(index=index, outcome=FAILURE, reason=str(e), mint=mint))

    logger.info("Cycle completed successfully")
    return state.record(CycleResult(index=index, outcome=SUCCESS, mint=mint, signature=signature))


class TokenAutomation:
    def __init__(
        self,
        config: LaunchConfig,
        create: CreateFn,
        sell: SellFn,
        sleep: SleepFn = asyncio.sleep,
        delay_between_cycles: float = settings.DELAY_BETWEEN_CYCLES,
        history_path=settings.CYCLE_HISTORY_FILE,
        on_close: Optional[Callable[[], None]] = None,
    ):
        self.config = config
        self.create = create
        self.sell = sell
        self.sleep = sleep
        self.delay_between_cycles = delay_between_cycles
        self.history_path = history_path
        self.on_close = on_close
        self.state = CycleState()

    async def wait_before_sell(self, config: LaunchConfig):
        await countdown(config.wait_time_ms, self.sleep)

    async def start(self) -> CycleState:
        cycles = self.config.cycles
        logger.info(f"Starting token automation with {cycles} cycles")
        logger.info(f"Wait time between creation and sell: {self.config.wait_seconds:g}s")

        try:
            while not self.state.is_complete(self.config):
                self.state = await run_cycle(self.state, self.config, self.create, self.sell, self.wait_before_sell)
                logger.info(status_report(self.state, cycles))

                if not self.state.is_complete(self.config):
                    logger.info(f"Waiting {self.delay_between_cycles:g} seconds before next cycle...")
                    await self.sleep(self.delay_between_cycles)

            logger.info(summary_report(self.state, cycles))
            write_history(self.state.results, self.history_path)
        finally:
            if self.on_close is not None:
                self.on_close()
        return self.state
