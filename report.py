import logging
from typing import Iterable

import pandas as pd

import settings
from models import CycleResult, CycleState

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ["cycle", "outcome", "reason", "mint", "signature"]


def history_frame(results: Iterable[CycleResult]) -> pd.DataFrame:
    rows = [
        {
            "cycle": result.index + 1,
            "outcome": result.outcome,
            "reason": result.reason,
            "mint": result.mint or "",
            "signature": result.signature or "",
        }
        for result in results
    ]
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)


def write_history(results: Iterable[CycleResult], path=settings.CYCLE_HISTORY_FILE) -> bool:
    try:
        history_frame(results).to_csv(path, index=False)
    except OSError as e:
        logger.warning(f"Could not write cycle history to {path}: {e}")
        return False
    logger.info(f"Cycle history saved to {path}")
    return True


def status_report(state: CycleState, total_cycles: int) -> str:
    return (
        "\nStatus Report:\n"
        "------------\n"
        f"Current Cycle: {state.current_cycle}/{total_cycles}\n"
        f"Successful: {state.successful_cycles}\n"
        f"Failed: {state.failed_cycles}\n"
        f"Remaining: {total_cycles - state.current_cycle}\n"
        "------------\n"
    )


def summary_report(state: CycleState, total_cycles: int) -> str:
    return (
        "\nAutomation Completed\n"
        "-------------------\n"
        f"Total Cycles: {total_cycles}\n"
        f"Successful: {state.successful_cycles}\n"
        f"Failed: {state.failed_cycles}\n"
        f"Success Rate: {state.success_rate(total_cycles):.2f}%\n"
        "-------------------\n"
    )
