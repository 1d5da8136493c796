"""Synthetic fault injection.

Provides maybe_fail() for the pipelines and build_fault_strategy() to pick
the process-wide strategy from settings.
"""

from orders.config import Settings
from orders.errors import SyntheticFault
from orders.faults.port import FaultStrategy
from orders.faults.random_adapter import RandomFaults


def build_fault_strategy(settings: Settings) -> FaultStrategy:
    return RandomFaults(settings.random_errors_enabled)


def maybe_fail(strategy: FaultStrategy) -> None:
    """Raise SyntheticFault when the strategy says this invocation fails."""
    if strategy.should_fail():
        raise SyntheticFault("spurious error!!!")
