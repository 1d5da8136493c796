"""Deterministic fault strategies for tests."""

from orders.faults.port import FaultStrategy


class NeverFail(FaultStrategy):
    def should_fail(self) -> bool:
        return False


class AlwaysFail(FaultStrategy):
    def __init__(self) -> None:
        self.calls = 0

    def should_fail(self) -> bool:
        self.calls += 1
        return True
