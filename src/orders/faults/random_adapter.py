"""Random fault strategy used by deployed stages."""

import random
from collections.abc import Callable

from orders.faults.port import FaultStrategy

# Draws above this threshold fail, so roughly nine calls in ten fail.
FAILURE_THRESHOLD = 0.1


class RandomFaults(FaultStrategy):
    """Fails ~90% of invocations unless the switch reads ``"false"``.

    The switch is kept as the raw string from the environment. Only a
    case-insensitive ``"false"`` disables it, so a missing switch leaves
    faults on.
    """

    def __init__(self, enabled: str | None, draw: Callable[[], float] = random.random) -> None:
        self.enabled = enabled
        self._draw = draw

    @property
    def is_disabled(self) -> bool:
        return self.enabled is not None and self.enabled.lower() == "false"

    def should_fail(self) -> bool:
        if self.is_disabled:
            return False
        return self._draw() > FAILURE_THRESHOLD
