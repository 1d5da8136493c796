"""Fault strategy port.

A fault strategy decides, per invocation, whether a synthetic failure should
be raised. Deployment health checks and automatic rollbacks are exercised by
switching the random strategy on in a pre-production stage.
"""

from abc import ABC, abstractmethod


class FaultStrategy(ABC):
    @abstractmethod
    def should_fail(self) -> bool:
        """Return True when the current invocation should fail."""
        ...
