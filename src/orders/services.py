"""Collaborators shared by the order pipelines.

One Services instance is built per process next to the Settings and passed
to every pipeline invocation. Tests build one from fakes instead.
"""

from dataclasses import dataclass

from orders.config import Settings
from orders.faults import build_fault_strategy
from orders.faults.port import FaultStrategy
from orders.flags import build_flag_client
from orders.flags.port import FeatureFlagClient
from orders.invoices import build_object_store
from orders.invoices.port import ObjectStore


@dataclass(frozen=True)
class Services:
    flags: FeatureFlagClient
    faults: FaultStrategy
    invoices: ObjectStore

    @classmethod
    def from_settings(cls, settings: Settings) -> "Services":
        return cls(
            flags=build_flag_client(settings),
            faults=build_fault_strategy(settings),
            invoices=build_object_store(settings),
        )
