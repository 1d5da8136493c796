"""Object store port (abstract interface).

Invoices are written as one object per order. Adapters raise
PersistenceError when an upload is rejected.
"""

from abc import ABC, abstractmethod


def invoice_key(order_id: str) -> str:
    return f"{order_id}-invoice.txt"


class ObjectStore(ABC):
    @abstractmethod
    def upload(self, key: str, body: str) -> None:
        """Store ``body`` under ``key``, replacing any existing object."""
        ...
