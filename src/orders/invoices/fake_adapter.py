"""In-memory object store for development and testing."""

from orders.errors import PersistenceError
from orders.invoices.port import ObjectStore


class FakeObjectStore(ObjectStore):
    def __init__(self) -> None:
        self.objects: dict[str, str] = {}
        self.should_succeed: bool = True
        self.failure_reason: str = "Object store unavailable"

    def configure(self, should_succeed: bool, failure_reason: str = "Object store unavailable") -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def upload(self, key: str, body: str) -> None:
        if not self.should_succeed:
            raise PersistenceError(self.failure_reason)
        self.objects[key] = body
