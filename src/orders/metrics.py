"""Prometheus counters for the order pipelines."""

from collections.abc import Iterator
from contextlib import contextmanager

from prometheus_client import REGISTRY, Counter

SUCCESS = "success"
ERROR = "error"

ORDER_OPERATIONS = Counter(
    "shopping_orders_operations",
    "Order pipeline invocations by operation and outcome",
    ["operation", "outcome"],
)


@contextmanager
def track_operation(operation: str) -> Iterator[None]:
    """Count one invocation of ``operation`` as a success or an error."""
    try:
        yield
    except Exception:
        ORDER_OPERATIONS.labels(operation=operation, outcome=ERROR).inc()
        raise
    ORDER_OPERATIONS.labels(operation=operation, outcome=SUCCESS).inc()


def operation_count(operation: str, outcome: str) -> float:
    """Current counter value, 0.0 if the series has never been incremented."""
    value = REGISTRY.get_sample_value(
        "shopping_orders_operations_total",
        {"operation": operation, "outcome": outcome},
    )
    return value or 0.0
