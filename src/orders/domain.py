"""Orders bounded context: order admission, queries and reference stores.

Orders are admitted through a feature-flag gated pipeline and persisted
alongside the seeded stores they reference. Flags come from a remote
configuration service and invoices land in an object store.
"""

from protean.domain import Domain

from orders.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

orders = Domain(name="orders")
