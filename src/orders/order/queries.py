"""Order queries: fetch one order or list them."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from orders.config import Settings
from orders.errors import OrderError, OrderNotFound
from orders.faults import maybe_fail
from orders.metrics import track_operation
from orders.order.order import Order, OrderRepository
from orders.services import Services
from orders.utils.logging import get_logger

logger = get_logger(__name__)


class OrderQueries:
    """The get-order and list-orders use cases."""

    def __init__(self, settings: Settings, services: Services) -> None:
        self.settings = settings
        self.services = services

    def get_order(self, order_id: str) -> Order:
        log = logger.bind(operation="get_order", order_id=order_id)
        log.info("started")

        try:
            with track_operation("get_order"):
                identity = self.settings.flag_identity
                flags = self.services.flags.fetch_flags(
                    identity.application,
                    identity.environment,
                    identity.configuration,
                )
                log.info("feature_flags", flags=flags.to_dict())

                maybe_fail(self.services.faults)

                try:
                    return current_domain.repository_for(Order).get(order_id)
                except ObjectNotFoundError as exc:
                    raise OrderNotFound(f"order id {order_id} is not found") from exc
        except OrderError as exc:
            log.error("order.get_failed", kind=exc.kind, error=exc.message)
            raise

    def list_orders(self) -> list[Order]:
        """List orders in store scan order.

        When the list limit flag is on, only the first ``limit`` orders of the
        scan are returned. This is not a "most recent N" guarantee.
        """
        log = logger.bind(operation="list_orders")
        log.info("started")

        try:
            with track_operation("list_orders"):
                identity = self.settings.flag_identity
                limit_flag_name = self.settings.flag_names.limit_list_orders_results
                flags = self.services.flags.fetch_flags(
                    identity.application,
                    identity.environment,
                    identity.configuration,
                    [limit_flag_name],
                )
                log.info("feature_flags", flags=flags.to_dict())

                maybe_fail(self.services.faults)

                repo: OrderRepository = current_domain.repository_for(Order)
                orders = repo.scan()

                limit_flag = flags.flag(limit_flag_name)
                if limit_flag.enabled and limit_flag.limit is not None:
                    log.warning(f"{limit_flag_name} enabled so limiting results to {limit_flag.limit}")
                    orders = orders[: int(limit_flag.limit)]

                return orders
        except OrderError as exc:
            log.error("orders.list_failed", kind=exc.kind, error=exc.message)
            raise
