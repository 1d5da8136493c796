"""Order admission: decides whether a create-order request is persisted.

Steps run in order and stop at the first rejection:

1. Reject an empty body
2. Fetch the creation flags
3. Reject while the operational hold flag is on
4. Run the fault injector
5. Parse the payload and build the order
6. Reject quantities at or above the release flag's limit
7. Reject orders for unknown stores
8. Persist the order
9. Upload the invoice (the order stays persisted if this fails)
"""

import json

from protean.exceptions import ValidationError as ProteanValidationError
from protean.utils.globals import current_domain
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from orders.config import Settings
from orders.errors import (
    AdmissionBlocked,
    InvalidOrder,
    OrderError,
    PersistenceError,
    QuantityExceeded,
    StoreNotFound,
)
from orders.faults import maybe_fail
from orders.flags.port import FeatureFlagSet
from orders.invoices.port import invoice_key
from orders.metrics import track_operation
from orders.order.order import Order
from orders.services import Services
from orders.store.store import Store, StoreRepository
from orders.utils.logging import get_logger

logger = get_logger(__name__)


class OrderPayload(BaseModel):
    """Fields a client may set on a new order. Anything else is ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    product_id: str = Field(alias="productId", min_length=1)
    quantity: int = Field(ge=0)
    store_id: str = Field(alias="storeId", min_length=1)


def parse_payload(body: str | bytes) -> OrderPayload:
    try:
        return OrderPayload.model_validate_json(body)
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'body'}: {error['msg']}" for error in exc.errors()
        )
        raise InvalidOrder(f"invalid order: {problems}") from exc


class OrderAdmission:
    """The create-order use case."""

    def __init__(self, settings: Settings, services: Services) -> None:
        self.settings = settings
        self.services = services

    def create_order(self, body: str | bytes | None) -> Order:
        log = logger.bind(operation="create_order", table=self.settings.table_name)
        log.info("started")

        try:
            with track_operation("create_order"):
                return self._admit(body, log)
        except OrderError as exc:
            log.error("order.rejected", kind=exc.kind, error=exc.message)
            raise

    def _fetch_flags(self) -> FeatureFlagSet:
        identity = self.settings.flag_identity
        names = self.settings.flag_names
        return self.services.flags.fetch_flags(
            identity.application,
            identity.environment,
            identity.configuration,
            [names.prevent_create_orders, names.check_create_order_quantity],
        )

    def _admit(self, body, log) -> Order:
        if not body or not body.strip():
            raise InvalidOrder("no order supplied")

        names = self.settings.flag_names
        flags = self._fetch_flags()
        log.info("feature_flags", flags=flags.to_dict())

        if flags.flag(names.prevent_create_orders).enabled:
            log.error(f"{names.prevent_create_orders} enabled so preventing new order creation")
            raise AdmissionBlocked("The creation of orders is currently on hold for maintenance")

        maybe_fail(self.services.faults)

        payload = parse_payload(body)
        try:
            order = Order.place(
                product_id=payload.product_id,
                quantity=payload.quantity,
                store_id=payload.store_id,
            )
        except ProteanValidationError as exc:
            raise InvalidOrder(f"invalid order: {exc.messages}") from exc

        quantity_check = flags.flag(names.check_create_order_quantity)
        if quantity_check.enabled and quantity_check.limit is not None and order.quantity >= quantity_check.limit:
            log.error(f"{names.check_create_order_quantity} enabled so limiting quantities")
            raise QuantityExceeded(f"The quantity of {order.quantity} is above the limit of {quantity_check.limit}")

        log.info("order.built", order=order.to_record())

        store_repo: StoreRepository = current_domain.repository_for(Store)
        if str(order.store_id) not in store_repo.known_ids():
            raise StoreNotFound(f"{order.store_id} is not found")

        try:
            current_domain.repository_for(Order).add(order)
        except Exception as exc:
            raise PersistenceError(f"Unable to persist order {order.id}: {exc}") from exc

        record = order.to_record()
        try:
            self.services.invoices.upload(invoice_key(record["id"]), json.dumps(record))
        except PersistenceError:
            # The order row is already written; it stays without an invoice
            log.error("invoice.upload_failed", order_id=record["id"])
            raise

        log.info("order.created", order_id=record["id"], bucket=self.settings.bucket_name)
        return order
