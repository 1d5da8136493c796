"""Order aggregate (CQRS): a single product ordered for a store.

Orders share the order store with the reference stores and are told apart
by their ``record_type`` tag. They are created once and never modified.
"""

from datetime import UTC, datetime

from protean.fields import Identifier, Integer, String

from orders.domain import orders

ORDER_KIND = "Orders"


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@orders.aggregate
class Order:
    product_id = String(required=True, max_length=255)
    quantity = Integer(min_value=0, default=0)
    store_id = Identifier(required=True)
    created = String(required=True, max_length=30)
    record_type = String(default=ORDER_KIND, max_length=20)

    @classmethod
    def place(cls, product_id, quantity, store_id):
        """Create a new order stamped with the current time."""
        return cls(
            product_id=product_id,
            quantity=quantity,
            store_id=store_id,
            created=utc_timestamp(),
            record_type=ORDER_KIND,
        )

    def to_record(self) -> dict:
        """Flat record shape shared by the API and the invoice body."""
        return {
            "id": str(self.id),
            "productId": self.product_id,
            "quantity": self.quantity,
            "storeId": str(self.store_id),
            "created": self.created,
            "type": self.record_type,
        }


@orders.repository(part_of=Order)
class OrderRepository:
    def scan(self) -> list[Order]:
        """All orders, in store order."""
        return self._dao.query.filter(record_type=ORDER_KIND).limit(None).all().items
