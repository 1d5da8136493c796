"""Store aggregate: the shops orders are placed against.

Stores are reference data: seeded once and read-only to the pipelines.
"""

from protean.fields import String

from orders.domain import orders

STORE_KIND = "Stores"


@orders.aggregate
class Store:
    store_code = String(required=True, max_length=10)
    store_name = String(required=True, max_length=100)
    record_type = String(default=STORE_KIND, max_length=20)

    def to_record(self) -> dict:
        return {
            "id": str(self.id),
            "storeCode": self.store_code,
            "storeName": self.store_name,
            "type": self.record_type,
        }


@orders.repository(part_of=Store)
class StoreRepository:
    def find_by_kind(self, kind: str = STORE_KIND) -> list[Store]:
        return self._dao.query.filter(record_type=kind).limit(None).all().items

    def known_ids(self) -> set[str]:
        return {str(store.id) for store in self.find_by_kind()}
