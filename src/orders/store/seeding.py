"""Reference store seeding.

Seeding upserts a fixed set of stores. It runs at startup and from the
management CLI, so reseeding must leave exactly one record per store.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from orders.store.store import STORE_KIND, Store
from orders.utils.logging import get_logger

logger = get_logger(__name__)

SEED_STORES = [
    {"id": "59b8a675-9bb7-46c7-955d-2566edfba8ea", "store_code": "NEW", "store_name": "Newcastle"},
    {"id": "4e02e8f2-c0fe-493e-b259-1047254ad969", "store_code": "LON", "store_name": "London"},
    {"id": "f5de2a0a-5a1d-4842-b38d-34e0fe420d33", "store_code": "MAN", "store_name": "Manchester"},
]


def seed_stores(stores: list[dict] | None = None) -> list[str]:
    """Write any missing seed stores. Returns the ids that were added."""
    repo = current_domain.repository_for(Store)
    added = []

    for data in stores or SEED_STORES:
        try:
            repo.get(data["id"])
        except ObjectNotFoundError:
            repo.add(Store(record_type=STORE_KIND, **data))
            added.append(data["id"])

    logger.info("stores.seeded", added=len(added), total=len(stores or SEED_STORES))
    return added
