"""Invoice object store factory."""

from orders.config import Settings
from orders.invoices.filesystem_adapter import FileSystemObjectStore
from orders.invoices.port import ObjectStore


def build_object_store(settings: Settings) -> ObjectStore:
    return FileSystemObjectStore(root=settings.invoice_root, bucket=settings.bucket_name)
