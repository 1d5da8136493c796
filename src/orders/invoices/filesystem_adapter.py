"""Object store adapter backed by a local directory.

Each bucket is a directory under ``root``; object keys are file names in it.
"""

from pathlib import Path

from orders.errors import PersistenceError
from orders.invoices.port import ObjectStore


class FileSystemObjectStore(ObjectStore):
    def __init__(self, root: Path, bucket: str) -> None:
        self.root = Path(root)
        self.bucket = bucket

    @property
    def bucket_path(self) -> Path:
        return self.root / self.bucket

    def upload(self, key: str, body: str) -> None:
        target = self.bucket_path / key
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(body, encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Unable to write {key} to {self.bucket}: {exc}") from exc
