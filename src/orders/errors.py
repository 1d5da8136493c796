"""Tagged errors raised by the order pipelines.

Every error carries a ``kind`` tag and the HTTP status the API maps it to,
so callers can branch on the kind instead of parsing messages.
"""


class OrderError(Exception):
    """Base class for all order pipeline errors."""

    kind = "order_error"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": self.message}


class InvalidOrder(OrderError):
    """The request body is missing or malformed."""

    kind = "validation_error"
    status_code = 400


class AdmissionBlocked(OrderError):
    """An operational flag is holding all new orders."""

    kind = "admission_blocked"
    status_code = 503


class QuantityExceeded(OrderError):
    """The order quantity breaches the release flag's ceiling."""

    kind = "quantity_exceeded"
    status_code = 422


class StoreNotFound(OrderError):
    """The order references a store that does not exist."""

    kind = "store_not_found"
    status_code = 422


class SyntheticFault(OrderError):
    """A deliberately injected failure."""

    kind = "synthetic_fault"
    status_code = 500


class PersistenceError(OrderError):
    """The order store or the object store rejected a write."""

    kind = "persistence_error"
    status_code = 502


class OrderNotFound(OrderError):
    kind = "not_found"
    status_code = 404


class ConfigurationFetchError(OrderError):
    """Feature flags could not be retrieved from the configuration service."""

    kind = "configuration_fetch_error"
    status_code = 503
