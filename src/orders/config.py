"""Process-wide settings for the Orders service.

Settings are read from the environment once, at startup, and handed to the
application factory. Pipelines receive them explicitly and never consult
``os.environ`` themselves.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_APPCONFIG_BASE_URL = "http://localhost:2772"


@dataclass(frozen=True)
class FlagIdentity:
    """Application/environment/configuration triple addressing a flag profile."""

    application: str = ""
    environment: str = ""
    configuration: str = ""


@dataclass(frozen=True)
class FlagNames:
    """Names of the flags the pipelines evaluate."""

    create_order_allow_list: str = "createOrderAllowList"
    prevent_create_orders: str = "opsPreventCreateOrders"
    check_create_order_quantity: str = "releaseCheckCreateOrderQuantity"
    limit_list_orders_results: str = "opsLimitListOrdersResults"


@dataclass(frozen=True)
class Settings:
    table_name: str = "orders"
    bucket_name: str = "invoices"
    invoice_root: Path = Path("var/buckets")
    flag_identity: FlagIdentity = field(default_factory=FlagIdentity)
    flag_names: FlagNames = field(default_factory=FlagNames)
    appconfig_base_url: str = DEFAULT_APPCONFIG_BASE_URL
    appconfig_timeout: float = 3.0
    random_errors_enabled: str = "false"
    stage: str = "develop"
    seed_stores: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        names = FlagNames()

        return cls(
            table_name=env.get("TABLE_NAME", cls.table_name),
            bucket_name=env.get("BUCKET_NAME", cls.bucket_name),
            invoice_root=Path(env.get("INVOICE_ROOT", str(cls.invoice_root))),
            flag_identity=FlagIdentity(
                application=env.get("APPCONFIG_APPLICATION_ID", ""),
                environment=env.get("APPCONFIG_ENVIRONMENT_ID", ""),
                configuration=env.get("APPCONFIG_CONFIGURATION_ID", ""),
            ),
            flag_names=FlagNames(
                create_order_allow_list=env.get("FLAG_CREATE_ORDER_ALLOW_LIST", names.create_order_allow_list),
                prevent_create_orders=env.get("FLAG_PREVENT_CREATE_ORDERS", names.prevent_create_orders),
                check_create_order_quantity=env.get(
                    "FLAG_CHECK_CREATE_ORDER_QUANTITY", names.check_create_order_quantity
                ),
                limit_list_orders_results=env.get(
                    "FLAG_LIMIT_LIST_ORDERS_RESULTS", names.limit_list_orders_results
                ),
            ),
            appconfig_base_url=env.get("APPCONFIG_BASE_URL", DEFAULT_APPCONFIG_BASE_URL),
            appconfig_timeout=float(env.get("APPCONFIG_TIMEOUT", cls.appconfig_timeout)),
            random_errors_enabled=env.get("RANDOM_ERRORS_ENABLED", cls.random_errors_enabled),
            stage=env.get("STAGE", cls.stage),
            seed_stores=env.get("SEED_STORES", "true").lower() == "true",
        )
