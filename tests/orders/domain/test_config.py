"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from orders.config import DEFAULT_APPCONFIG_BASE_URL, FlagIdentity, FlagNames, Settings


class TestDefaults:
    def test_defaults_without_environment(self):
        settings = Settings.from_env({})
        assert settings.table_name == "orders"
        assert settings.bucket_name == "invoices"
        assert settings.invoice_root == Path("var/buckets")
        assert settings.appconfig_base_url == DEFAULT_APPCONFIG_BASE_URL
        assert settings.random_errors_enabled == "false"
        assert settings.stage == "develop"
        assert settings.seed_stores is True

    def test_default_flag_names(self):
        names = Settings.from_env({}).flag_names
        assert names == FlagNames(
            create_order_allow_list="createOrderAllowList",
            prevent_create_orders="opsPreventCreateOrders",
            check_create_order_quantity="releaseCheckCreateOrderQuantity",
            limit_list_orders_results="opsLimitListOrdersResults",
        )


class TestFromEnv:
    def test_reads_environment(self):
        settings = Settings.from_env(
            {
                "TABLE_NAME": "orders-prod",
                "BUCKET_NAME": "invoices-prod",
                "INVOICE_ROOT": "/srv/buckets",
                "APPCONFIG_APPLICATION_ID": "app-1",
                "APPCONFIG_ENVIRONMENT_ID": "env-1",
                "APPCONFIG_CONFIGURATION_ID": "conf-1",
                "APPCONFIG_TIMEOUT": "0.5",
                "RANDOM_ERRORS_ENABLED": "true",
                "STAGE": "prod",
                "SEED_STORES": "FALSE",
            }
        )
        assert settings.table_name == "orders-prod"
        assert settings.bucket_name == "invoices-prod"
        assert settings.invoice_root == Path("/srv/buckets")
        assert settings.flag_identity == FlagIdentity("app-1", "env-1", "conf-1")
        assert settings.appconfig_timeout == 0.5
        assert settings.random_errors_enabled == "true"
        assert settings.stage == "prod"
        assert settings.seed_stores is False

    def test_flag_names_can_be_renamed(self):
        settings = Settings.from_env({"FLAG_PREVENT_CREATE_ORDERS": "holdOrders"})
        assert settings.flag_names.prevent_create_orders == "holdOrders"
        assert settings.flag_names.limit_list_orders_results == "opsLimitListOrdersResults"

    def test_settings_are_immutable(self):
        settings = Settings.from_env({})
        with pytest.raises(AttributeError):
            settings.stage = "prod"
