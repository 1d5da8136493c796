"""Feature flag client factory.

Builds the flag client a process should use from its settings:
- AppConfigFlagClient against the local configuration extension
- FakeFlagClient for development and testing (constructed directly)
"""

from orders.config import Settings
from orders.flags.appconfig_adapter import AppConfigFlagClient
from orders.flags.port import FeatureFlagClient


def build_flag_client(settings: Settings) -> FeatureFlagClient:
    return AppConfigFlagClient(
        base_url=settings.appconfig_base_url,
        timeout=settings.appconfig_timeout,
    )
