"""Configurable fake flag client for development and testing.

Serves flags from memory without any network calls. Flags can be toggled at
runtime and the client can be told to fail, which makes it useful for:
- Automated tests with predictable flag states
- Running the API locally without the configuration extension
"""

from collections.abc import Sequence

from orders.errors import ConfigurationFetchError
from orders.flags.port import FeatureFlag, FeatureFlagClient, FeatureFlagSet


class FakeFlagClient(FeatureFlagClient):
    """In-memory flag client."""

    def __init__(self, flags: dict[str, dict] | None = None) -> None:
        self.flags: dict[str, dict] = dict(flags or {})
        self.should_succeed: bool = True
        self.failure_reason: str = "Configuration service unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Configuration service unavailable") -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def set_flag(self, name: str, enabled: bool, **attributes) -> None:
        self.flags[name] = {"enabled": enabled, **attributes}

    def fetch_flags(
        self,
        application: str,
        environment: str,
        configuration: str,
        flag_names: Sequence[str] | None = None,
    ) -> FeatureFlagSet:
        self.calls.append(
            {
                "application": application,
                "environment": environment,
                "configuration": configuration,
                "flag_names": list(flag_names or []),
            }
        )
        if not self.should_succeed:
            raise ConfigurationFetchError(self.failure_reason)

        # The extension returns only the requested flags when names are given
        selected = {
            name: value for name, value in self.flags.items() if not flag_names or name in flag_names
        }
        return FeatureFlagSet({name: FeatureFlag(**value) for name, value in selected.items()})
