"""Feature flag client port (abstract interface).

Defines the contract every flag source implements, plus the value objects
flags are parsed into. This enables swapping between FakeFlagClient
(dev/test) and AppConfigFlagClient (deployed) without touching the
pipelines.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, RootModel


class FeatureFlag(BaseModel):
    """A single flag value: an ``enabled`` switch plus typed attributes."""

    model_config = ConfigDict(extra="allow", frozen=True)

    enabled: bool = False
    limit: int | float | None = None
    allow: str | None = None


DISABLED = FeatureFlag()


class FeatureFlagSet(RootModel[dict[str, FeatureFlag]]):
    """Flags keyed by name, as returned by the configuration service."""

    def flag(self, name: str) -> FeatureFlag:
        """Return the named flag. Flags absent from the set read as disabled."""
        return self.root.get(name, DISABLED)

    def __contains__(self, name: object) -> bool:
        return name in self.root

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)


class FeatureFlagClient(ABC):
    """Abstract feature flag source."""

    @abstractmethod
    def fetch_flags(
        self,
        application: str,
        environment: str,
        configuration: str,
        flag_names: Sequence[str] | None = None,
    ) -> FeatureFlagSet:
        """Fetch the flags of a configuration profile.

        ``flag_names`` narrows the fetch to the named flags. Raises
        ``ConfigurationFetchError`` when the flags cannot be retrieved.
        """
        ...
