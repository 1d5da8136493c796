"""Feature flag adapter for the local configuration extension.

The extension runs beside the service and serves flag profiles over plain
HTTP on port 2772. Flags are fetched on every call; the extension does its
own caching and polling upstream.
"""

from collections.abc import Sequence

import requests
from pydantic import ValidationError

from orders.config import DEFAULT_APPCONFIG_BASE_URL
from orders.errors import ConfigurationFetchError
from orders.flags.port import FeatureFlagClient, FeatureFlagSet
from orders.utils.logging import get_logger

logger = get_logger(__name__)


def build_flags_url(
    application: str,
    environment: str,
    configuration: str,
    flag_names: Sequence[str] | None = None,
    base_url: str = DEFAULT_APPCONFIG_BASE_URL,
) -> str:
    """Build the extension URL for a configuration profile.

    Each requested flag becomes one ``flag=<name>`` query parameter, in the
    order given. Without flag names the URL carries no query string.
    """
    url = (
        f"{base_url.rstrip('/')}/applications/{application}"
        f"/environments/{environment}/configurations/{configuration}"
    )
    if flag_names:
        url += "?" + "&".join(f"flag={name}" for name in flag_names)
    return url


class AppConfigFlagClient(FeatureFlagClient):
    """Fetches flags from the configuration extension over HTTP."""

    def __init__(
        self,
        base_url: str = DEFAULT_APPCONFIG_BASE_URL,
        timeout: float = 3.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_flags(
        self,
        application: str,
        environment: str,
        configuration: str,
        flag_names: Sequence[str] | None = None,
    ) -> FeatureFlagSet:
        url = build_flags_url(application, environment, configuration, flag_names, base_url=self.base_url)

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("feature_flags.fetch_failed", url=url, error=str(exc))
            raise ConfigurationFetchError(f"Unable to fetch feature flags: {exc}") from exc

        try:
            return FeatureFlagSet.model_validate(payload)
        except ValidationError as exc:
            logger.error("feature_flags.malformed", url=url, error=str(exc))
            raise ConfigurationFetchError(f"Malformed feature flags: {exc}") from exc
