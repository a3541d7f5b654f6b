"""Connector settings read from arguments, the environment or a .env file."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from shipit_client.connector import LIVE_URL, PRODUCTION_URL, TEST_URL, ShipitConnector

load_dotenv()

# Mode names accepted by SHIPIT_MODE and the --mode option.
MODE_URLS = {
    "test": TEST_URL,
    "live": LIVE_URL,
    "production": PRODUCTION_URL,
}


@dataclass(frozen=True)
class Settings:
    """Everything needed to build a :class:`ShipitConnector`."""

    api_token: str
    mode: str = "test"
    base_url: str | None = None
    timeout: float | None = None

    @classmethod
    def from_env(
        cls,
        api_token: str | None = None,
        mode: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> "Settings":
        """Build settings, letting explicit arguments override SHIPIT_* variables."""
        api_token = api_token or os.getenv("SHIPIT_API_TOKEN", "")
        mode = (mode or os.getenv("SHIPIT_MODE", "test")).lower()
        base_url = base_url or os.getenv("SHIPIT_BASE_URL") or None

        if timeout is None:
            raw_timeout = os.getenv("SHIPIT_TIMEOUT", "")
            if raw_timeout:
                try:
                    timeout = float(raw_timeout)
                except ValueError:
                    raise ValueError(
                        f"SHIPIT_TIMEOUT must be a number of seconds, got {raw_timeout!r}."
                    ) from None

        if not api_token:
            raise ValueError(
                "SHIPIT_API_TOKEN must be set either as an argument or in a .env file."
            )
        if mode not in MODE_URLS:
            raise ValueError(
                f"Unsupported Shipit mode '{mode}'. "
                f"Supported: {', '.join(sorted(MODE_URLS))}."
            )

        return cls(api_token=api_token, mode=mode, base_url=base_url, timeout=timeout)

    @property
    def resolved_base_url(self) -> str:
        return self.base_url or MODE_URLS[self.mode]

    def connector(self) -> ShipitConnector:
        return ShipitConnector(self.api_token, self.resolved_base_url, timeout=self.timeout)
