"""Commerce backend configuration read from the environment."""
import os
from dataclasses import dataclass
from functools import cache

# Placeholder used when no storefront URL is configured
DEFAULT_API_URL = "http://localhost/wp-json"
DEFAULT_HTTP_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    """Live backend endpoint and credentials."""
    api_url: str = DEFAULT_API_URL
    consumer_key: str = ""
    consumer_secret: str = ""
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    @property
    def is_live_configured(self) -> bool:
        """
        Live backend is used only with a real endpoint and a full credential pair.

        The default placeholder URL counts as unconfigured.
        """
        api_url = self.api_url.rstrip("/")
        if not api_url or api_url == DEFAULT_API_URL:
            return False
        return bool(self.consumer_key and self.consumer_secret)

    @classmethod
    def from_env(cls) -> "Settings":
        timeout_raw = os.environ.get("STOREFRONT_HTTP_TIMEOUT", "")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_HTTP_TIMEOUT
        except ValueError:
            timeout = DEFAULT_HTTP_TIMEOUT
        return cls(
            api_url=os.environ.get("STOREFRONT_API_URL", "") or DEFAULT_API_URL,
            consumer_key=os.environ.get("STOREFRONT_CONSUMER_KEY", ""),
            consumer_secret=os.environ.get("STOREFRONT_CONSUMER_SECRET", ""),
            http_timeout=timeout,
        )


@cache
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return Settings.from_env()
