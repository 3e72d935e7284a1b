"""Commerce backends.

Each backend implements CommerceBackend; `select_backend` picks one from
settings. The choice is made once per client and never changes afterwards.
"""

from storefront.commerce.backends.base import CommerceBackend
from storefront.commerce.backends.live import LiveBackend
from storefront.commerce.backends.mock import MockBackend
from storefront.config import Settings
from storefront.logging import get_logger

logger = get_logger(__name__)


def select_backend(settings: Settings) -> CommerceBackend:
    """Live backend when the endpoint and credentials are configured, mock otherwise."""
    if settings.is_live_configured:
        logger.info("Using live commerce backend at %s", settings.api_url)
        return LiveBackend(settings)
    logger.info("Commerce API not configured, using mock backend")
    return MockBackend()


__all__ = [
    "CommerceBackend",
    "LiveBackend",
    "MockBackend",
    "select_backend",
]
