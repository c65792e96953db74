import logging
from dataclasses import dataclass
from datetime import datetime

from urlshortener.core.exceptions import NotFound
from urlshortener.db.registry import UrlRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UrlStats:
    short_code: str
    original_url: str
    click_count: int
    expires_at: datetime
    custom_code_used: bool


class Analytics:
    """Read-only view over the registry.

    Expiry is not checked here: a code that has expired but has not been
    resolved since still reports its last known stats.
    """

    def __init__(self, registry: UrlRegistry):
        self.registry = registry

    def report(self, short_code: str) -> UrlStats:
        record = self.registry.snapshot(short_code)
        if record is None:
            logger.warning(f"Stats 404: Short code not found: {short_code}")
            raise NotFound("Short URL not found for analytics.")
        return UrlStats(
            short_code=short_code,
            original_url=record.original_url,
            click_count=record.click_count,
            expires_at=record.expires_at,
            custom_code_used=record.is_custom_code,
        )
