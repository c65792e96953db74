import logging
import math
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from urlshortener.core.exceptions import Conflict, Gone, InvalidInput, NotFound
from urlshortener.db.models import UrlRecord
from urlshortener.db.registry import UrlRegistry
from urlshortener.utils.encoding import generate_unique_code, is_valid_custom_code
from urlshortener.utils.url_builder import is_absolute_url

logger = logging.getLogger(__name__)

DEFAULT_VALIDITY_MINUTES = 30

# Single-segment paths served by other routes; GET /{code} would never reach the redirect
RESERVED_SHORT_CODES = frozenset({"health"})

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class ShortenResult:
    short_code: str
    original_url: str
    expires_at: datetime
    custom_code_used: bool


def parse_validity_minutes(value: Any, default: int = DEFAULT_VALIDITY_MINUTES) -> int:
    """Whole minutes from an int, float or numeric-prefixed string.

    Floats are truncated and strings read up to their first non-digit
    ("45min" -> 45). Anything else, or a result <= 0, gives ``default``.
    """
    minutes = None
    if isinstance(value, int) and not isinstance(value, bool):
        minutes = value
    elif isinstance(value, float):
        if math.isfinite(value):
            minutes = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            minutes = int(match.group(1))

    if minutes is None or minutes <= 0:
        return default
    return minutes


class URLService:

    def __init__(self, registry: UrlRegistry, default_validity_minutes: int = DEFAULT_VALIDITY_MINUTES):
        self.registry = registry
        self.default_validity_minutes = default_validity_minutes

    @staticmethod
    def validate_long_url(long_url: Optional[str]) -> str:
        if not long_url:
            raise InvalidInput("longUrl is required.")
        if not is_absolute_url(long_url):
            raise InvalidInput("Invalid longUrl format.")
        return long_url

    @staticmethod
    def validate_custom_code(custom_code: str) -> str:
        if not is_valid_custom_code(custom_code):
            raise InvalidInput(
                "Invalid customShortCode. Must be alphanumeric and a reasonable length (4-15 characters)."
            )
        return custom_code

    def create_short_url(
        self,
        long_url: Optional[str],
        custom_code: Optional[str] = None,
        validity_minutes: Any = None,
    ) -> ShortenResult:
        original_url = self.validate_long_url(long_url)
        if custom_code:
            self.validate_custom_code(custom_code)

        minutes = parse_validity_minutes(validity_minutes, self.default_validity_minutes)

        with self.registry.lock:
            if custom_code:
                # Expired but not yet evicted codes are still in use
                if custom_code in self.registry or custom_code in RESERVED_SHORT_CODES:
                    logger.warning(f"Custom code collision: '{custom_code}'")
                    raise Conflict(
                        f"Custom shortCode '{custom_code}' is already in use. Please choose another."
                    )
                short_code = custom_code
            else:
                short_code = generate_unique_code(
                    lambda code: code in self.registry or code in RESERVED_SHORT_CODES
                )

            try:
                expires_at = datetime.now(timezone.utc) + timedelta(minutes=minutes)
            except OverflowError:
                raise InvalidInput("validityMinutes is too large.") from None

            self.registry.insert(
                short_code,
                UrlRecord(
                    original_url=original_url,
                    expires_at=expires_at,
                    is_custom_code=bool(custom_code),
                ),
            )

        logger.info(
            "Shortened %s... to %s (expires %s)", original_url[:50], short_code, expires_at.isoformat()
        )
        return ShortenResult(
            short_code=short_code,
            original_url=original_url,
            expires_at=expires_at,
            custom_code_used=bool(custom_code),
        )

    def resolve(self, short_code: str) -> str:
        """Original URL for a live code, counting the click.

        An expired code is evicted here and reported as Gone; the next lookup
        for it is a plain NotFound.
        """
        with self.registry.lock:
            record = self.registry.get(short_code)
            if record is None:
                logger.warning(f"Redirect 404: Short code not found: {short_code}")
                raise NotFound("Short URL not found.")

            if record.is_expired(datetime.now(timezone.utc)):
                self.registry.delete(short_code)
                logger.warning(f"Redirect 410: Evicted expired short code: {short_code}")
                raise Gone("Short URL has expired and is no longer available.")

            clicks = self.registry.increment_click(short_code)

        logger.info(f"Redirect {short_code} -> {record.original_url[:50]}... (clicks={clicks})")
        return record.original_url
