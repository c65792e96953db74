from dataclasses import dataclass
from datetime import datetime


@dataclass
class UrlRecord:
    original_url: str
    expires_at: datetime
    is_custom_code: bool = False
    click_count: int = 0

    def is_expired(self, now: datetime) -> bool:
        # Still valid at exactly expires_at
        return now > self.expires_at
