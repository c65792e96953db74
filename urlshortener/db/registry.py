import logging
import threading
from dataclasses import replace
from typing import Dict, Optional

from fastapi import Request

from urlshortener.db.models import UrlRecord

logger = logging.getLogger(__name__)


class UrlRegistry:
    """In-memory mapping of short code to UrlRecord.

    Single-call methods are atomic on their own. Callers that need a
    check-then-act sequence hold ``lock`` around it (it is re-entrant).
    """

    def __init__(self):
        self._records: Dict[str, UrlRecord] = {}
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, short_code: str) -> bool:
        return short_code in self._records

    def get(self, short_code: str) -> Optional[UrlRecord]:
        """Live record for a code. Mutating it mutates the registry."""
        return self._records.get(short_code)

    def snapshot(self, short_code: str) -> Optional[UrlRecord]:
        with self.lock:
            record = self._records.get(short_code)
            return replace(record) if record is not None else None

    def insert(self, short_code: str, record: UrlRecord) -> UrlRecord:
        with self.lock:
            if short_code in self._records:
                raise KeyError(short_code)
            self._records[short_code] = record
        logger.debug("Registered %s -> %s", short_code, record.original_url[:50])
        return record

    def delete(self, short_code: str) -> bool:
        with self.lock:
            return self._records.pop(short_code, None) is not None

    def increment_click(self, short_code: str) -> int:
        with self.lock:
            record = self._records[short_code]
            record.click_count += 1
            return record.click_count

    def clear(self):
        with self.lock:
            self._records.clear()


def get_registry(request: Request) -> UrlRegistry:
    """FastAPI dependency: the registry owned by the running application."""
    return request.app.state.registry
