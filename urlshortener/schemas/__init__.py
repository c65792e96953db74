# re-export common schemas for simpler imports
from .ShortenRequest import ShortenRequest
from .ShortenResponse import ShortenResponse
from .AnalyticsResponse import AnalyticsResponse

__all__ = [
    "ShortenRequest",
    "ShortenResponse",
    "AnalyticsResponse",
]
