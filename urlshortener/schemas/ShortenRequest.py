from pydantic import BaseModel, Field
from typing import Any, Optional

# Request DTOs
class ShortenRequest(BaseModel):
    # long_url is the Python field, 'longUrl' is the JSON key.
    # Left as plain strings: URL and code rules are enforced by URLService.
    long_url: Optional[str] = Field(None, alias="longUrl")
    custom_short_code: Optional[str] = Field(None, alias="customShortCode")
    # Kept raw; URLService falls back to the default for anything non-numeric
    validity_minutes: Optional[Any] = Field(None, alias="validityMinutes")

    model_config = {"populate_by_name": True}
