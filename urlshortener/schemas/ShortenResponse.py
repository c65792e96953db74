from pydantic import BaseModel, Field
from datetime import datetime

# Response DTOs
class ShortenResponse(BaseModel):
    short_url: str = Field(..., alias="shortUrl")
    original_url: str = Field(..., alias="originalUrl")
    expires_at: datetime = Field(..., alias="expiresAt")
    custom_short_code_used: bool = Field(..., alias="customShortCodeUsed")

    # Allows instantiation using the Python field names
    model_config = {"populate_by_name": True}
