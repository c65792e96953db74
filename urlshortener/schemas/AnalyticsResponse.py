from pydantic import BaseModel, Field
from datetime import datetime

class AnalyticsResponse(BaseModel):
    short_code: str = Field(..., alias="shortCode")
    original_url: str = Field(..., alias="originalUrl")
    clicks: int
    expires_at: datetime = Field(..., alias="expiresAt")
    custom_short_code_used: bool = Field(..., alias="customShortCodeUsed")

    model_config = {"populate_by_name": True}
