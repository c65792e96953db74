from fastapi import APIRouter, Depends, HTTPException
import logging

from urlshortener.api.dependencies import get_analytics
from urlshortener.core.exceptions import ShortenerError
from urlshortener.schemas import AnalyticsResponse
from urlshortener.services.analytics import Analytics

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/analytics", tags=["analytics"])

@router.get("/{short_code}", response_model=AnalyticsResponse)
def get_url_analytics_endpoint(short_code: str, analytics: Analytics = Depends(get_analytics)):
    try:
        stats = analytics.report(short_code)
    except ShortenerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return AnalyticsResponse(
        short_code=stats.short_code,
        original_url=stats.original_url,
        clicks=stats.click_count,
        expires_at=stats.expires_at,
        custom_short_code_used=stats.custom_code_used,
    )
