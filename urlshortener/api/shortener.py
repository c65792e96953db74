from fastapi import APIRouter, Depends, HTTPException, status, Request
from fastapi.responses import RedirectResponse
import logging

from urlshortener.api.dependencies import get_url_service
from urlshortener.core.exceptions import ShortenerError
from urlshortener.schemas import ShortenRequest, ShortenResponse
from urlshortener.services.shortener import URLService
from urlshortener.utils.url_builder import build_short_url

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/shorten", response_model=ShortenResponse, status_code=status.HTTP_201_CREATED)
def shorten_url_endpoint(url_request: ShortenRequest, request: Request, service: URLService = Depends(get_url_service)):
    try:
        result = service.create_short_url(
            url_request.long_url,
            url_request.custom_short_code,
            url_request.validity_minutes,
        )
    except ShortenerError as e:
        long_url = str(url_request.long_url or "")
        logger.error(f"Failed to create short URL for {long_url[:50]}... due to: {e.message}")
        raise HTTPException(status_code=e.status_code, detail=e.message)

    host = request.headers.get("host") or request.url.netloc
    return ShortenResponse(
        short_url=build_short_url(request.url.scheme, host, result.short_code),
        original_url=result.original_url,
        expires_at=result.expires_at,
        custom_short_code_used=result.custom_code_used,
    )

@router.get("/{short_code}", tags=["redirect"])
def redirect_to_url_endpoint(short_code: str, service: URLService = Depends(get_url_service)):
    """
    Access the shortened URL and get redirected to the original long URL.
    """
    try:
        original_url = service.resolve(short_code)
    except ShortenerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return RedirectResponse(url=original_url, status_code=status.HTTP_301_MOVED_PERMANENTLY)
