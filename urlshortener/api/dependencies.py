from fastapi import Depends

from urlshortener.core.config import settings
from urlshortener.db.registry import UrlRegistry, get_registry
from urlshortener.services.analytics import Analytics
from urlshortener.services.shortener import URLService


def get_url_service(registry: UrlRegistry = Depends(get_registry)) -> URLService:
    return URLService(registry, default_validity_minutes=settings.DEFAULT_VALIDITY_MINUTES)


def get_analytics(registry: UrlRegistry = Depends(get_registry)) -> Analytics:
    return Analytics(registry)
