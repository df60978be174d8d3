"""Shared FastAPI dependencies.

Everything here is built once in the application lifespan and kept on
`app.state`; handlers receive it by injection.
"""

from fastapi import Request

from .integrations.cache import CacheService
from .integrations.media import MediaHost


def get_cache(request: Request) -> CacheService:
    """Get the cache service from app state."""
    return request.app.state.cache


def get_media_host(request: Request) -> MediaHost:
    """Get the media host client from app state."""
    return request.app.state.media
