"""Technology service.

Names are unique across the collection. The list is cached (see
TECHNOLOGY_LIST_KEY) and every write drops the cached copy.
"""

import logging

from sqlalchemy.orm import Session

from ..common.identity import list_all, next_id
from ..common.media import MediaSlot, PendingUpload, discard_media, push_upload, replace_media
from ..common.validation import to_wire
from ..config import settings
from ..exceptions import PayloadInvalid
from ..integrations.cache import CacheService
from ..integrations.media import MediaHost
from .models import Technology
from .schemas import TechnologyIn, TechnologyOut

logger = logging.getLogger(__name__)

ICON = MediaSlot("technologies/icons")
TECHNOLOGY_LIST_KEY = "technologies:list"


def list_technologies(db: Session, cache: CacheService) -> list[dict]:
    cached = cache.get_json(TECHNOLOGY_LIST_KEY)
    if cached is not None:
        return cached["items"]
    items = [to_wire(TechnologyOut, t) for t in list_all(db, Technology)]
    cache.set_json(TECHNOLOGY_LIST_KEY, {"items": items}, settings.technology_cache_ttl)
    return items


def invalidate_technology_list(cache: CacheService) -> None:
    cache.delete(TECHNOLOGY_LIST_KEY)


def _check_unique_name(db: Session, name: str, exclude_id: int | None = None) -> None:
    query = db.query(Technology).filter(Technology.name == name)
    if exclude_id is not None:
        query = query.filter(Technology.id != exclude_id)
    if query.first() is not None:
        raise PayloadInvalid(f"Technology {name} already exists.")


def create_technology(
    db: Session, media: MediaHost, payload: TechnologyIn, icon: PendingUpload | None
) -> Technology:
    _check_unique_name(db, payload.name)
    icon_url = push_upload(media, icon, ICON)
    tech = Technology(
        id=next_id(db, Technology),
        name=payload.name,
        category=payload.category,
        icon=icon_url or None,
    )
    db.add(tech)
    db.flush()
    logger.info("Technology created: id=%d, name=%s", tech.id, tech.name)
    return tech


def update_technology(
    db: Session, media: MediaHost, tech: Technology, payload: TechnologyIn, icon: PendingUpload | None
) -> Technology:
    _check_unique_name(db, payload.name, exclude_id=tech.id)
    tech.name = payload.name
    tech.category = payload.category
    tech.icon = replace_media(media, icon, tech.icon, ICON) or None
    db.flush()
    logger.info("Technology updated: id=%d", tech.id)
    return tech


def delete_technology(db: Session, media: MediaHost, tech: Technology) -> None:
    discard_media(media, tech.icon, ICON)
    db.delete(tech)
    db.flush()
    logger.info("Technology deleted: id=%d, name=%s", tech.id, tech.name)
