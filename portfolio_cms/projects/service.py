"""Project service.

Projects carry three media fields: one thumbnail and two galleries. On
update, newly attached gallery files are appended and URLs listed as removed
are dropped from the record and deleted from the host.
"""

import logging

from sqlalchemy.orm import Session

from ..common.identity import next_id
from ..common.media import MediaSlot, PendingUpload, discard_media, push_upload, replace_media
from ..integrations.media import MediaHost
from .models import Project
from .schemas import ProjectIn

logger = logging.getLogger(__name__)

THUMBNAIL = MediaSlot("projects/thumbnails")
IMAGES = MediaSlot("projects/images")
ICONS = MediaSlot("projects/icons")


def _apply(project: Project, payload: ProjectIn) -> None:
    project.title = payload.title
    project.description = payload.description
    project.domain = payload.domain
    project.live_url = payload.live_url
    project.github_url = payload.github_url
    project.key_features = [f.model_dump() for f in payload.key_features]


def _merge_gallery(
    media: MediaHost,
    current: list[str] | None,
    added: list[PendingUpload],
    removed: list[str],
    slot: MediaSlot,
) -> list[str]:
    urls = list(current or []) + [push_upload(media, p, slot) for p in added]
    # only objects this record references are deleted from the host
    dropped = {url for url in removed if url and url in urls}
    for url in dropped:
        discard_media(media, url, slot)
    return [url for url in urls if url not in dropped]


def create_project(
    db: Session,
    media: MediaHost,
    payload: ProjectIn,
    thumbnail: PendingUpload | None,
    images: list[PendingUpload],
    icons: list[PendingUpload],
) -> Project:
    project = Project(id=next_id(db, Project))
    _apply(project, payload)
    project.thumbnail = push_upload(media, thumbnail, THUMBNAIL)
    project.images = [push_upload(media, p, IMAGES) for p in images]
    project.icon_lists = [push_upload(media, p, ICONS) for p in icons]
    db.add(project)
    db.flush()
    logger.info("Project created: id=%d, title=%s", project.id, project.title)
    return project


def update_project(
    db: Session,
    media: MediaHost,
    project: Project,
    payload: ProjectIn,
    thumbnail: PendingUpload | None,
    images: list[PendingUpload],
    icons: list[PendingUpload],
    removed_images: list[str],
    removed_icons: list[str],
) -> Project:
    _apply(project, payload)
    project.thumbnail = replace_media(media, thumbnail, project.thumbnail, THUMBNAIL)
    project.images = _merge_gallery(media, project.images, images, removed_images, IMAGES)
    project.icon_lists = _merge_gallery(media, project.icon_lists, icons, removed_icons, ICONS)
    db.flush()
    logger.info(
        "Project updated: id=%d, images=%d, icons=%d", project.id, len(project.images), len(project.icon_lists)
    )
    return project


def delete_project(db: Session, media: MediaHost, project: Project) -> None:
    discard_media(media, project.thumbnail, THUMBNAIL)
    for url in project.images or []:
        discard_media(media, url, IMAGES)
    for url in project.icon_lists or []:
        discard_media(media, url, ICONS)
    db.delete(project)
    db.flush()
    logger.info("Project deleted: id=%d", project.id)
