"""Service-layer tests against the in-memory database."""

import pytest

from portfolio_cms.common.media import PendingUpload
from portfolio_cms.contact.schemas import ContactIn
from portfolio_cms.contact.service import create_contact, get_single_contact
from portfolio_cms.exceptions import PayloadInvalid, ResourceNotFound
from portfolio_cms.projects.schemas import ProjectIn
from portfolio_cms.projects.service import create_project, update_project
from portfolio_cms.technologies.models import Technology, TechnologyCategory
from portfolio_cms.technologies.schemas import TechnologyIn
from portfolio_cms.technologies.service import create_technology, list_technologies, update_technology


def _png():
    return PendingUpload(b"png", "image/png", "a.png")


class TestTechnologyService:
    def test_create_stores_null_icon(self, db_session, media_host):
        tech = create_technology(
            db_session, media_host, TechnologyIn(name="Go", category=TechnologyCategory.BACKEND), None
        )
        db_session.commit()
        assert tech.icon is None
        assert db_session.query(Technology).count() == 1

    def test_duplicate_name(self, db_session, media_host):
        payload = TechnologyIn(name="Go", category="Backend")
        create_technology(db_session, media_host, payload, None)
        with pytest.raises(PayloadInvalid, match="already exists"):
            create_technology(db_session, media_host, payload, None)

    def test_update_replaces_icon(self, db_session, media_host):
        tech = create_technology(db_session, media_host, TechnologyIn(name="Go", category="Backend"), _png())
        update_technology(db_session, media_host, tech, TechnologyIn(name="Go", category="Backend"), _png())
        assert tech.icon.endswith("file2.png")
        assert media_host.destroyed == [("technologies/icons/file1", "image")]

    def test_list_serializes_blank_icon(self, db_session, media_host, null_cache):
        create_technology(db_session, media_host, TechnologyIn(name="Go", category="Backend"), None)
        db_session.commit()
        items = list_technologies(db_session, null_cache)
        assert items[0]["icon"] == ""
        assert items[0]["category"] == "Backend"


class TestContactService:
    def test_singleton(self, db_session):
        payload = ContactIn(email="me@example.com", phone="1")
        create_contact(db_session, payload)
        with pytest.raises(PayloadInvalid):
            create_contact(db_session, payload)

    def test_get_single_contact_missing(self, db_session):
        with pytest.raises(ResourceNotFound):
            get_single_contact(db_session)


class TestProjectService:
    def test_gallery_merge(self, db_session, media_host):
        payload = ProjectIn(title="t", description="d", domain="Web")
        project = create_project(db_session, media_host, payload, None, [_png(), _png()], [])
        first, second = project.images
        update_project(db_session, media_host, project, payload, None, [_png()], [], [first], [])
        assert project.images == [second, media_host.uploads[-1]["url"]]
        assert media_host.destroyed == [("projects/images/file1", "image")]
