"""Shared test fixtures."""

import json
from contextlib import asynccontextmanager
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from portfolio_cms.certifications.models import Certification
from portfolio_cms.contact.models import Contact
from portfolio_cms.database.base import Base, Database
from portfolio_cms.education.models import Education
from portfolio_cms.integrations.cache import NullCacheService
from portfolio_cms.integrations.media import MediaHostError
from portfolio_cms.profile.models import Profile
from portfolio_cms.projects.models import Project
from portfolio_cms.rate_limit import limiter
from portfolio_cms.technologies.models import Technology
from portfolio_cms.testimonials.models import Testimonial
from portfolio_cms.work_experience.models import WorkExperience

# Models must be imported so Base.metadata.create_all() sees all tables.
_ALL_MODELS = [Certification, Contact, Education, Profile, Project, Technology, Testimonial, WorkExperience]

PNG = ("logo.png", b"\x89PNG fake image bytes", "image/png")
PDF = ("cv.pdf", b"%PDF-1.4 fake document", "application/pdf")


class FakeMediaHost:
    """Records uploads and deletions instead of talking to a media host."""

    def __init__(self):
        self.uploads = []
        self.destroyed = []
        self.fail_uploads = False
        self.fail_destroy = False
        self._counter = 0

    def upload(self, data, content_type, folder, resource_type="image"):
        if self.fail_uploads:
            raise MediaHostError("upload rejected")
        self._counter += 1
        ext = "pdf" if resource_type == "raw" else "png"
        url = f"https://res.cloudinary.com/demo/{resource_type}/upload/v1700000000/{folder}/file{self._counter}.{ext}"
        self.uploads.append({"folder": folder, "resource_type": resource_type, "content_type": content_type, "url": url})
        return url

    def destroy(self, public_id, resource_type="image"):
        self.destroyed.append((public_id, resource_type))
        if self.fail_destroy:
            raise MediaHostError("destroy rejected")

    def close(self):
        pass


class MemoryCacheService:
    """Dict-backed cache; ttl is ignored."""

    def __init__(self):
        self.store = {}

    def get(self, key):
        return self.store.get(key)

    def set(self, key, value, ttl):
        self.store[key] = value

    def delete(self, key):
        self.store.pop(key, None)

    def get_json(self, key):
        raw = self.get(key)
        return json.loads(raw) if raw is not None else None

    def set_json(self, key, data, ttl):
        self.set(key, json.dumps(data), ttl)


@pytest.fixture
def db_session():
    """In-memory SQLite database for service-level tests."""
    database = Database("sqlite://")
    Base.metadata.create_all(bind=database.engine)
    session = database.session()
    try:
        yield session
    finally:
        session.close()
        database.dispose()


@pytest.fixture
def media_host():
    return FakeMediaHost()


@pytest.fixture
def memory_cache():
    return MemoryCacheService()


@pytest.fixture
def null_cache():
    """No-op cache for testing."""
    return NullCacheService()


@pytest.fixture
def client(media_host, null_cache):
    """TestClient with patched lifespan: SQLite database, fake media host, no migrations."""
    yield from _client(media_host, null_cache)


@pytest.fixture
def cached_client(media_host, memory_cache):
    """Same as `client`, with a working in-memory cache."""
    yield from _client(media_host, memory_cache)


def _client(media_host, cache):
    from portfolio_cms.main import create_app

    database = Database("sqlite://")
    Base.metadata.create_all(bind=database.engine)

    @asynccontextmanager
    async def _test_lifespan(app):
        app.state.database = database
        app.state.cache = cache
        app.state.media = media_host
        yield

    limiter.reset()
    with patch("portfolio_cms.main.lifespan", _test_lifespan):
        app = create_app()
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    database.dispose()
