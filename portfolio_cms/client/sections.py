"""Page-level state for the dashboard sections.

A Section holds the list a page shows and only changes it after the server
has answered: created documents are appended, updated ones replace the entry
with the same id, deleted ones are filtered out. Failures become notices and
leave the list as it was.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from .api import ApiError, ResourceClient

logger = logging.getLogger(__name__)


@dataclass
class Notice:
    level: str  # "success" or "error"
    message: str


class Section:
    def __init__(self, resource: ResourceClient) -> None:
        self.resource = resource
        self.items: list[dict] = []
        self.notices: list[Notice] = []

    @property
    def label(self) -> str:
        return self.resource.spec.label

    def _fail(self, action: str, exc: ApiError) -> None:
        logger.warning("%s %s failed: %s", action, self.label, exc.message)
        self.notices.append(Notice("error", exc.message or f"Failed to {action} {self.label.lower()}"))

    def load(self) -> bool:
        try:
            self.items = self.resource.list()
        except ApiError as exc:
            self._fail("load", exc)
            return False
        return True

    def create(self, data: dict, files: dict | None = None) -> dict | None:
        try:
            doc = self.resource.create(data, files)
        except ApiError as exc:
            self._fail("create", exc)
            return None
        self.items = [*self.items, doc]
        self.notices.append(Notice("success", f"{self.label} created"))
        return doc

    def update(self, doc_id: int, data: dict, files: dict | None = None) -> dict | None:
        try:
            doc = self.resource.update(doc_id, data, files)
        except ApiError as exc:
            self._fail("update", exc)
            return None
        self.items = [doc if item.get("id") == doc_id else item for item in self.items]
        self.notices.append(Notice("success", f"{self.label} updated"))
        return doc

    def remove(self, doc_id: int) -> bool:
        try:
            message = self.resource.delete(doc_id)
        except ApiError as exc:
            self._fail("delete", exc)
            return False
        self.items = [item for item in self.items if item.get("id") != doc_id]
        self.notices.append(Notice("success", message or f"{self.label} deleted"))
        return True


class CachedSection(Section):
    """Section whose loaded list stays fresh for `ttl` seconds.

    Any mutation marks the copy stale, so the next load() refetches.
    """

    def __init__(
        self,
        resource: ResourceClient,
        ttl: float = 300.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(resource)
        self.ttl = ttl
        self._clock = clock
        self._loaded_at: float | None = None

    @property
    def is_fresh(self) -> bool:
        return self._loaded_at is not None and self._clock() - self._loaded_at < self.ttl

    def invalidate(self) -> None:
        self._loaded_at = None

    def load(self, force: bool = False) -> bool:
        if not force and self.is_fresh:
            return True
        if not super().load():
            return False
        self._loaded_at = self._clock()
        return True

    def create(self, data: dict, files: dict | None = None) -> dict | None:
        doc = super().create(data, files)
        if doc is not None:
            self.invalidate()
        return doc

    def update(self, doc_id: int, data: dict, files: dict | None = None) -> dict | None:
        doc = super().update(doc_id, data, files)
        if doc is not None:
            self.invalidate()
        return doc

    def remove(self, doc_id: int) -> bool:
        removed = super().remove(doc_id)
        if removed:
            self.invalidate()
        return removed
