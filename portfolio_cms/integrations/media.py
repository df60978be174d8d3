"""Remote media host integration (Cloudinary upload API).

Binaries are sent as base64 data URIs in signed requests; the host answers
with a public URL, which is the only thing the datastore keeps. Deleting an
object re-derives its identifier from that URL (see public_id_from_url), so
the stored URL shape is a contract with the host.
"""

import base64
import hashlib
import logging
import time
from typing import Protocol
from urllib.parse import urlparse

import httpx

from ..config import settings

logger = logging.getLogger(__name__)


class MediaHostError(Exception):
    """The media host rejected a request or could not be reached."""


class MediaHost(Protocol):
    """Media host interface."""

    def upload(self, data: bytes, content_type: str, folder: str, resource_type: str = "image") -> str: ...
    def destroy(self, public_id: str, resource_type: str = "image") -> None: ...
    def close(self) -> None: ...


def sign_params(params: dict, api_secret: str) -> str:
    """SHA-1 signature over the alphabetically sorted request parameters."""
    payload = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1((payload + api_secret).encode("utf-8")).hexdigest()


class CloudinaryMediaHost:
    """Signed upload/destroy calls against the Cloudinary REST API."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        *,
        api_base: str = "https://api.cloudinary.com/v1_1",
        client: httpx.Client | None = None,
    ) -> None:
        self._cloud_name = cloud_name
        self._api_key = api_key
        self._api_secret = api_secret
        self._api_base = api_base.rstrip("/")
        self._client = client or httpx.Client()

    def _endpoint(self, resource_type: str, action: str) -> str:
        return f"{self._api_base}/{self._cloud_name}/{resource_type}/{action}"

    def _signed(self, params: dict) -> dict:
        return {
            **params,
            "api_key": self._api_key,
            "signature": sign_params(params, self._api_secret),
        }

    def _post(self, url: str, form: dict) -> dict:
        try:
            response = self._client.post(url, data=form)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise MediaHostError(f"Media host returned {exc.response.status_code} for {url}") from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise MediaHostError(f"Media host request failed: {exc}") from exc

    def upload(self, data: bytes, content_type: str, folder: str, resource_type: str = "image") -> str:
        """Upload a binary into `folder` and return its public HTTPS URL."""
        data_uri = f"data:{content_type};base64,{base64.b64encode(data).decode('ascii')}"
        form = self._signed({"folder": folder, "timestamp": int(time.time())})
        form["file"] = data_uri
        body = self._post(self._endpoint(resource_type, "upload"), form)
        url = body.get("secure_url")
        if not url:
            raise MediaHostError("Media host response carried no secure_url")
        logger.info("Media uploaded: folder=%s, size=%d, url=%s", folder, len(data), url)
        return url

    def destroy(self, public_id: str, resource_type: str = "image") -> None:
        form = self._signed({"public_id": public_id, "timestamp": int(time.time())})
        body = self._post(self._endpoint(resource_type, "destroy"), form)
        result = body.get("result")
        if result != "ok":
            logger.warning("Media host did not delete %s: result=%s", public_id, result)
            return
        logger.info("Media deleted: %s", public_id)

    def close(self) -> None:
        self._client.close()


def public_id_from_url(url: str, folder: str, keep_extension: bool = False) -> str | None:
    """Derive the host's object identifier from a stored URL.

    Takes the last path segment, strips its extension (raw files keep it)
    and prefixes the folder the object was uploaded into.
    """
    if not url:
        return None
    segment = urlparse(url).path.rstrip("/").rsplit("/", 1)[-1]
    if not keep_extension:
        segment = segment.split(".", 1)[0]
    if not segment:
        return None
    return f"{folder}/{segment}" if folder else segment


def create_media_host() -> MediaHost:
    """Factory: media host client built from configuration."""
    return CloudinaryMediaHost(
        settings.cloudinary_cloud_name,
        settings.cloudinary_api_key,
        settings.cloudinary_api_secret,
        api_base=settings.cloudinary_api_base,
    )
