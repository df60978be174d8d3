"""Tests for the media host client and attachment helpers."""

import io
from unittest.mock import patch

import httpx
import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from portfolio_cms.common.media import MediaSlot, discard_media, prepare_upload, replace_media
from portfolio_cms.exceptions import PayloadInvalid
from portfolio_cms.integrations.media import (
    CloudinaryMediaHost,
    MediaHostError,
    public_id_from_url,
    sign_params,
)

URL = "https://res.cloudinary.com/demo/image/upload/v1712345/users/images/abc123.jpg"


def _upload_file(content: bytes, filename: str = "a.png", content_type: str = "image/png") -> UploadFile:
    return UploadFile(io.BytesIO(content), filename=filename, headers=Headers({"content-type": content_type}))


class TestPublicIdFromUrl:
    def test_strips_extension_and_prefixes_folder(self):
        assert public_id_from_url(URL, "users/images") == "users/images/abc123"

    def test_raw_keeps_extension(self):
        url = "https://res.cloudinary.com/demo/raw/upload/v1/users/cvs/resume.pdf"
        assert public_id_from_url(url, "users/cvs", keep_extension=True) == "users/cvs/resume.pdf"

    def test_empty_url(self):
        assert public_id_from_url("", "users/images") is None


class TestSignParams:
    def test_sorted_and_secret_appended(self):
        import hashlib

        expected = hashlib.sha1(b"folder=x&timestamp=10secret").hexdigest()
        assert sign_params({"timestamp": 10, "folder": "x"}, "secret") == expected


class TestCloudinaryMediaHost:
    def _host(self, handler):
        return CloudinaryMediaHost(
            "demo", "key", "secret", client=httpx.Client(transport=httpx.MockTransport(handler))
        )

    def test_upload_sends_signed_data_uri(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["body"] = request.content.decode()
            return httpx.Response(200, json={"secure_url": URL})

        assert self._host(handler).upload(b"png", "image/png", "users/images") == URL
        assert seen["url"] == "https://api.cloudinary.com/v1_1/demo/image/upload"
        assert "folder=users%2Fimages" in seen["body"]
        assert "file=data%3Aimage%2Fpng%3Bbase64%2CcG5n" in seen["body"]
        assert "signature=" in seen["body"]
        assert "api_key=key" in seen["body"]

    def test_upload_error_status(self):
        host = self._host(lambda request: httpx.Response(401, json={"error": {"message": "bad key"}}))
        with pytest.raises(MediaHostError):
            host.upload(b"png", "image/png", "users/images")

    def test_upload_without_url(self):
        host = self._host(lambda request: httpx.Response(200, json={}))
        with pytest.raises(MediaHostError):
            host.upload(b"png", "image/png", "users/images")

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("down", request=request)

        with pytest.raises(MediaHostError):
            self._host(handler).destroy("users/images/abc123")

    def test_destroy_raw(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            return httpx.Response(200, json={"result": "not found"})

        self._host(handler).destroy("users/cvs/resume.pdf", "raw")
        assert seen["url"].endswith("/demo/raw/destroy")


class TestPrepareUpload:
    def test_empty_field_is_none(self):
        assert prepare_upload(None, MediaSlot("x")) is None
        assert prepare_upload(_upload_file(b""), MediaSlot("x")) is None

    def test_type_rejected(self):
        slot = MediaSlot("docs", allowed_types=frozenset({"application/pdf"}), rejection="PDF only")
        with pytest.raises(PayloadInvalid) as exc:
            prepare_upload(_upload_file(b"data", "a.txt", "text/plain"), slot)
        assert exc.value.message == "PDF only"

    def test_size_limit(self):
        with patch("portfolio_cms.common.media.settings") as mock_settings:
            mock_settings.max_upload_bytes = 4
            with pytest.raises(PayloadInvalid):
                prepare_upload(_upload_file(b"12345"), MediaSlot("x"))

    def test_reads_content(self):
        pending = prepare_upload(_upload_file(b"abc"), MediaSlot("x"))
        assert pending.data == b"abc"
        assert pending.content_type == "image/png"


class TestReplaceAndDiscard:
    def test_replace_keeps_current_without_upload(self, media_host):
        assert replace_media(media_host, None, URL, MediaSlot("users/images")) == URL
        assert media_host.uploads == []

    def test_discard_swallows_host_errors(self, media_host):
        media_host.fail_destroy = True
        discard_media(media_host, URL, MediaSlot("users/images"))
        assert media_host.destroyed == [("users/images/abc123", "image")]

    def test_discard_ignores_empty(self, media_host):
        discard_media(media_host, "", MediaSlot("users/images"))
        assert media_host.destroyed == []
