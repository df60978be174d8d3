"""HTTP client for the portfolio API.

Each collection is described by a ResourceSpec: where it lives and how its
payload goes on the wire. Collections with a binary field are sent as
multipart form data, the rest as JSON.
"""

import json
import logging
from dataclasses import dataclass, field

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceSpec:
    path: str
    label: str
    multipart: bool = False
    file_fields: frozenset[str] = field(default_factory=frozenset)
    # list fields the server reads as one comma-delimited string
    joined_fields: frozenset[str] = field(default_factory=frozenset)
    # structured fields sent as a JSON-encoded form value
    json_fields: frozenset[str] = field(default_factory=frozenset)
    singleton: bool = False


RESOURCES: dict[str, ResourceSpec] = {
    "profile": ResourceSpec(
        "/api/portfolio",
        "Profile",
        multipart=True,
        file_fields=frozenset({"image", "cv"}),
        joined_fields=frozenset({"keySkills"}),
    ),
    "work-experience": ResourceSpec(
        "/api/work-experience", "Work experience", multipart=True, file_fields=frozenset({"companyLogo"})
    ),
    "education": ResourceSpec("/api/education", "Education"),
    "certifications": ResourceSpec("/api/certifications", "Certification"),
    "technologies": ResourceSpec("/api/technologies", "Technology", multipart=True, file_fields=frozenset({"icon"})),
    "testimonials": ResourceSpec(
        "/api/testimonials", "Testimonial", multipart=True, file_fields=frozenset({"authorImage"})
    ),
    "projects": ResourceSpec(
        "/api/projects",
        "Project",
        multipart=True,
        file_fields=frozenset({"thumbnail", "images", "iconLists"}),
        json_fields=frozenset({"keyFeatures"}),
    ),
    "contact": ResourceSpec("/api/contact", "Contact", singleton=True),
}

# (filename, content, content type)
FileTuple = tuple[str, bytes, str]


class ApiError(Exception):
    """Non-success answer from the API, or a transport failure (status_code 0)."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def encode_form(spec: ResourceSpec, data: dict) -> dict:
    """Flatten a payload into multipart form values."""
    form: dict[str, str | list[str]] = {}
    for key, value in data.items():
        # stored media URLs are never resent; new binaries travel as files
        if value is None or key in spec.file_fields:
            continue
        if key in spec.json_fields and not isinstance(value, str):
            form[key] = json.dumps(value)
        elif key in spec.joined_fields and isinstance(value, list | tuple):
            form[key] = ", ".join(str(v) for v in value)
        elif isinstance(value, list | tuple):
            form[key] = [str(v) for v in value]
        elif isinstance(value, dict):
            form[key] = json.dumps(value)
        else:
            form[key] = str(value)
    return form


def send(http: httpx.Client, method: str, path: str, **kwargs) -> httpx.Response:
    """Issue a request, turning error statuses and transport failures into ApiError."""
    try:
        response = http.request(method, path, **kwargs)
    except httpx.HTTPError as exc:
        logger.warning("%s %s failed: %s", method, path, exc)
        raise ApiError(0, f"Could not reach the server: {exc}") from exc
    if response.status_code >= 400:
        try:
            message = response.json().get("error") or response.text
        except (ValueError, AttributeError):
            message = response.text
        raise ApiError(response.status_code, message)
    return response


def encode_files(files: dict[str, FileTuple | list[FileTuple]] | None) -> list[tuple[str, FileTuple]]:
    encoded = []
    for name, value in (files or {}).items():
        for item in value if isinstance(value, list) else [value]:
            encoded.append((name, item))
    return encoded


class ResourceClient:
    """CRUD calls for one collection."""

    def __init__(self, http: httpx.Client, spec: ResourceSpec) -> None:
        self._http = http
        self.spec = spec

    def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        return send(self._http, method, path, **kwargs)

    def _body(self, data: dict, files: dict | None) -> dict:
        if not self.spec.multipart:
            return {"json": data}
        encoded_files = encode_files(files)
        if encoded_files:
            return {"data": encode_form(self.spec, data), "files": encoded_files}
        return {"data": encode_form(self.spec, data)}

    def list(self) -> list[dict]:
        if self.spec.singleton:
            try:
                return [self._send("GET", self.spec.path).json()]
            except ApiError as exc:
                if exc.status_code == 404:
                    return []
                raise
        return self._send("GET", self.spec.path).json()

    def get(self, doc_id: int) -> dict:
        return self._send("GET", f"{self.spec.path}/{doc_id}").json()

    def create(self, data: dict, files: dict | None = None) -> dict:
        return self._send("POST", self.spec.path, **self._body(data, files)).json()

    def update(self, doc_id: int, data: dict, files: dict | None = None) -> dict:
        return self._send("PUT", f"{self.spec.path}/{doc_id}", **self._body(data, files)).json()

    def delete(self, doc_id: int) -> str:
        return self._send("DELETE", f"{self.spec.path}/{doc_id}").json().get("message", "")


class PortfolioClient:
    """Entry point: one ResourceClient per collection plus the dashboard counts."""

    def __init__(self, base_url: str = "", *, http: httpx.Client | None = None) -> None:
        self._http = http or httpx.Client(base_url=base_url)

    def resource(self, name: str) -> ResourceClient:
        try:
            spec = RESOURCES[name]
        except KeyError:
            raise ValueError(f"Unknown resource: {name}") from None
        return ResourceClient(self._http, spec)

    def counts(self) -> dict:
        return send(self._http, "GET", "/api/count").json()

    def close(self) -> None:
        self._http.close()
