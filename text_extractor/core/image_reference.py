"""Helpers for image references: data URLs and pasted http(s) links.

An image reference is a plain string. The extraction service forwards any
non-empty reference untouched; these helpers only serve the acquisition side
(uploads, camera snapshots, pasted links) and logging.
"""
import base64
import re
from enum import Enum
from urllib.parse import urlparse

from pydantic import BaseModel

from text_extractor.core.errors import InvalidImageLinkError

DEFAULT_MIME_TYPE = "application/octet-stream"

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[^;,]*)(?P<params>(;[^;,]*)*?);base64,(?P<payload>.*)$", re.DOTALL)


class ReferenceKind(str, Enum):
    DATA_URL = "data_url"
    REMOTE_URL = "remote_url"
    UNKNOWN = "unknown"


class DataURL(BaseModel):
    """A decoded-on-demand view of a base64 data URL."""
    mime_type: str
    payload: str

    def decode(self) -> bytes:
        return base64.b64decode(self.payload)


def to_data_url(data: bytes, mime_type: str | None = None) -> str:
    """Encode raw image bytes (file upload, camera capture) as a base64 data URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or DEFAULT_MIME_TYPE};base64,{encoded}"


def parse_data_url(reference: str) -> DataURL | None:
    """Split a base64 data URL into mime type and payload. Returns None for anything else."""
    match = _DATA_URL_RE.match(reference)
    if match is None:
        return None
    return DataURL(mime_type=match.group("mime") or DEFAULT_MIME_TYPE, payload=match.group("payload"))


def classify_reference(reference: str) -> ReferenceKind:
    if reference.startswith("data:"):
        return ReferenceKind.DATA_URL
    parsed = urlparse(reference)
    if parsed.scheme in ("http", "https") and parsed.netloc:
        return ReferenceKind.REMOTE_URL
    return ReferenceKind.UNKNOWN


def normalize_link(text: str) -> str:
    """Trim a pasted link and require an absolute http(s) URL.

    Raises:
        InvalidImageLinkError: If the text is not an http(s) URL with a host.
    """
    link = text.strip()
    if classify_reference(link) is not ReferenceKind.REMOTE_URL:
        raise InvalidImageLinkError(f"Not a valid image link: {text!r}")
    return link


def describe_reference(reference: str) -> str:
    """Short, log-safe description of a reference (never the full base64 payload)."""
    kind = classify_reference(reference)
    if kind is ReferenceKind.DATA_URL:
        parsed = parse_data_url(reference)
        if parsed is not None:
            return f"data_url(mime={parsed.mime_type}, chars={len(parsed.payload)})"
        return f"data_url(malformed, chars={len(reference)})"
    if kind is ReferenceKind.REMOTE_URL:
        return f"remote_url({reference})"
    return f"unknown(chars={len(reference)})"
