"""Extraction session: the page-level state around one image and its text.

Owns the idle → in-flight → succeeded/failed cycle, the "no image" guard, the
toast notifications and the copy-to-clipboard action. The extraction service
itself stays stateless.
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Literal

from pydantic import BaseModel

from text_extractor.core.errors import ExtractionInProgressError, InvalidImageLinkError
from text_extractor.core.image_reference import normalize_link, to_data_url
from text_extractor.services.extraction import TextExtractionService

logger = logging.getLogger("text_extractor.session")

ToastVariant = Literal["default", "destructive"]

EXTRACTION_FALLBACK_ERROR = "Failed to extract text from the image."


class SessionStatus(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class Toast(BaseModel):
    title: str
    description: str
    variant: ToastVariant = "default"


class Clipboard(ABC):
    @abstractmethod
    def write_text(self, text: str) -> None:
        """Place `text` on the clipboard. Raises on failure."""
        ...


class ExtractionSession:
    def __init__(self, service: TextExtractionService, clipboard: Clipboard | None = None):
        self._service = service
        self._clipboard = clipboard
        self.status = SessionStatus.IDLE
        self.image_url: str | None = None
        self.extracted_text: str = ""
        self.last_error: str | None = None
        self.notifications: list[Toast] = []

    @property
    def is_extracting(self) -> bool:
        return self.status is SessionStatus.IN_FLIGHT

    @property
    def can_extract(self) -> bool:
        return bool(self.image_url) and not self.is_extracting

    def notify(self, title: str, description: str, variant: ToastVariant = "default") -> Toast:
        toast = Toast(title=title, description=description, variant=variant)
        self.notifications.append(toast)
        return toast

    # --- Image acquisition ---

    def load_upload(self, data: bytes, mime_type: str | None = None) -> str:
        self.image_url = to_data_url(data, mime_type)
        return self.image_url

    def load_camera_capture(self, data: bytes, mime_type: str = "image/png") -> str:
        self.image_url = to_data_url(data, mime_type)
        return self.image_url

    def load_link(self, text: str) -> str | None:
        """Use a pasted link as the image. An invalid link leaves the current image in place."""
        try:
            self.image_url = normalize_link(text)
        except InvalidImageLinkError as e:
            logger.info(f"Rejected pasted link: {e}")
            self.notify("Invalid link", "Please paste an http(s) link to an image.", "destructive")
            return None
        return self.image_url

    # --- Extraction ---

    async def extract(self) -> str | None:
        """Extract text from the current image.

        Returns the extracted text, or None when nothing was extracted. Failures
        are reported as toasts; the previously extracted text is kept.

        Raises:
            ExtractionInProgressError: If a request is already in flight.
        """
        if not self.image_url:
            self.notify("No image uploaded", "Please upload an image to extract text from.")
            return None
        if self.is_extracting:
            raise ExtractionInProgressError("A text extraction is already in progress")

        self.status = SessionStatus.IN_FLIGHT
        try:
            text = await self._service.extract_text(self.image_url)
        except Exception as e:
            logger.error(f"Error extracting text: {e}")
            self.status = SessionStatus.FAILED
            self.last_error = str(e) or EXTRACTION_FALLBACK_ERROR
            self.notify("Error", self.last_error, "destructive")
            return None
        finally:
            if self.status is SessionStatus.IN_FLIGHT:
                self.status = SessionStatus.IDLE

        self.status = SessionStatus.SUCCEEDED
        self.extracted_text = text
        self.last_error = None
        self.notify("Text extracted", "Text has been successfully extracted from the image.")
        return text

    # --- Clipboard ---

    def copy_to_clipboard(self) -> bool:
        try:
            if self._clipboard is None:
                raise RuntimeError("No clipboard available")
            self._clipboard.write_text(self.extracted_text)
        except Exception as e:
            logger.error(f"Failed to copy text: {e}")
            self.notify("Error", "Failed to copy the text to the clipboard.", "destructive")
            return False
        self.notify("Copied to clipboard", "The extracted text has been copied to the clipboard.")
        return True
