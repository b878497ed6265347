class TextExtractionError(Exception):
    """Base class for all text extraction failures."""


class InputMissingError(TextExtractionError):
    """No image reference was supplied. Raised before any provider call."""


class ProviderError(TextExtractionError):
    """The external model call failed (network, auth, rate limit, refusal)."""


class SchemaViolationError(ProviderError):
    """The provider answered, but its payload does not match the output schema."""


class ExtractionInProgressError(TextExtractionError):
    """An extraction is already in flight for this session."""


class InvalidImageLinkError(TextExtractionError):
    """A pasted link is not an absolute http(s) URL."""


class InvalidInputError(TextExtractionError):
    """The extraction input is present but has the wrong shape (e.g. a non-string imageUrl)."""
