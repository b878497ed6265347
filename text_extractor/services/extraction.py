"""Text extraction service: one image reference in, the model's text out."""
import logging

import opik
from pydantic import ValidationError

from text_extractor.core.errors import InputMissingError, InvalidInputError, ProviderError, SchemaViolationError
from text_extractor.core.extraction import ExtractTextFromImageInput, ExtractTextFromImageOutput
from text_extractor.core.image_reference import describe_reference
from text_extractor.services.llm.base import LLMService
from text_extractor.services.prompt_store.base import PromptStore

logger = logging.getLogger("text_extractor.extraction")

PROMPT_CATEGORY = "extract_text"


class TextExtractionService:
    """Submits an image reference to the model with the fixed extraction prompt.

    Single attempt, no retry, no local state. Errors from the provider surface as
    `ProviderError`; a response that fails the output schema surfaces as
    `SchemaViolationError`.
    """

    def __init__(self, llm: LLMService, prompt_store: PromptStore):
        self.llm = llm
        self.prompt_store = prompt_store

    def build_messages(self, request: ExtractTextFromImageInput) -> list[dict]:
        system_prompt = self.prompt_store.get_and_render(PROMPT_CATEGORY, "system")
        instruction = self.prompt_store.get_and_render(PROMPT_CATEGORY, "user")
        return [
            {"role": "system", "content": system_prompt},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": instruction},
                    {"type": "image_url", "image_url": {"url": request.image_url}},
                ],
            },
        ]

    @opik.track(name="extract_text_from_image")
    async def extract_text_from_image(self, payload: ExtractTextFromImageInput | dict) -> ExtractTextFromImageOutput:
        """Run the extraction prompt for `{imageUrl}` and return `{extractedText}`.

        Raises:
            InputMissingError: If no non-empty image reference is given.
            InvalidInputError: If `imageUrl` is present but not a string.
            SchemaViolationError: If the model response does not match the output schema.
            ProviderError: If the model call fails.
        """
        if isinstance(payload, dict):
            if payload.get("imageUrl", payload.get("image_url")) is None:
                raise InputMissingError("No image supplied: imageUrl is missing")
            try:
                payload = ExtractTextFromImageInput.model_validate(payload)
            except ValidationError as e:
                raise InvalidInputError(f"Invalid extraction input: {e}") from e

        if not payload.image_url:
            raise InputMissingError("No image supplied: imageUrl must be a non-empty string")

        messages = self.build_messages(payload)
        logger.info(f"Extracting text: image={describe_reference(payload.image_url)}")

        try:
            result = await self.llm.structured_output(messages, ExtractTextFromImageOutput)
        except ValidationError as e:
            logger.warning(f"Provider response failed output schema: {e.error_count()} error(s)")
            raise SchemaViolationError(f"Provider response does not match the output schema: {e}") from e
        except Exception as e:
            logger.warning(f"Text extraction failed: {e}")
            raise ProviderError(f"Text extraction failed: {e}") from e

        if not isinstance(result, ExtractTextFromImageOutput):
            raise SchemaViolationError(
                f"Provider response does not match the output schema: got {type(result).__name__}"
            )

        logger.info(f"Text extracted: chars={len(result.extracted_text)}")
        return result

    async def extract_text(self, image_reference: str) -> str:
        """Return the raw text read from `image_reference`, verbatim."""
        if not image_reference:
            raise InputMissingError("No image supplied: imageUrl must be a non-empty string")
        result = await self.extract_text_from_image(ExtractTextFromImageInput(image_url=image_reference))
        return result.extracted_text
