import logging

import opik
from openai import AsyncOpenAI

from text_extractor.services.llm.base import LLMService, T

logger = logging.getLogger("text_extractor.llm")


class OpenAILLM(LLMService):
    """OpenAI-compatible LLM service with schema-validated structured output.

    The JSON schema of the response model is sent as the response format, and
    the returned content is validated with Pydantic once the call comes back.
    """

    def __init__(self, model: str = "gpt-4o-mini", base_url: str | None = None, api_key: str | None = None):
        self._model = model
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key)

    @opik.track(name="llm_structured_output", type="llm")
    async def structured_output(self, messages: list[dict], response_model: type[T]) -> T:
        completion = await self._client.chat.completions.create(
            model=self._model,
            messages=messages,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": response_model.__name__,
                    "schema": response_model.model_json_schema(),
                },
            },
        )
        message = completion.choices[0].message
        if getattr(message, "refusal", None):
            raise ValueError(f"LLM refused to respond with {response_model.__name__}: {message.refusal}")
        if not message.content:
            raise ValueError(f"LLM returned no content for {response_model.__name__}")
        logger.debug(f"Structured response received: model={self._model}, chars={len(message.content)}")
        return response_model.model_validate_json(message.content)
