from abc import ABC, abstractmethod
from typing import TypeVar
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class LLMService(ABC):
    @abstractmethod
    async def structured_output(self, messages: list[dict], response_model: type[T]) -> T:
        """Call LLM and validate its response against a Pydantic model.

        Raises:
            pydantic.ValidationError: If the response does not match `response_model`.
        """
        ...
