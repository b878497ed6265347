from abc import ABC, abstractmethod
from typing import Any, Optional
from pydantic import BaseModel, Field


class PromptTemplate(BaseModel):
    """A named prompt template and the parameters it needs."""
    name: str
    template: str
    description: str = ""
    params: list[str] = Field(default_factory=list)

    def render(self, params: dict[str, Any]) -> str:
        """Fill the declared placeholders. A template without params is returned as written.

        Raises:
            ValueError: If a declared parameter is absent from `params`.
        """
        absent = [p for p in self.params if p not in params]
        if absent:
            raise ValueError(f"Missing required parameters for template '{self.name}': {absent}")
        if not self.params:
            return self.template
        return self.template.format(**params)


class PromptStore(ABC):
    """Read-only source of prompt templates, addressed as `(category, name)`."""

    @abstractmethod
    def get(self, category: str, name: str) -> Optional[PromptTemplate]:
        """Return the template, or None when it does not exist."""
        ...

    def get_and_render(
        self, category: str, name: str, params: Optional[dict[str, Any]] = None
    ) -> str:
        """Raises ValueError if the template does not exist or parameters are missing."""
        template = self.get(category, name)
        if template is None:
            raise ValueError(f"Prompt template '{category}/{name}' not found")
        return template.render(params or {})
