"""ServiceBuilder: wires the LLM, prompt store and extraction service from AppConfig."""
from text_extractor.config import AppConfig
from text_extractor.services.extraction import TextExtractionService
from text_extractor.services.llm.base import LLMService
from text_extractor.services.llm.openai import OpenAILLM
from text_extractor.services.prompt_store.base import PromptStore
from text_extractor.services.prompt_store.local import LocalPromptStore


class ServiceBuilder:
    """Builds the text extraction service from config."""

    def __init__(self, config: AppConfig):
        self.config = config

        self._llm = self._build_llm()
        self._prompt_store = self._build_prompt_store()

    @property
    def llm(self) -> LLMService:
        return self._llm

    @property
    def prompt_store(self) -> PromptStore:
        return self._prompt_store

    def build(self) -> TextExtractionService:
        return TextExtractionService(llm=self._llm, prompt_store=self._prompt_store)

    def _build_llm(self) -> LLMService:
        if self.config.llm_provider == "openai":
            return OpenAILLM(
                model=self.config.llm_model,
                api_key=self.config.openai_api_key,
                base_url=self.config.llm_base_url,
            )
        raise ValueError(f"Unknown LLM provider: {self.config.llm_provider}")

    def _build_prompt_store(self) -> PromptStore:
        if self.config.prompt_store == "local":
            return LocalPromptStore(
                prompts_dir=self.config.prompts_dir,
                language=self.config.prompt_language,
                fallback_language=self.config.prompt_fallback_language,
            )
        raise ValueError(f"Unknown prompt store: {self.config.prompt_store}")
