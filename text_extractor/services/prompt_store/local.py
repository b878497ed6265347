import logging
from pathlib import Path
from typing import Optional

import yaml

from text_extractor.services.prompt_store.base import PromptStore, PromptTemplate

logger = logging.getLogger("text_extractor.prompts")


class LocalPromptStore(PromptStore):
    """Prompt templates read from YAML files on disk.

    Layout is one directory per language and one file per category:

        prompts/
        └── en/
            └── extract_text.yaml   # category "extract_text"

    Each top-level key of a file is a prompt name:

        user:
            template: |
                Extract the text from the following image. Return only the raw text.
            description: Instruction sent alongside the image
            params: []

    Lookups try `language` first, then `fallback_language`. Parsed files are
    cached per `<lang>/<category>`.
    """

    def __init__(self, prompts_dir: str | Path, language: str = "en", fallback_language: str = "en"):
        self._root = Path(prompts_dir)
        self.language = language
        self.fallback_language = fallback_language
        self._cache: dict[str, Optional[dict]] = {}

        if not self._root.is_dir():
            raise FileNotFoundError(f"Prompts directory not found: {self._root}")

    def get(self, category: str, name: str) -> Optional[PromptTemplate]:
        for lang in dict.fromkeys([self.language, self.fallback_language]):
            entries = self._read(category, lang)
            if entries and name in entries:
                entry = entries[name]
                return PromptTemplate(
                    name=f"{category}.{name}",
                    template=entry["template"],
                    description=entry.get("description", ""),
                    params=entry.get("params") or [],
                )
        return None

    def _read(self, category: str, lang: str) -> Optional[dict]:
        key = f"{lang}/{category}"
        if key not in self._cache:
            path = self._root / lang / f"{category}.yaml"
            if path.exists():
                logger.debug(f"Loading prompt file {path}")
                with open(path) as f:
                    self._cache[key] = yaml.safe_load(f) or {}
            else:
                self._cache[key] = None
        return self._cache[key]
