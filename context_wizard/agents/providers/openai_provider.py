# context_wizard/agents/providers/openai_provider.py
"""OpenAI LLM provider."""

import os
from typing import Any, Optional

from openai import OpenAI

from context_wizard.agents.providers.base import LLMProvider


class OpenAIProvider(LLMProvider):
    """OpenAI-based drafting provider."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4.1-mini",
    ):
        self.api_key = api_key or os.environ.get("OPENAI_API_KEY")
        self.model = model
        self._client = OpenAI(api_key=self.api_key)

    @property
    def name(self) -> str:
        return "openai"

    def generate_json(self, prompt: str, schema: dict) -> Any:
        """Generate structured content using OpenAI."""
        response = self._client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": self._system_prompt(schema)},
                {"role": "user", "content": prompt},
            ],
            temperature=0.7,
        )

        content = response.choices[0].message.content or ""
        return self._parse_response(content)
