# context_wizard/agents/providers/anthropic_provider.py
"""Anthropic Claude LLM provider."""

import os
from typing import Any, Optional

from anthropic import Anthropic

from context_wizard.agents.providers.base import LLMProvider


class AnthropicProvider(LLMProvider):
    """Anthropic Claude-based drafting provider."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "claude-haiku-4-5-20251001",
    ):
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        self.model = model
        self._client = Anthropic(api_key=self.api_key)

    @property
    def name(self) -> str:
        return "anthropic"

    def generate_json(self, prompt: str, schema: dict) -> Any:
        """Generate structured content using Anthropic Claude."""
        response = self._client.messages.create(
            model=self.model,
            max_tokens=4096,
            messages=[
                {"role": "user", "content": prompt},
            ],
            system=self._system_prompt(schema),
            temperature=0.7,
        )

        content = response.content[0].text
        return self._parse_response(content)
