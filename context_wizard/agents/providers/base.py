# context_wizard/agents/providers/base.py
"""Abstract base class for LLM providers."""

import json
from abc import ABC, abstractmethod
from typing import Any

from context_wizard.agents.prompts import load_prompt
from context_wizard.errors import ParseError


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    def generate_json(self, prompt: str, schema: dict) -> Any:
        """
        Send a prompt and return the parsed JSON response.

        Args:
            prompt: Natural-language request
            schema: JSON schema the response must follow

        Returns:
            Parsed JSON (object or array)

        Raises:
            ParseError: If the response is not valid JSON
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name for logging (e.g., 'openai', 'anthropic')."""
        pass

    def _system_prompt(self, schema: dict) -> str:
        return load_prompt("system").format(schema=json.dumps(schema, ensure_ascii=False))

    def _parse_response(self, content: str) -> Any:
        """Parse a JSON object or array, tolerating markdown code fences."""
        content = content.strip()
        if "```" in content:
            starts = [i for i in (content.find("{"), content.find("[")) if i != -1]
            end = max(content.rfind("}"), content.rfind("]")) + 1
            if starts and end > min(starts):
                content = content[min(starts):end]

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(
                f"Failed to parse LLM response as JSON: {e}",
                provider=self.name,
                raw=content,
            )
