"""LLM providers for drafting."""

from typing import Optional

from context_wizard.agents.providers.base import LLMProvider
from context_wizard.agents.providers.openai_provider import OpenAIProvider
from context_wizard.agents.providers.anthropic_provider import AnthropicProvider

PROVIDERS = {
    "openai": OpenAIProvider,
    "anthropic": AnthropicProvider,
}


def create_provider(name: str, model: Optional[str] = None) -> LLMProvider:
    """Instantiate a provider by name, optionally overriding its model."""
    try:
        provider_cls = PROVIDERS[name]
    except KeyError:
        raise ValueError(f"Unknown provider: {name} (choose from {', '.join(PROVIDERS)})")
    if model:
        return provider_cls(model=model)
    return provider_cls()


__all__ = ["LLMProvider", "OpenAIProvider", "AnthropicProvider", "PROVIDERS", "create_provider"]
