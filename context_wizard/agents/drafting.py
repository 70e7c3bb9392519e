# context_wizard/agents/drafting.py
"""Drafting Gateway - builds prompts and calls the generative AI service."""

import asyncio
import logging
from typing import Any, Optional

from context_wizard.agents.prompts import load_prompt
from context_wizard.agents.providers import LLMProvider, OpenAIProvider
from context_wizard.agents.schemas import (
    INITIAL_DRAFT_SCHEMA,
    MORE_FACTORS_SCHEMA,
    TOWS_SCHEMA,
    InitialDraft,
    TowsDraft,
    parse_initial_draft,
    parse_more_factors,
    parse_tows_draft,
)
from context_wizard.errors import ServiceError
from context_wizard.records.types import Category, Profile, SwotData

logger = logging.getLogger(__name__)


class DraftingGateway:
    """
    Drafts analysis content with an LLM provider.

    Each operation is one request/response round trip:
    1. Build a prompt from the current profile or analysis
    2. Call the provider in a worker thread with the declared schema
    3. Validate the parsed JSON against that schema

    Failures raise ServiceError (ParseError for bad responses). There is
    no retry and no fallback provider; the caller decides what to show.
    """

    def __init__(self, provider: Optional[LLMProvider] = None):
        self.provider = provider
        self._provider_initialized = provider is not None

    def _get_provider(self) -> LLMProvider:
        """Get or initialize the provider."""
        if not self._provider_initialized:
            self.provider = OpenAIProvider()
            self._provider_initialized = True
        return self.provider

    async def _call(self, prompt: str, schema: dict) -> Any:
        try:
            provider = self._get_provider()
        except Exception as e:
            raise ServiceError(f"Provider setup failed: {e}") from e
        logger.info(f"Calling provider: {provider.name}")
        try:
            return await asyncio.to_thread(provider.generate_json, prompt, schema)
        except ServiceError:
            raise
        except Exception as e:
            raise ServiceError(f"{provider.name} request failed: {e}", provider=provider.name) from e

    # Prompt builders

    def build_initial_prompt(self, profile: Profile) -> str:
        return load_prompt("initial_draft").format(
            company_name=profile.company_name,
            sector=profile.resolved_sector,
            unit_name=profile.unit_name,
        )

    def build_more_prompt(self, profile: Profile, category: Category, existing_texts: list[str]) -> str:
        return load_prompt("more_factors").format(
            sector=profile.resolved_sector,
            category=category.value,
            existing="; ".join(existing_texts),
        )

    def build_tows_prompt(self, swot: SwotData) -> str:
        def joined(factors):
            return ", ".join(f.text for f in factors)

        return load_prompt("tows").format(
            strengths=joined(swot.strengths),
            weaknesses=joined(swot.weaknesses),
            opportunities=joined(swot.opportunities),
            threats=joined(swot.threats),
        )

    # Operations

    async def generate_initial_draft(self, profile: Profile) -> InitialDraft:
        """Draft SWOT and PESTLE lists for a company profile."""
        data = await self._call(self.build_initial_prompt(profile), INITIAL_DRAFT_SCHEMA)
        draft = parse_initial_draft(data, provider=self.provider.name)
        logger.info("Initial draft received")
        return draft

    async def generate_more_for_category(
        self,
        profile: Profile,
        category: Category,
        existing_texts: list[str],
    ) -> list[str]:
        """
        Draft additional points for one category.

        Args:
            profile: Company profile (sector is embedded in the prompt)
            category: Category to extend
            existing_texts: Current texts the service is told not to repeat

        Returns:
            New texts, in the order returned
        """
        prompt = self.build_more_prompt(profile, category, existing_texts)
        data = await self._call(prompt, MORE_FACTORS_SCHEMA)
        texts = parse_more_factors(data, provider=self.provider.name)
        logger.info(f"Received {len(texts)} additional {category.value} points")
        return texts

    async def generate_tows(self, swot: SwotData) -> TowsDraft:
        """Draft TOWS strategies from the current SWOT lists."""
        data = await self._call(self.build_tows_prompt(swot), TOWS_SCHEMA)
        draft = parse_tows_draft(data, provider=self.provider.name)
        logger.info(f"Received {draft.total} TOWS strategies")
        return draft
