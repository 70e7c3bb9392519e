# context_wizard/agents/schemas.py
"""Declared output schemas for the drafting calls."""

from typing import Annotated, Any

from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from context_wizard.errors import ParseError
from context_wizard.records.types import Category, Framework, TowsCategory


class SwotLists(BaseModel):
    strengths: list[str]
    weaknesses: list[str]
    opportunities: list[str]
    threats: list[str]


class PestleLists(BaseModel):
    political: list[str]
    economic: list[str]
    social: list[str]
    technological: list[str]
    legal: list[str]
    # Older responses sometimes omit the environmental list
    environmental: list[str] = Field(default_factory=list)


class InitialDraft(BaseModel):
    """SWOT and PESTLE draft returned by the initial analysis call."""

    swot: SwotLists
    pestle: PestleLists

    def texts_for(self, category: Category) -> list[str]:
        section = self.swot if category.framework is Framework.SWOT else self.pestle
        return getattr(section, category.value)


class TowsDraft(BaseModel):
    """TOWS strategies grouped by quadrant."""

    so_strategies: list[str] = Field(
        description="Strategi Kekuatan-Peluang (Strengths-Opportunities)"
    )
    st_strategies: list[str] = Field(
        description="Strategi Kekuatan-Ancaman (Strengths-Threats)"
    )
    wo_strategies: list[str] = Field(
        description="Strategi Kelemahan-Peluang (Weaknesses-Opportunities)"
    )
    wt_strategies: list[str] = Field(
        description="Strategi Kelemahan-Ancaman (Weaknesses-Threats)"
    )

    def texts_for(self, category: TowsCategory) -> list[str]:
        return getattr(self, f"{category.value.lower()}_strategies")

    @property
    def total(self) -> int:
        return sum(len(self.texts_for(c)) for c in TowsCategory)


# 2-3 points are requested; up to 5 are accepted
MORE_FACTORS = TypeAdapter(Annotated[list[str], Field(min_length=2, max_length=5)])

INITIAL_DRAFT_SCHEMA = InitialDraft.model_json_schema()
TOWS_SCHEMA = TowsDraft.model_json_schema()
MORE_FACTORS_SCHEMA = MORE_FACTORS.json_schema()


def parse_initial_draft(data: Any, provider: str = None) -> InitialDraft:
    try:
        return InitialDraft.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(f"Response does not match draft schema: {e}", provider=provider)


def parse_tows_draft(data: Any, provider: str = None) -> TowsDraft:
    try:
        return TowsDraft.model_validate(data)
    except PydanticValidationError as e:
        raise ParseError(f"Response does not match TOWS schema: {e}", provider=provider)


def parse_more_factors(data: Any, provider: str = None) -> list[str]:
    try:
        return MORE_FACTORS.validate_python(data)
    except PydanticValidationError as e:
        raise ParseError(f"Response is not a list of 2-5 strings: {e}", provider=provider)
