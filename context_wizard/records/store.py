# context_wizard/records/store.py
"""Record store for SWOT, PESTLE and TOWS items."""

import logging
from dataclasses import replace
from typing import Optional, TYPE_CHECKING

from context_wizard.records.types import (
    AnalysisFactor,
    Category,
    PESTLE_CATEGORIES,
    PestleData,
    SWOT_CATEGORIES,
    SwotData,
    TowsCategory,
    TowsStrategy,
    container_for,
    parse_field_value,
)

if TYPE_CHECKING:
    from context_wizard.agents.schemas import InitialDraft, TowsDraft

logger = logging.getLogger(__name__)

# Manual entries made before the first draft start here
INITIAL_COUNTER = 100

FACTOR_FIELDS = {"text", "impact", "priority"}
TOWS_FIELDS = {"impact", "priority"}


class RecordStore:
    """
    Editable lists of analysis items.

    SWOT and PESTLE factors share one id counter. TOWS strategies are
    numbered per generation batch.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Discard every list and restart the id counter."""
        self.swot = SwotData()
        self.pestle = PestleData()
        self.tows: list[TowsStrategy] = []
        self._next_id = INITIAL_COUNTER

    def _take_id(self) -> int:
        value = self._next_id
        self._next_id += 1
        return value

    # Read helpers

    def factors(self, category: Category) -> list[AnalysisFactor]:
        container = container_for(category, self.swot, self.pestle)
        return getattr(container, category.value)

    def texts(self, category: Category) -> list[str]:
        return [factor.text for factor in self.factors(category)]

    def _set_factors(self, category: Category, factors: list[AnalysisFactor]) -> None:
        container = container_for(category, self.swot, self.pestle)
        setattr(container, category.value, factors)

    # Manual editing

    def add_factor(self, category: Category, text: str) -> Optional[AnalysisFactor]:
        """Append a manually entered factor. Blank text is ignored."""
        text = (text or "").strip()
        if not text:
            return None

        factor = AnalysisFactor(
            id=self._take_id(),
            text=text,
            is_external=category.is_external,
        )
        self._set_factors(category, [*self.factors(category), factor])
        return factor

    def update_factor(self, category: Category, factor_id: int, field: str, value) -> bool:
        """Replace one field of a factor. Returns False if the id is unknown."""
        if field not in FACTOR_FIELDS:
            raise ValueError(f"Cannot update factor field: {field}")

        factors = self.factors(category)
        for index, factor in enumerate(factors):
            if factor.id == factor_id:
                break
        else:
            return False

        # Values are only checked against an existing entry
        updated = list(factors)
        updated[index] = replace(factor, **{field: parse_field_value(field, value)})
        self._set_factors(category, updated)
        return True

    def delete_factor(self, category: Category, factor_id: int) -> bool:
        """Remove a factor. Returns False if the id is unknown."""
        current = self.factors(category)
        remaining = [f for f in current if f.id != factor_id]
        if len(remaining) == len(current):
            return False
        self._set_factors(category, remaining)
        return True

    def update_tows_strategy(self, strategy_id: int, field: str, value) -> bool:
        """Replace the impact or priority of a TOWS strategy."""
        if field not in TOWS_FIELDS:
            raise ValueError(f"Cannot update strategy field: {field}")

        for index, strategy in enumerate(self.tows):
            if strategy.id == strategy_id:
                break
        else:
            return False

        updated = list(self.tows)
        updated[index] = replace(strategy, **{field: parse_field_value(field, value)})
        self.tows = updated
        return True

    # Generated content

    def load_initial_draft(self, draft: "InitialDraft") -> None:
        """Replace SWOT and PESTLE with a freshly generated draft."""
        self._next_id = 0
        swot = SwotData()
        pestle = PestleData()
        for category in (*SWOT_CATEGORIES, *PESTLE_CATEGORIES):
            factors = [
                AnalysisFactor(id=self._take_id(), text=text, is_external=category.is_external)
                for text in draft.texts_for(category)
            ]
            setattr(container_for(category, swot, pestle), category.value, factors)

        self.swot = swot
        self.pestle = pestle
        logger.debug(f"Loaded initial draft, next id {self._next_id}")

    def append_generated(self, category: Category, texts: list[str]) -> list[AnalysisFactor]:
        """Append AI-generated factors to one category."""
        # Generated additions are always flagged external, whatever the category
        new_factors = [
            AnalysisFactor(id=self._take_id(), text=text, is_external=True)
            for text in texts
        ]
        self._set_factors(category, [*self.factors(category), *new_factors])
        return new_factors

    def replace_tows(self, draft: "TowsDraft") -> list[TowsStrategy]:
        """Replace the TOWS list with a freshly generated batch."""
        batch_id = 0
        strategies = []
        for tows_category in TowsCategory:
            for text in draft.texts_for(tows_category):
                strategies.append(TowsStrategy(id=batch_id, category=tows_category, text=text))
                batch_id += 1

        self.tows = strategies
        return strategies
