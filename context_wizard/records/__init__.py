"""Analysis records: profile, factors and strategies."""

from context_wizard.records.store import RecordStore
from context_wizard.records.types import (
    AnalysisFactor,
    Category,
    Framework,
    ImpactLevel,
    PestleData,
    Profile,
    SwotData,
    TowsCategory,
    TowsStrategy,
)

__all__ = [
    "RecordStore",
    "AnalysisFactor",
    "Category",
    "Framework",
    "ImpactLevel",
    "PestleData",
    "Profile",
    "SwotData",
    "TowsCategory",
    "TowsStrategy",
]
