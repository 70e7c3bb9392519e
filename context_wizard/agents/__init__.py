"""AI drafting for the context analysis wizard."""

from context_wizard.agents.drafting import DraftingGateway
from context_wizard.agents.schemas import InitialDraft, TowsDraft

__all__ = ["DraftingGateway", "InitialDraft", "TowsDraft"]
