"""Wizard state machine package."""

from context_wizard.wizard.controller import WizardController, WizardState
from context_wizard.wizard.states import WizardStep, can_transition

__all__ = ["WizardController", "WizardState", "WizardStep", "can_transition"]
