"""Wizard step definitions and transitions."""

from enum import Enum


class WizardStep(Enum):
    """Screens of the wizard. Step 3 does not exist."""

    PROFILE = 1
    VALIDATE_ANALYSIS = 2
    VALIDATE_TOWS = 4
    REPORT = 5


# Valid step transitions
TRANSITIONS = {
    WizardStep.PROFILE: {WizardStep.VALIDATE_ANALYSIS},
    WizardStep.VALIDATE_ANALYSIS: {WizardStep.PROFILE, WizardStep.VALIDATE_TOWS},
    WizardStep.VALIDATE_TOWS: {WizardStep.VALIDATE_ANALYSIS, WizardStep.REPORT},
    WizardStep.REPORT: {WizardStep.VALIDATE_TOWS, WizardStep.PROFILE},  # PROFILE via restart
}

# Where "back" goes from each step
PREVIOUS_STEP = {
    WizardStep.VALIDATE_ANALYSIS: WizardStep.PROFILE,
    WizardStep.VALIDATE_TOWS: WizardStep.VALIDATE_ANALYSIS,
    WizardStep.REPORT: WizardStep.VALIDATE_TOWS,
}

STEP_TITLES = {
    WizardStep.PROFILE: "Langkah 1: Profil Organisasi",
    WizardStep.VALIDATE_ANALYSIS: "Langkah 2: Validasi Analisis SWOT & PESTLE",
    WizardStep.VALIDATE_TOWS: "Langkah 3: Validasi Strategi TOWS",
    WizardStep.REPORT: "Laporan Final: Analisis Konteks Organisasi",
}


def can_transition(from_step: WizardStep, to_step: WizardStep) -> bool:
    """Check if a step transition is valid."""
    return to_step in TRANSITIONS.get(from_step, set())
