"""Context Wizard - AI-assisted ISO 9001 context analysis."""

from context_wizard.errors import (
    WizardError,
    ValidationError,
    TransitionError,
    ServiceError,
    ParseError,
    ExportError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "WizardError",
    "ValidationError",
    "TransitionError",
    "ServiceError",
    "ParseError",
    "ExportError",
]
