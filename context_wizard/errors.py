# context_wizard/errors.py
"""Custom error types for the context analysis wizard."""


class WizardError(Exception):
    """Base error for wizard operations."""
    pass


class ValidationError(WizardError):
    """Profile is incomplete; the wizard may not leave the profile screen."""

    def __init__(self, message: str, missing: list = None):
        super().__init__(message)
        self.missing = missing or []


class TransitionError(WizardError):
    """Requested step change is not a legal transition."""

    def __init__(self, message: str, from_step=None, to_step=None):
        super().__init__(message)
        self.from_step = from_step
        self.to_step = to_step


class ServiceError(WizardError):
    """The generative AI call failed."""

    def __init__(self, message: str, provider: str = None):
        super().__init__(message)
        self.provider = provider


class ParseError(ServiceError):
    """The AI response did not match the declared schema."""

    def __init__(self, message: str, provider: str = None, raw: str = None):
        super().__init__(message, provider=provider)
        self.raw = raw


class ExportError(WizardError):
    """Rendering the report to PDF failed."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path
