# tests/test_errors.py
"""Tests for wizard error types."""


def test_validation_error_carries_missing_fields():
    from context_wizard.errors import ValidationError, WizardError

    error = ValidationError("Profile incomplete", missing=["unit_name"])

    assert isinstance(error, WizardError)
    assert error.missing == ["unit_name"]


def test_parse_error_is_service_error():
    from context_wizard.errors import ParseError, ServiceError

    error = ParseError("bad json", provider="openai", raw="nope")

    assert isinstance(error, ServiceError)
    assert error.provider == "openai"
    assert error.raw == "nope"
    assert str(error) == "bad json"


def test_export_error_path():
    from context_wizard.errors import ExportError

    error = ExportError("Failed to write PDF", path="/tmp/x.pdf")

    assert error.path == "/tmp/x.pdf"


def test_errors_exported_from_package():
    import context_wizard

    assert context_wizard.TransitionError.__name__ == "TransitionError"
    assert context_wizard.__version__
