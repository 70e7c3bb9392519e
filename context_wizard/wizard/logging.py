"""Structured logging for wizard events."""

import json
import logging
from datetime import datetime, timezone


class WizardLogger:
    """Structured JSON logger for wizard events."""

    def __init__(self, name: str = "context_wizard.events"):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, event: str, **kwargs):
        """Log a structured event."""
        data = {
            "event": event,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **kwargs
        }
        self.logger.log(level, json.dumps(data, ensure_ascii=False))

    def step_transition(self, from_step: str, to_step: str):
        """Log a step transition."""
        self._log(
            logging.INFO,
            "step_transition",
            from_step=from_step,
            to_step=to_step
        )

    def generation_started(self, operation: str, category: str = None):
        """Log the start of an AI drafting call."""
        self._log(
            logging.INFO,
            "generation_started",
            operation=operation,
            category=category
        )

    def generation_complete(self, operation: str, item_count: int, duration_seconds: float):
        """Log a successful AI drafting call."""
        self._log(
            logging.INFO,
            "generation_complete",
            operation=operation,
            item_count=item_count,
            duration_seconds=round(duration_seconds, 2)
        )

    def export_complete(self, path: str):
        """Log a written PDF."""
        self._log(logging.INFO, "export_complete", path=path)

    def error(self, operation: str, error_type: str, message: str):
        """Log an error."""
        self._log(
            logging.ERROR,
            "error",
            operation=operation,
            error_type=error_type,
            message=message
        )

    def restarted(self):
        """Log a full restart."""
        self._log(logging.INFO, "restarted")
