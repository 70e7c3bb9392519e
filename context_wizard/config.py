# context_wizard/config.py
"""Configuration for the context analysis wizard."""

import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class WizardConfig:
    """Configuration for a wizard session."""

    # AI provider
    provider: str = "openai"
    model: Optional[str] = None  # None keeps the provider default

    # Where exported PDFs are written
    output_dir: Path = field(default_factory=Path.cwd)

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "WizardConfig":
        """Create configuration from environment variables."""
        output_dir_str = os.environ.get("CONTEXT_WIZARD_OUTPUT_DIR")
        return cls(
            provider=os.environ.get("CONTEXT_WIZARD_PROVIDER", "openai").lower(),
            model=os.environ.get("CONTEXT_WIZARD_MODEL") or None,
            output_dir=Path(output_dir_str) if output_dir_str else Path.cwd(),
            log_level=os.environ.get("CONTEXT_WIZARD_LOG_LEVEL", "WARNING").upper(),
        )


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Log level name

    Returns:
        The configured "context_wizard" logger
    """
    logger = logging.getLogger("context_wizard")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    # stderr keeps the wizard screens on stdout clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt='[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)
    return logger
