"""Configuration management for the field derivation engine."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    # Fall back to template for defaults
    template_path = Path(__file__).parent.parent / ".env.template"
    if template_path.exists():
        load_dotenv(template_path)


class Config:
    """Engine configuration."""

    # Zone applied to date-times that carry no offset (e.g. "America/Chicago").
    # Unset means such values stay naive and only compare with each other.
    DEFAULT_ZONE_ID: Optional[str] = os.getenv("HL7_DERIVE_DEFAULT_ZONE_ID") or None

    # Logging
    LOG_LEVEL: str = os.getenv("HL7_DERIVE_LOG_LEVEL", "INFO").upper()

    # Command line literal standing for an absent value
    NULL_TOKEN: str = os.getenv("HL7_DERIVE_NULL_TOKEN", "NULL")

    @classmethod
    def has_default_zone(cls) -> bool:
        """Check if a default zone id is configured."""
        return bool(cls.DEFAULT_ZONE_ID)


config = Config()
