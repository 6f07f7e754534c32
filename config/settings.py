"""Estimator configuration settings.

Loads configuration from environment variables with sensible defaults.
A local .env file is honoured for development overrides.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

from models.line_item import ApplyMode

# Load .env file for local overrides (export directory, default apply mode, etc.)
load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Project identity
    app_name: str = field(
        default_factory=lambda: os.getenv("ESTIMATE_APP_NAME", "Rail Vihar Addition Estimate")
    )

    # Export Configuration
    export_prefix: str = field(
        default_factory=lambda: os.getenv("ESTIMATE_EXPORT_PREFIX", "Rail-Vihar-Addition-Estimate")
    )
    export_dir: str = field(default_factory=lambda: os.getenv("ESTIMATE_EXPORT_DIR", "."))

    # Soft-cost base selection for a fresh session
    apply_mode: str = field(
        default_factory=lambda: os.getenv("ESTIMATE_APPLY_MODE", ApplyMode.HARD_ONLY.value).upper()
    )

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    def validate(self) -> None:
        """Validate settings values.

        Raises:
            ValueError: If the configured apply mode is unknown.
        """
        valid = {mode.value for mode in ApplyMode}
        if self.apply_mode not in valid:
            raise ValueError(
                f"ESTIMATE_APPLY_MODE must be one of {sorted(valid)}, got {self.apply_mode!r}"
            )

    @property
    def default_apply_mode(self) -> ApplyMode:
        """Configured apply mode as an enum member."""
        self.validate()
        return ApplyMode(self.apply_mode)


# Singleton settings instance
settings = Settings()
