"""
Centralized configuration management for SexSec.

This module provides a single source of truth for the library defaults and
the CLI settings, read from the environment (and a .env file when present).
"""

import os
from typing import Optional
from dataclasses import dataclass, field
import logging
from dotenv import load_dotenv

from utils.errors import ConfigurationError

# Load environment variables
load_dotenv()

LOGGER = logging.getLogger(__name__)


@dataclass
class CryptographyConfig:
    """Cryptography defaults applied to every new configuration state."""
    algorithm: str = os.getenv("SEXSEC_ALGORITHM", "aes-256-cbc")
    encoding: str = os.getenv("SEXSEC_ENCODING", "hex")
    iv_length: int = int(os.getenv("SEXSEC_IV_LENGTH", "16"))  # 128 bits
    chunk_size: int = int(os.getenv("SEXSEC_CHUNK_SIZE", "65536"))  # 64 KB


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: str = os.getenv("LOG_FILE", "")
    max_file_size: int = 10  # MB
    max_files: int = 3


@dataclass
class AppConfig:
    """Main application configuration."""
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Only read by the CLI; the library never looks at it
    passphrase: str = os.getenv("SEXSEC_PASSPHRASE", "")

    # Sub-configurations
    cryptography: CryptographyConfig = field(default_factory=CryptographyConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self, required_fields: Optional[list] = None) -> None:
        """
        Validate that all required configuration is present.

        Args:
            required_fields: List of required fields to validate. If None,
                validates the cryptography defaults only.

        Raises:
            ConfigurationError: If a required field is empty or a numeric
                setting is out of range
        """
        missing_fields = []
        for name in required_fields or []:
            if not getattr(self, name):
                missing_fields.append(name)

        if missing_fields:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing_fields)}")

        if self.cryptography.iv_length <= 0:
            raise ConfigurationError(
                f"SEXSEC_IV_LENGTH must be positive, got {self.cryptography.iv_length}")
        if self.cryptography.chunk_size <= 0:
            raise ConfigurationError(
                f"SEXSEC_CHUNK_SIZE must be positive, got {self.cryptography.chunk_size}")


# Global configuration instance
config = AppConfig()

# Note: Configuration validation is not run automatically on import
# to allow for testing environments. Use config.validate() explicitly.
