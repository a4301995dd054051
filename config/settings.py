"""Configuration management for CuentaBank."""
import logging
import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Configuration settings for CuentaBank.

    Values come from the environment (optionally populated from a .env file
    by the entry script) and fall back to the defaults below.
    """

    # Bank shown by the demo
    bank_name: str = 'Banco Estado'

    # Logging Configuration
    log_file: str = 'cuentabank.log'
    log_level: str = 'INFO'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If CUENTABANK_LOG_LEVEL is not a known logging level.
        """
        log_level = os.getenv('CUENTABANK_LOG_LEVEL', cls.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Unknown log level: {log_level}")

        return cls(
            bank_name=os.getenv('CUENTABANK_BANK_NAME', cls.bank_name),
            log_file=os.getenv('CUENTABANK_LOG_FILE', cls.log_file),
            log_level=log_level,
        )
