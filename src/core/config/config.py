"""
Stepline process configuration.

Every setting is read once from the environment (a ``.env`` file is honoured)
when this module is imported. The steps ledger itself has no tunables; these
values only cover the Discord connection and the logging pipeline.

Environment Variables
---------------------
Required (for running the bot):
- DISCORD_TOKEN: Bot authentication token

Optional (with defaults):
- ENVIRONMENT: development | testing | staging | production (default: development)
- DEBUG: Debug mode flag (default: False)
- LOG_LEVEL: Logging level (default: INFO)
- LOG_JSON: Force JSON console logs (default: production only)
- LOG_COLORS: Colored console logs in development (default: True)
- LOG_QUEUE_SIZE: Max buffered log records before dropping (default: 10000, min 100)
- LOGS_DIR: Directory for the rotating log file (default: <root>/logs)

The command prefix is not configurable: the parser only understands "/".
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_TRUE_WORDS = frozenset({"true", "yes", "1", "on"})
_FALSE_WORDS = frozenset({"false", "no", "0", "off"})
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(Enum):
    """Deployment environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, value: str) -> "Environment":
        """
        Case- and whitespace-insensitive lookup; unknown names mean development.

        >>> Environment.from_string(" Production ") == Environment.PRODUCTION
        True
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            # Structured logger is not initialized yet during bootstrap
            logging.warning(f"Unknown environment '{value}', defaulting to development")
            return cls.DEVELOPMENT


class Config:
    """
    Class-level settings for the Stepline bot. Never instantiated.

    >>> if Config.is_production():
    ...     logger.info("Running in production mode")
    """

    _validated: bool = False

    DISCORD_TOKEN: str = ""

    ENVIRONMENT: str = Environment.DEVELOPMENT.value
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_JSON: Optional[bool] = None
    LOG_COLORS: bool = True
    LOG_QUEUE_SIZE: int = 10_000

    PROJECT_ROOT = Path(__file__).resolve().parents[3]
    LOGS_DIR = PROJECT_ROOT / "logs"

    BOT_NAME: str = "Stepline"
    BOT_VERSION: str = "1.0.0"
    BOT_DESCRIPTION: str = "Family steps challenge: daily, weekly and monthly leaderboards"

    # =========================================================================
    # Environment readers
    # =========================================================================

    @staticmethod
    def _read_bool(key: str) -> Optional[bool]:
        """True/False for a recognised word, None when unset or unreadable."""
        raw = os.getenv(key)
        if raw is None:
            return None
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
        logging.warning(f"{key}='{raw}' is not a boolean, ignoring it")
        return None

    @classmethod
    def _read_flag(cls, key: str, default: bool) -> bool:
        value = cls._read_bool(key)
        return default if value is None else value

    @staticmethod
    def _read_int(key: str, default: int, min_val: Optional[int] = None) -> int:
        """Integer setting; unparsable or too-small values keep the default."""
        raw = os.getenv(key)
        if raw is None:
            return default
        try:
            value = int(raw)
        except ValueError:
            logging.warning(f"{key}='{raw}' is not an integer, using {default}")
            return default
        if min_val is not None and value < min_val:
            logging.warning(f"{key}={value} is below {min_val}, using {default}")
            return default
        return value

    # =========================================================================
    # Loading & validation
    # =========================================================================

    @classmethod
    def load(cls) -> None:
        """Re-read every setting from the current environment."""
        cls.DISCORD_TOKEN = os.getenv("DISCORD_TOKEN", "")

        cls.ENVIRONMENT = os.getenv("ENVIRONMENT", Environment.DEVELOPMENT.value)
        cls.DEBUG = cls._read_flag("DEBUG", False)
        cls.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
        cls.LOG_JSON = cls._read_bool("LOG_JSON")
        cls.LOG_COLORS = cls._read_flag("LOG_COLORS", True)
        cls.LOG_QUEUE_SIZE = cls._read_int("LOG_QUEUE_SIZE", 10_000, min_val=100)

        logs_dir = os.getenv("LOGS_DIR", "")
        cls.LOGS_DIR = Path(logs_dir) if logs_dir else cls.PROJECT_ROOT / "logs"

    @classmethod
    def validate(cls) -> None:
        """
        Load and sanity-check the settings. Runs once per process.

        Problems are logged as warnings everywhere except production, where
        they are raised.

        Raises
        ------
        ValueError:
            If DISCORD_TOKEN is missing in production.
        """
        if cls._validated:
            return

        logger = logging.getLogger(__name__)

        try:
            cls.load()

            cls.ENVIRONMENT = Environment.from_string(cls.ENVIRONMENT).value

            if cls.LOG_LEVEL.upper() not in _LOG_LEVELS:
                logger.warning(f"Invalid LOG_LEVEL '{cls.LOG_LEVEL}', using INFO")
                cls.LOG_LEVEL = "INFO"

            cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)

            if not cls.DISCORD_TOKEN:
                raise ValueError("DISCORD_TOKEN environment variable is required")

            if cls.is_production() and cls.DEBUG:
                logger.warning("DEBUG mode enabled in production!")

            cls._validated = True
            logger.info(
                f"Configuration loaded: environment={cls.ENVIRONMENT} "
                f"log_level={cls.LOG_LEVEL} debug={cls.DEBUG}"
            )

        except Exception as e:
            logger.warning(f"Config validation warning (safe for tests): {e}")
            if cls.is_production():
                logger.error("Configuration validation failed in production!")
                raise

    @classmethod
    def is_production(cls) -> bool:
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_testing(cls) -> bool:
        return cls.ENVIRONMENT.lower() == "testing"


Config.validate()
