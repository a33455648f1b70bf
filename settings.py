import os
import json
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger("bookstore-lambda")

class AppConfig:
    """Application configuration management"""

    # Default configuration values
    _defaults = {
        "table_name": "Books",
        "aws_region": None,  # Falls back to the boto3 default chain
        "dynamodb_endpoint_url": None,  # e.g. http://localhost:8000 for DynamoDB Local
        "storage_backend": "dynamodb",
        "strict_isbn": True,
        "log_level": "INFO",
    }

    # Cache for config values
    _config_cache: Optional[Dict[str, Any]] = None

    @classmethod
    def get_value(cls, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.
        Checks environment variables first, then config file, then defaults.
        """
        # Check environment variables (with BOOKSTORE_ prefix)
        env_key = f"BOOKSTORE_{key.upper()}"
        if env_key in os.environ:
            return os.environ[env_key]

        # Load config if not already loaded
        if cls._config_cache is None:
            cls._load_config()

        # Check config cache
        if key in cls._config_cache:
            return cls._config_cache[key]

        # Check defaults
        if key in cls._defaults:
            return cls._defaults[key]

        # Return provided default or None
        return default

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """Get a flag; strings from the environment count as true for true/1/yes."""
        value = cls.get_value(key, default)
        if isinstance(value, str):
            return value.strip().lower() in ("true", "1", "yes")
        return bool(value)

    @classmethod
    def get_log_level(cls) -> int:
        """Numeric level for the log_level setting; unknown names fall back to INFO."""
        name = str(cls.get_value("log_level", "INFO")).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            logger.warning(f"Unknown log_level {name!r}, using INFO")
            return logging.INFO
        return level

    @classmethod
    def reset(cls) -> None:
        """Drop the cached config file contents so the next lookup reloads it."""
        cls._config_cache = None

    @classmethod
    def _load_config(cls) -> None:
        """Load configuration from file"""
        cls._config_cache = {}

        # Determine config file location
        config_path = os.environ.get(
            "BOOKSTORE_CONFIG_PATH",
            "/opt/python/config/app_config.json"
        )

        # For local development, check current directory
        if not os.path.exists(config_path):
            local_config = "./config.json"
            if os.path.exists(local_config):
                config_path = local_config

        # Try to load config file
        try:
            if os.path.exists(config_path):
                with open(config_path, 'r') as f:
                    cls._config_cache = json.load(f)
                logger.info(f"Loaded configuration from {config_path}")
            else:
                logger.info("No configuration file found, using defaults")
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {str(e)}")
            # Continue with empty config and defaults
