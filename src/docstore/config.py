import os
from pathlib import Path
from typing import Dict, Any, Tuple
import logging

from .utils import load_settings

DEFAULTS: Dict[str, Any] = {
    'db_uri': 'mongodb://localhost:27017',
    'db_name': 'docstore-demo',
    'collection': 'tasks',
    'timeout_ms': 5000,
    'log_level': 'info',
}

# environment variable -> config key
ENV_OVERRIDES = {
    'DOCSTORE_DB_URI': 'db_uri',
    'DOCSTORE_DB_NAME': 'db_name',
    'DOCSTORE_COLLECTION': 'collection',
}


class Config:
    """Static configuration class - no instances, only class methods"""
    _config: Dict[str, Any] = dict(DEFAULTS)

    @classmethod
    def initialize(cls, config_file: str = "") -> Dict[str, Any]:
        """Initialize the config with values from config file, then apply environment overrides"""
        config = dict(DEFAULTS)
        config.update(cls._load_system_config(config_file))
        for env_name, key in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                config[key] = value
        cls._config = config
        return cls._config

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get a configuration value by key"""
        return cls._config.get(key, default)

    @classmethod
    def get_db_params(cls) -> Tuple[str, str, str]:
        """Get (connection string, database name, collection name) from config data"""
        return (
            cls._config.get('db_uri', DEFAULTS['db_uri']),
            cls._config.get('db_name', DEFAULTS['db_name']),
            cls._config.get('collection', DEFAULTS['collection'])
        )

    @classmethod
    def timeout_ms(cls) -> int:
        """Server selection timeout handed to the driver, in milliseconds"""
        try:
            return int(cls._config.get('timeout_ms', DEFAULTS['timeout_ms']))
        except (TypeError, ValueError):
            logging.warning(f"Invalid timeout_ms {cls._config.get('timeout_ms')!r}, using {DEFAULTS['timeout_ms']}")
            return DEFAULTS['timeout_ms']

    @classmethod
    def log_level(cls) -> int:
        """Logging level from the 'log_level' name (debug, info, warning, ...)"""
        name = str(cls._config.get('log_level', DEFAULTS['log_level'])).upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def _load_system_config(cls, config_file: str) -> Dict[str, Any]:
        """
        Load and return the configuration from a JSON file.
        If the file is not found, return an empty dict so defaults apply.
        """
        if len(config_file) > 0:
            config_path = Path(config_file)
            if config_path.exists():
                return load_settings(config_path)
        logging.warning(f'Configuration file "{config_file}" not found. Using defaults.')
        return {}
