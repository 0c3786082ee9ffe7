"""
EnvHelper - Read renderer settings from the environment
Optionally seeded from a .env file
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any, Union
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable reader with .env file support

    Usage:
        # Read
        root = EnvHelper.get('RENDERLAYOUT_TEMPLATES_PATH', 'templates')

        # Flags
        debug = EnvHelper.get_bool('RENDERLAYOUT_DEBUG', False)

        # Load
        EnvHelper.load('/path/to/.env')
    """

    TRUTHY = ('true', '1', 'yes', 'on')

    _lock = threading.Lock()
    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def load(cls, env_path: Union[str, Path, None] = None, override: bool = False) -> bool:
        """
        Load .env file into environment

        Args:
            env_path: Path to .env file (defaults to .env in the working directory)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a file was found and loaded
        """
        with cls._lock:
            if env_path is not None:
                cls._env_path = Path(env_path)
            if cls._env_path is None:
                cls._env_path = Path(os.getcwd()) / '.env'

            cls._loaded = True
            if not cls._env_path.exists():
                return False

            load_dotenv(cls._env_path, override=override)
            return True

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Example:
            layout = EnvHelper.get('RENDERLAYOUT_LAYOUT', 'index')
        """
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        """
        Get boolean environment variable

        Example:
            disable_cache = EnvHelper.get_bool('RENDERLAYOUT_DISABLE_CACHE')
        """
        value = cls.get(key)
        if value is None:
            return default

        return value.strip().lower() in cls.TRUTHY

    @classmethod
    def reset(cls):
        """Forget the loaded .env path so the next read loads again"""
        with cls._lock:
            cls._env_path = None
            cls._loaded = False
