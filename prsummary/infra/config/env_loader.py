"""Environment variable loader with .env file support"""

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class EnvLoader:
    """Load environment variables from a .env file"""

    _loaded = False

    @classmethod
    def load(cls, start_dir: Optional[str] = None) -> Optional[Path]:
        """Load the nearest .env file, searching upwards to the git root"""
        if cls._loaded:
            return None

        env_path = cls.find_env_file(Path(start_dir) if start_dir else Path.cwd())
        cls._loaded = True

        if env_path is not None:
            cls._load_env_file(env_path)
        return env_path

    @classmethod
    def reset(cls) -> None:
        """Allow the next load() call to read a .env file again"""
        cls._loaded = False

    @staticmethod
    def find_env_file(start: Path) -> Optional[Path]:
        """Return the first .env between start and the enclosing git root"""
        for parent in [start] + list(start.parents):
            potential_env = parent / '.env'
            if potential_env.is_file():
                return potential_env

            # Stop at git root
            if (parent / '.git').exists():
                break
        return None

    @classmethod
    def _load_env_file(cls, env_path: Path) -> None:
        """Parse KEY=VALUE lines into os.environ without overriding real variables"""
        try:
            with open(env_path, 'r', encoding='utf-8') as f:
                lines = f.readlines()
        except OSError as e:
            logger.warning("Failed to read %s: %s", env_path, e)
            return

        for line in lines:
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith('#') or '=' not in line:
                continue

            key, value = line.split('=', 1)
            key = key.strip()
            if key.startswith('export '):
                key = key[len('export '):].strip()
            value = value.strip()

            if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
                value = value[1:-1]

            if key and key not in os.environ:
                os.environ[key] = value
                logger.debug("Loaded from .env: %s", key)
