"""Configuration management for the GuGoTik SDK."""

import json
import os
import shutil
from pathlib import Path
from typing import Optional

from gugotik.constants import CHUNK_SIZE, DEFAULT_CONFIG_PATH, DEFAULT_ENDPOINT


class Config:
    """Manages SDK configuration stored in a JSON file."""

    DEFAULT_CONFIG = {
        "endpoint": os.environ.get("GUGOTIK_ENDPOINT", DEFAULT_ENDPOINT),
        "timeout": 30,
        "max_retries": 3,
        "retry_backoff_multiplier": 2,
        "chunk_size": int(os.environ.get("GUGOTIK_CHUNK_SIZE", str(CHUNK_SIZE))),
        "self_signed": False,
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (defaults to ~/.gugotik/config.json)
        """
        self.config_path = config_path or Path(DEFAULT_CONFIG_PATH).expanduser()
        self.data = self._load()

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            import tempfile
            self.config_path = Path(tempfile.gettempdir()) / '.gugotik' / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError):
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError:
                    pass
                return self.DEFAULT_CONFIG.copy()
        else:
            config = self.DEFAULT_CONFIG.copy()
            try:
                with open(self.config_path, 'w') as f:
                    json.dump(config, f, indent=2)
            except IOError:
                pass
            return config

    def save(self) -> None:
        """Save current configuration to file."""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
        except IOError:
            pass

    def get_endpoint(self) -> str:
        """
        Get backend base URL.

        Returns:
            Endpoint without trailing slash (e.g., "http://localhost:37000")
        """
        return str(self.data.get('endpoint', DEFAULT_ENDPOINT)).rstrip('/')

    def set_endpoint(self, endpoint: str) -> None:
        """Set backend base URL and save to file."""
        self.data['endpoint'] = endpoint
        self.save()

    def get_timeout(self) -> int:
        """
        Get request timeout in seconds.

        Returns:
            Timeout value in seconds
        """
        return self.data.get('timeout', 30)

    def get_retry_config(self) -> dict:
        """
        Get retry configuration for plain API calls.

        Returns:
            Dictionary with 'max_retries' and 'retry_backoff_multiplier'
        """
        return {
            'max_retries': self.data.get('max_retries', 3),
            'retry_backoff_multiplier': self.data.get('retry_backoff_multiplier', 2),
        }

    def get_chunk_size(self) -> int:
        """
        Get default upload chunk size in bytes.

        Returns:
            Chunk size (5 MiB unless overridden)
        """
        return int(self.data.get('chunk_size', CHUNK_SIZE))

    def is_self_signed(self) -> bool:
        """Whether TLS certificate verification should be skipped."""
        return bool(self.data.get('self_signed', False))

    def get_token(self) -> Optional[str]:
        """
        Get stored auth token.

        Returns:
            Token string or None if not logged in
        """
        return self.data.get('token')

    def get_user_id(self) -> Optional[int]:
        """Get the logged-in user's ID, or None."""
        return self.data.get('user_id')

    def set_session(self, user_id: int, token: str) -> None:
        """
        Store the logged-in user's ID and token together.

        Args:
            user_id: User ID returned by login/register
            token: Token returned by login/register
        """
        self.data['user_id'] = user_id
        self.data['token'] = token
        self.save()

    def clear_session(self) -> None:
        """Forget the stored user ID and token."""
        self.data.pop('user_id', None)
        self.data.pop('token', None)
        self.save()
