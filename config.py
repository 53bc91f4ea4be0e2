"""
Configuration management for the joke fetcher.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import json

from jokes.client import JOKE_API_URL
from jokes.controller import MAX_JOKES


@dataclass
class Config:
    """Application configuration."""

    # Where config/config.json and .env are looked up
    project_root: str = "."

    # Joke API
    joke_api_url: str = JOKE_API_URL
    request_timeout: float = 10.0

    # Jokes allowed per session
    max_jokes: int = MAX_JOKES

    # Display
    show_banner: bool = True

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """Load configuration from file and environment."""
        config = cls()

        # Load from JSON file if exists
        if config_path is None:
            config_path = os.path.join(config.project_root, "config", "config.json")

        if Path(config_path).exists():
            with open(config_path) as f:
                data = json.load(f)
                for key, value in data.items():
                    if hasattr(config, key):
                        setattr(config, key, value)

        # Load from .env file if present
        env_path = os.path.join(config.project_root, ".env")
        if Path(env_path).exists():
            config._load_env_file(env_path)

        # Override with environment variables
        config.joke_api_url = os.getenv("JOKE_API_URL", config.joke_api_url)
        config.max_jokes = int(os.getenv("JOKE_LIMIT", config.max_jokes))
        config.request_timeout = float(
            os.getenv("JOKE_TIMEOUT", config.request_timeout)
        )

        return config

    def _load_env_file(self, path: str):
        """Load environment variables from .env file."""
        with open(path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#') and '=' in line:
                    key, value = line.split('=', 1)
                    os.environ[key.strip()] = value.strip()

    def save(self, config_path: Optional[str] = None):
        """Save configuration to file."""
        if config_path is None:
            config_path = os.path.join(self.project_root, "config", "config.json")

        Path(config_path).parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.__dict__, f, indent=2)
