#!/usr/bin/env python3
"""Configuration for airship_push

- client_config: API credentials and transport settings
- logging_config: Logging configuration

Settings are read from the environment. ``load_settings`` also reads a
``.env`` file first, without overriding variables that are already set.
"""
from typing import Optional

from dotenv import load_dotenv

from .client_config import ClientConfig, DEFAULT_BASE_URL
from .logging_config import LoggingConfig


def load_settings(env_file: Optional[str] = ".env") -> ClientConfig:
    """Load client settings, reading ``env_file`` into the environment first"""
    if env_file:
        load_dotenv(env_file, override=False)
    return ClientConfig.from_env()


__all__ = [
    'ClientConfig',
    'LoggingConfig',
    'DEFAULT_BASE_URL',
    'load_settings',
]
