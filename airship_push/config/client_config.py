#!/usr/bin/env python3
"""API client configuration

Credentials and transport settings for the push/email send API.
"""
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://go.urbanairship.com"


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class ClientConfig:
    """API client settings"""

    # ===========================================
    # Credentials
    # ===========================================
    app_key: Optional[str] = None
    master_secret: Optional[str] = None
    bearer_token: Optional[str] = None

    # ===========================================
    # Transport
    # ===========================================
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    max_retries: int = 3

    @classmethod
    def from_env(cls) -> 'ClientConfig':
        """Load client configuration from environment variables"""
        return cls(
            app_key=os.getenv("AIRSHIP_APP_KEY"),
            master_secret=os.getenv("AIRSHIP_MASTER_SECRET"),
            bearer_token=os.getenv("AIRSHIP_BEARER_TOKEN"),
            base_url=os.getenv("AIRSHIP_BASE_URL", DEFAULT_BASE_URL),
            timeout=_float(os.getenv("AIRSHIP_TIMEOUT", "30"), 30.0),
            max_retries=_int(os.getenv("AIRSHIP_MAX_RETRIES", "3"), 3),
        )
