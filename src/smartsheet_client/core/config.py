# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "https://api.smartsheet.com/2.0"


def _env_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str) -> Optional[float]:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class SmartsheetConfig:
    """
    Configuration settings for Smartsheet client operations.

    :param base_url: API root, for example ``"https://api.smartsheet.com/2.0"``
        (or the ``smartsheet.eu`` region). Trailing slash is removed by the client.
    :type base_url: str
    :param http_retries: Extra attempts after a connection-level failure (default: 0, a single round trip).
        HTTP error statuses are never retried.
    :type http_retries: int or None
    :param http_backoff: Base delay in seconds between connection retries (default: 0.5).
    :type http_backoff: float or None
    :param http_timeout: Request timeout in seconds (default: method-dependent).
    :type http_timeout: float or None
    :param user_agent: Value for the ``User-Agent`` header.
    :type user_agent: str or None
    :param assume_user: Email sent as ``Assume-User`` so an admin token can act as another user.
    :type assume_user: str or None
    """

    base_url: str = DEFAULT_BASE_URL

    # HTTP tuning
    http_retries: Optional[int] = None
    http_backoff: Optional[float] = None
    http_timeout: Optional[float] = None

    user_agent: Optional[str] = None
    assume_user: Optional[str] = None

    @classmethod
    def from_env(cls) -> "SmartsheetConfig":
        """
        Create a configuration from ``SMARTSHEET_*`` environment variables.

        Reads ``SMARTSHEET_API_BASE``, ``SMARTSHEET_HTTP_RETRIES``, ``SMARTSHEET_HTTP_TIMEOUT``
        and ``SMARTSHEET_ASSUME_USER``. Unset variables keep their defaults.

        :return: Configuration instance.
        :rtype: ~smartsheet_client.core.config.SmartsheetConfig
        :raises ValueError: If a numeric variable cannot be parsed.
        """
        return cls(
            base_url=os.environ.get("SMARTSHEET_API_BASE") or DEFAULT_BASE_URL,
            http_retries=_env_int("SMARTSHEET_HTTP_RETRIES"),
            http_backoff=None,  # Will default to 0.5 in _HttpClient
            http_timeout=_env_float("SMARTSHEET_HTTP_TIMEOUT"),
            assume_user=os.environ.get("SMARTSHEET_ASSUME_USER") or None,
        )
