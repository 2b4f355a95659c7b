# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Bearer-token acquisition.

Any :class:`azure.core.credentials.TokenCredential` can supply tokens (useful when
tokens come from an OAuth broker). Plain Smartsheet API access tokens are wrapped
in :class:`AccessTokenCredential`.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Optional, Union

from azure.core.credentials import AccessToken, TokenCredential

# Smartsheet tokens are not scoped; the value is passed through to get_token()
SMARTSHEET_SCOPE = "smartsheet"

# Static API tokens are long lived; report a far-future expiry (one year)
_STATIC_TOKEN_LIFETIME = 365 * 24 * 3600


class AccessTokenCredential(TokenCredential):
    """
    :class:`~azure.core.credentials.TokenCredential` over a fixed API access token.

    :param token: Smartsheet API access token (generated under Account > Personal Settings > API Access).
    :type token: str
    :raises ValueError: If ``token`` is empty.
    """

    def __init__(self, token: str) -> None:
        if not isinstance(token, str) or not token.strip():
            raise ValueError("token must be a non-empty string.")
        self._token = token.strip()

    def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        return AccessToken(self._token, int(time.time()) + _STATIC_TOKEN_LIFETIME)

    def __repr__(self) -> str:
        return "AccessTokenCredential(token=***)"


@dataclass
class _TokenPair:
    """Token container.

    :param resource: Scope the token was requested for.
    :type resource: str
    :param access_token: Bearer token value.
    :type access_token: str
    """

    resource: str
    access_token: str


class _AuthManager:
    """Token helper used by the transport to build the ``Authorization`` header."""

    def __init__(self, credential: Union[str, TokenCredential]) -> None:
        if isinstance(credential, str):
            credential = AccessTokenCredential(credential)
        if not isinstance(credential, TokenCredential):
            raise TypeError("credential must be an access token string or implement azure.core.credentials.TokenCredential.")
        self.credential: TokenCredential = credential

    def _acquire_token(self, scope: Optional[str] = None) -> _TokenPair:
        """Acquire an access token for ``scope``."""
        scope = scope or SMARTSHEET_SCOPE
        token = self.credential.get_token(scope)
        return _TokenPair(resource=scope, access_token=token.token)
