# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from typing import Optional, Union

import requests

from azure.core.credentials import TokenCredential

from .core._auth import _AuthManager
from .core.config import SmartsheetConfig
from .data._transport import _SmartsheetTransport
from .operations.groups import GroupOperations
from .operations.rows import RowOperations
from .operations.search import SearchOperations
from .operations.sheets import SheetOperations


class SmartsheetClient:
    """
    High-level client for the Smartsheet REST API.

    Operations are organized under namespaces, one per entity type:

    - ``client.groups``: group CRUD; ``client.groups.members`` adds and removes members
    - ``client.search``: account-wide and per-sheet search
    - ``client.sheets``: sheet CRUD and DataFrame export
    - ``client.rows``: row add, get, list, update, delete

    Every call is a single synchronous round trip. Failures raise
    :class:`~smartsheet_client.core.errors.HttpError`, or its subclass
    :class:`~smartsheet_client.core.errors.AuthorizationError` for 401/403.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager reuses one HTTP connection pool for
        every call and closes it on exit::

            with SmartsheetClient(access_token) as client:
                sheet = client.sheets.get(sheet_id)

    :param credential: Smartsheet API access token, or any
        :class:`~azure.core.credentials.TokenCredential` that yields one.
    :type credential: str or ~azure.core.credentials.TokenCredential
    :param config: Optional configuration for base URL, timeouts and retries.
        If not provided, defaults are loaded from :meth:`~smartsheet_client.core.config.SmartsheetConfig.from_env`.
    :type config: ~smartsheet_client.core.config.SmartsheetConfig or None

    :raises TypeError: If ``credential`` is neither a string nor a TokenCredential.
    :raises ValueError: If the token string is empty.

    Example::

        from smartsheet_client import SmartsheetClient
        from smartsheet_client.models.group import Group, GroupMember
        from smartsheet_client.models.pagination import PaginationParameters

        with SmartsheetClient("my-api-token") as client:
            group = client.groups.create(
                Group(name="Test Group", members=[GroupMember(email="jane.doe@example.com")])
            )
            groups = client.groups.list(PaginationParameters(include_all=True))
            print(client.groups.get(groups[0].id).name)
    """

    def __init__(
        self,
        credential: Union[str, TokenCredential],
        config: Optional[SmartsheetConfig] = None,
    ) -> None:
        self.auth = _AuthManager(credential)
        self._config = config or SmartsheetConfig.from_env()
        self._transport: Optional[_SmartsheetTransport] = None
        self._session: Optional[requests.Session] = None
        self._owns_session: bool = False

        # Initialize operation namespaces
        self.groups = GroupOperations(self)
        self.search = SearchOperations(self)
        self.sheets = SheetOperations(self)
        self.rows = RowOperations(self)

    @classmethod
    def from_env(cls) -> "SmartsheetClient":
        """
        Build a client from ``SMARTSHEET_ACCESS_TOKEN`` and the ``SMARTSHEET_*`` config variables.

        :raises ValueError: If ``SMARTSHEET_ACCESS_TOKEN`` is not set.
        """
        token = os.environ.get("SMARTSHEET_ACCESS_TOKEN")
        if not token:
            raise ValueError("SMARTSHEET_ACCESS_TOKEN is not set.")
        return cls(token, SmartsheetConfig.from_env())

    def __enter__(self) -> "SmartsheetClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling.

        :return: The client instance.
        :rtype: SmartsheetClient
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Close the client and release resources.

        Closes the HTTP session (if owned) and the transport. Safe to call
        multiple times.
        """
        if self._transport is not None:
            self._transport.close()
            self._transport = None
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False

    def _get_transport(self) -> _SmartsheetTransport:
        """
        Get or create the internal transport.

        Construction is deferred until the first API call. When a session exists
        (from the context manager), it is shared with the transport.

        :rtype: ~smartsheet_client.data._transport._SmartsheetTransport
        """
        if self._transport is None:
            self._transport = _SmartsheetTransport(
                self.auth,
                self._config,
                session=self._session,
            )
        return self._transport


__all__ = ["SmartsheetClient"]
