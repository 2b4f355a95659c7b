# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level HTTP sender used by the Smartsheet transport.

Each API operation maps to exactly one call here. Status codes are never inspected:
a 429 or 5xx comes back as a normal response and the transport turns it into an
``HttpError`` flagged ``is_transient``, leaving the decision to re-issue a write to the
caller. The only thing repeated here is a request that never reached the service
(DNS failure, refused connection, read timeout), and only when ``http_retries`` asks for it.
"""

from __future__ import annotations

import time
from typing import Any, Optional

import requests

# Smartsheet writes (bulk row inserts, sheet creation) can take far longer than reads
_WRITE_METHODS = frozenset({"post", "put", "delete"})
_WRITE_TIMEOUT = 120
_READ_TIMEOUT = 10


class _HttpClient:
    """
    Sends requests through ``requests``, or through a shared ``requests.Session`` when the
    client is used as a context manager.

    :param retries: Extra attempts after a connection-level failure. Default is 0, so every
        call is a single round trip.
    :type retries: :class:`int` | None
    :param backoff: First delay in seconds before an extra attempt; doubles each time. Default is 0.5.
    :type backoff: :class:`float` | None
    :param timeout: Timeout in seconds for every method. If None, writes get 120s and reads 10s.
    :type timeout: :class:`float` | None
    :param session: Session owned by :class:`~smartsheet_client.client.SmartsheetClient`.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        retries: Optional[int] = None,
        backoff: Optional[float] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.max_attempts = 1 + max(0, retries or 0)
        self.base_delay = backoff if backoff is not None else 0.5
        self.default_timeout: Optional[float] = timeout
        self._session = session

    def _timeout_for(self, method: str) -> float:
        if self.default_timeout is not None:
            return self.default_timeout
        return _WRITE_TIMEOUT if (method or "").lower() in _WRITE_METHODS else _READ_TIMEOUT

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        if self._session is not None:
            return self._session.request(method, url, **kwargs)
        return requests.request(method, url, **kwargs)

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Send one API request and return the raw response, whatever its status.

        :param method: HTTP method (GET, POST, PUT, DELETE).
        :type method: :class:`str`
        :param url: Absolute Smartsheet API URL.
        :type url: :class:`str`
        :param kwargs: ``headers``, ``params``, ``json`` and optionally an explicit ``timeout``.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: If the service could not be reached
            on the last allowed attempt.
        """
        kwargs.setdefault("timeout", self._timeout_for(method))

        attempt = 0
        while True:
            try:
                return self._send(method, url, **kwargs)
            except requests.exceptions.RequestException:
                attempt += 1
                if attempt >= self.max_attempts:
                    raise
                time.sleep(self.base_delay * (2 ** (attempt - 1)))

    def close(self) -> None:
        """Close the shared session, if any. Safe to call more than once."""
        if self._session is not None:
            self._session.close()
            self._session = None
