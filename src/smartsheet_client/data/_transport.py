# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level Smartsheet REST transport.

Builds URLs and headers, executes requests through
:class:`~smartsheet_client.core._http._HttpClient`, turns failures into
:class:`~smartsheet_client.core.errors.HttpError` and unwraps the service's
``{"message": "SUCCESS", "resultCode": 0, "result": ...}`` envelope.
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict, Optional

import requests

from ..core._auth import _AuthManager
from ..core._error_codes import (
    AUTHORIZATION_STATUS,
    MALFORMED_RESPONSE,
    NETWORK_ERROR,
    TRANSIENT_STATUS,
    http_status_to_subcode,
)
from ..core._http import _HttpClient
from ..core.config import SmartsheetConfig
from ..core.errors import AuthorizationError, HttpError

logger = logging.getLogger(__name__)

_USER_AGENT = "smartsheet-client-python"
_BODY_EXCERPT_LIMIT = 200


class _SmartsheetTransport:
    """Smartsheet REST API client used by the operation namespaces."""

    def __init__(
        self,
        auth: _AuthManager,
        config: Optional[SmartsheetConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.auth = auth
        self.config = config or SmartsheetConfig.from_env()
        self.base_url = (self.config.base_url or "").rstrip("/")
        if not self.base_url:
            raise ValueError("base_url is required.")
        self._http = _HttpClient(
            retries=self.config.http_retries,
            backoff=self.config.http_backoff,
            timeout=self.config.http_timeout,
            session=session,
        )

    def close(self) -> None:
        self._http.close()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self, client_request_id: str) -> Dict[str, str]:
        """Build standard headers with bearer auth."""
        token = self.auth._acquire_token().access_token
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.config.user_agent or _USER_AGENT,
            "x-client-request-id": client_request_id,
        }
        if self.config.assume_user:
            headers["Assume-User"] = self.config.assume_user
        return headers

    # ----------------------------- request core -----------------------------

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Send one request and return the decoded JSON body.

        :param method: HTTP method.
        :param path: Path relative to the API root, e.g. ``"groups/123"``.
        :param kwargs: ``params`` / ``json`` forwarded to requests.
        :return: Decoded body, or ``None`` for an empty 2xx body.
        :raises AuthorizationError: On 401/403.
        :raises HttpError: On any other non-2xx status, network failure, or undecodable body.
        """
        url = self._url(path)
        client_request_id = str(uuid.uuid4())
        headers = self._headers(client_request_id)
        start = time.perf_counter()
        try:
            r = self._http._request(method, url, headers=headers, **kwargs)
        except requests.exceptions.RequestException as exc:
            logger.warning(
                "%s %s failed: %s", method.upper(), url, exc, extra={"client_request_id": client_request_id}
            )
            raise HttpError(
                f"Request to {url} failed: {exc}",
                subcode=NETWORK_ERROR,
                is_transient=True,
                client_request_id=client_request_id,
            ) from exc

        duration_ms = (time.perf_counter() - start) * 1000
        status = r.status_code
        level = logging.WARNING if status >= 400 else logging.DEBUG
        logger.log(
            level,
            "%s %s %s %.1fms",
            method.upper(),
            url,
            status,
            duration_ms,
            extra={"client_request_id": client_request_id},
        )

        if not 200 <= status < 300:
            raise self._error_from_response(r, client_request_id)

        text = r.text or ""
        if not text.strip():
            return None
        try:
            return r.json()
        except ValueError as exc:
            raise HttpError(
                f"Response from {url} is not valid JSON",
                status_code=status,
                subcode=MALFORMED_RESPONSE,
                client_request_id=client_request_id,
                body_excerpt=text[:_BODY_EXCERPT_LIMIT],
            ) from exc

    @staticmethod
    def _error_from_response(r: Any, client_request_id: str) -> HttpError:
        status = r.status_code
        error_code = None
        ref_id = None
        message = None
        body_excerpt = None
        try:
            body = r.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            error_code = body.get("errorCode")
            ref_id = body.get("refId")
            message = body.get("message")
        else:
            body_excerpt = (r.text or "")[:_BODY_EXCERPT_LIMIT] or None

        retry_after = None
        raw_retry = (r.headers or {}).get("Retry-After")
        if raw_retry is not None:
            try:
                retry_after = int(raw_retry)
            except (TypeError, ValueError):
                retry_after = None

        cls = AuthorizationError if status in AUTHORIZATION_STATUS else HttpError
        return cls(
            message or f"HTTP {status}",
            status_code=status,
            is_transient=status in TRANSIENT_STATUS,
            subcode=http_status_to_subcode(status),
            error_code=error_code,
            ref_id=ref_id,
            client_request_id=client_request_id,
            body_excerpt=body_excerpt,
            retry_after=retry_after,
        )

    @staticmethod
    def _unwrap_result(body: Any) -> Any:
        """Return ``body["result"]`` for success envelopes, ``body`` otherwise."""
        # resultCode 3 (partial success) also carries a usable result
        if isinstance(body, dict) and "resultCode" in body:
            return body.get("result")
        return body

    @staticmethod
    def _expect_dict(body: Any, what: str) -> Dict[str, Any]:
        if not isinstance(body, dict):
            raise HttpError(f"Expected {what} object in response", subcode=MALFORMED_RESPONSE)
        return body

    @staticmethod
    def _expect_list(body: Any, what: str) -> list:
        if body is None:
            return []
        if isinstance(body, dict):
            # Single-item writes echo back an object instead of a list
            return [body]
        if not isinstance(body, list):
            raise HttpError(f"Expected list of {what} in response", subcode=MALFORMED_RESPONSE)
        return body

    # ----------------------------- verbs ------------------------------------

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._request("get", path, params=params or None)

    def _post(self, path: str, payload: Any, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._unwrap_result(self._request("post", path, json=payload, params=params or None))

    def _put(self, path: str, payload: Any, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._unwrap_result(self._request("put", path, json=payload, params=params or None))

    def _delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._unwrap_result(self._request("delete", path, params=params or None))


__all__ = []
