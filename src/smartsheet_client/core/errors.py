# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured exceptions raised by the Smartsheet client.

Local shape problems raise :class:`ValidationError` before any request is sent.
Everything that goes wrong on the remote side (non-2xx status, network failure,
unreadable body) raises :class:`HttpError`; permission failures raise the
:class:`AuthorizationError` subclass so they can be handled on their own.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional


class SmartsheetError(Exception):
    """Base structured error for the Smartsheet SDK."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = dict(details or {})
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ValidationError(SmartsheetError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="validation_error", subcode=subcode, details=details, source="client")


class HttpError(SmartsheetError):
    """
    Remote or service failure.

    ``status_code`` is ``None`` when no response was received (network failure).

    :param error_code: Smartsheet ``errorCode`` from the error body, if any.
    :param ref_id: Smartsheet ``refId`` from the error body, useful for support requests.
    :param body_excerpt: First characters of a body that could not be decoded.
    :param retry_after: Seconds from the ``Retry-After`` header on throttled responses.
    """

    _code = "http_error"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        is_transient: bool = False,
        subcode: Optional[str] = None,
        error_code: Optional[int] = None,
        ref_id: Optional[str] = None,
        client_request_id: Optional[str] = None,
        body_excerpt: Optional[str] = None,
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = dict(details or {})
        if error_code is not None:
            d["error_code"] = error_code
        if ref_id is not None:
            d["ref_id"] = ref_id
        if client_request_id is not None:
            d["client_request_id"] = client_request_id
        if body_excerpt is not None:
            d["body_excerpt"] = body_excerpt
        if retry_after is not None:
            d["retry_after"] = retry_after
        super().__init__(
            message,
            code=self._code,
            subcode=subcode,
            status_code=status_code,
            details=d,
            source="server",
            is_transient=is_transient,
        )


class AuthorizationError(HttpError):
    """The caller is not authenticated (401) or lacks permission for the operation (403)."""

    _code = "authorization_error"


__all__ = ["SmartsheetError", "ValidationError", "HttpError", "AuthorizationError"]
