# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Subcode constants attached to :class:`~smartsheet_client.core.errors.SmartsheetError`."""

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_405 = "http_405"
HTTP_409 = "http_409"
HTTP_415 = "http_415"
HTTP_429 = "http_429"
HTTP_500 = "http_500"
HTTP_502 = "http_502"
HTTP_503 = "http_503"
HTTP_504 = "http_504"

_HTTP_STATUS_TO_SUBCODE = {
    400: HTTP_400,
    401: HTTP_401,
    403: HTTP_403,
    404: HTTP_404,
    405: HTTP_405,
    409: HTTP_409,
    415: HTTP_415,
    429: HTTP_429,
    500: HTTP_500,
    502: HTTP_502,
    503: HTTP_503,
    504: HTTP_504,
}

# Statuses the service documents as safe to try again later
TRANSIENT_STATUS = {429, 500, 502, 503, 504}

# Statuses surfaced as AuthorizationError
AUTHORIZATION_STATUS = {401, 403}

# Failures with no usable HTTP status
NETWORK_ERROR = "network_error"
MALFORMED_RESPONSE = "malformed_response"

# Validation subcodes
VALIDATION_ID_REQUIRED = "validation_id_required"
VALIDATION_ID_NOT_INT = "validation_id_not_int"
VALIDATION_EMPTY_COLLECTION = "validation_empty_collection"
VALIDATION_QUERY_EMPTY = "validation_query_empty"
VALIDATION_UNSUPPORTED_TYPE = "validation_unsupported_type"


def http_status_to_subcode(status: int) -> str:
    """Map an HTTP status to its subcode, falling back to ``http_<status>``."""
    return _HTTP_STATUS_TO_SUBCODE.get(status, f"http_{status}")
