# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the Smartsheet SDK.

This module contains the foundational components including authentication,
configuration, HTTP client, results and error handling.
"""

from .config import SmartsheetConfig
from .errors import AuthorizationError, HttpError, SmartsheetError, ValidationError
from .results import PagedResult

__all__ = [
    "SmartsheetConfig",
    "SmartsheetError",
    "ValidationError",
    "HttpError",
    "AuthorizationError",
    "PagedResult",
]
