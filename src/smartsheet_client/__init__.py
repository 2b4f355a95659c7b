# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Python client for the Smartsheet REST API."""

from .__version__ import __version__
from .client import SmartsheetClient
from .core._auth import AccessTokenCredential

__all__ = ["SmartsheetClient", "AccessTokenCredential", "__version__"]
