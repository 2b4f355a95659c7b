# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data access layer for the Smartsheet SDK.

This module contains the REST transport used by the operation namespaces.
"""

__all__ = []
