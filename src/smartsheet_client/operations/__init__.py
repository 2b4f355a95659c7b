# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Operation namespace classes for the Smartsheet SDK.

This module contains the operation namespace classes that organize
related operations under intuitive namespaces:
- GroupOperations: group CRUD plus membership (``client.groups.members``)
- SearchOperations: account-wide and per-sheet search
- SheetOperations: sheet CRUD and DataFrame export
- RowOperations: row add/get/list/update/delete
"""

__all__ = []
