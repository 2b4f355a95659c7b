# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models and type definitions for the Smartsheet SDK.

This module provides dataclasses for Smartsheet entities:

- :class:`~smartsheet_client.models.group.Group` and :class:`~smartsheet_client.models.group.GroupMember`
- :class:`~smartsheet_client.models.sheet.Sheet` and :class:`~smartsheet_client.models.sheet.Column`
- :class:`~smartsheet_client.models.row.Row` and :class:`~smartsheet_client.models.row.Cell`
- :class:`~smartsheet_client.models.search.SearchResult`
- :class:`~smartsheet_client.models.pagination.PaginationParameters`

Entities are built with keyword arguments. A locally built entity has ``id=None``;
the service assigns identifiers on create.

Note:
    This ``__init__.py`` does NOT import/export models. Import directly from the
    specific module files.
"""

__all__ = []
