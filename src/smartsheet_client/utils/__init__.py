# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Utility helpers for the Smartsheet SDK."""

__all__ = []
