# Copyright (c)
# SPDX-License-Identifier: MIT
"""Mutual fund NAV proxy service."""

from __future__ import annotations

__version__ = "0.1.0"
