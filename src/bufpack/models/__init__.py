"""Data models for bufpack."""

from __future__ import annotations

from .layout import PackedLayout

__all__ = ["PackedLayout"]
