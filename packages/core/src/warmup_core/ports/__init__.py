"""Ports: protocols implemented by warmers and application containers."""

from __future__ import annotations

from .locator import IServiceLocator
from .warmer import ICacheWarmer

__all__ = ["ICacheWarmer", "IServiceLocator"]
