"""Primitives: the exception hierarchy shared by every warm-up package."""

from __future__ import annotations

from .exceptions import (
    ServiceNotFoundError,
    ServiceRegistrationError,
    TemplateCompileError,
    TemplateError,
    WarmupError,
)

__all__ = [
    "WarmupError",
    "ServiceNotFoundError",
    "ServiceRegistrationError",
    "TemplateError",
    "TemplateCompileError",
]
