"""Template engine adapters."""

from __future__ import annotations

try:
    from .jinja import JinjaTemplateEngine

    __all__ = ["JinjaTemplateEngine"]
except ImportError:
    __all__ = []
