"""Template ports."""

from __future__ import annotations

from .engine import ITemplateEngine
from .template_finder import ITemplateFinder

__all__ = ["ITemplateEngine", "ITemplateFinder"]
