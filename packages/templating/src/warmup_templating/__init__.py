"""Template cache warm-up: discover templates and precompile them."""

from __future__ import annotations

import importlib.util

from .config import TemplateWarmupConfig
from .finder import (
    JINJA_ENGINE,
    FileSystemTemplateFinder,
    engine_for_path,
    find_templates_in_folder,
)
from .ports.engine import ITemplateEngine
from .ports.template_finder import ITemplateFinder
from .reference import TemplateReference
from .warmer import DEFAULT_ENGINE_SERVICE_ID, TemplateCacheWarmer, WarmupReport

__all__ = [
    "DEFAULT_ENGINE_SERVICE_ID",
    "JINJA_ENGINE",
    "TemplateReference",
    "TemplateWarmupConfig",
    "ITemplateEngine",
    "ITemplateFinder",
    "FileSystemTemplateFinder",
    "engine_for_path",
    "find_templates_in_folder",
    "TemplateCacheWarmer",
    "WarmupReport",
]

# Optional Jinja2 components
if importlib.util.find_spec("jinja2") is not None:
    from .engines.jinja import JinjaTemplateEngine  # noqa: F401

    __all__.extend(["JinjaTemplateEngine"])
