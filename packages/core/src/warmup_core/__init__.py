"""warmup-core — Foundation package for the cache warm-up toolkit.

Zero infrastructure dependencies: ports, exceptions, a service container
and the warm-up pipeline.
"""

from __future__ import annotations

from .aggregate import CacheWarmerAggregate
from .container import ServiceContainer
from .ports import ICacheWarmer, IServiceLocator
from .primitives.exceptions import (
    ServiceNotFoundError,
    ServiceRegistrationError,
    TemplateCompileError,
    TemplateError,
    WarmupError,
)

__all__ = [
    # Pipeline
    "CacheWarmerAggregate",
    "ServiceContainer",
    # Ports
    "ICacheWarmer",
    "IServiceLocator",
    # Exceptions
    "WarmupError",
    "ServiceNotFoundError",
    "ServiceRegistrationError",
    "TemplateError",
    "TemplateCompileError",
]
