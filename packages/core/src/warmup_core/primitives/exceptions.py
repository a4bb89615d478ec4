"""Exceptions for the warm-up toolkit."""

from __future__ import annotations


class WarmupError(Exception):
    """Root exception for the entire warm-up toolkit."""


class ServiceNotFoundError(WarmupError):
    """Raised when a service id is not known to the container."""

    def __init__(self, service_id: str) -> None:
        self.service_id = service_id
        super().__init__(f"Service {service_id!r} is not registered")


class ServiceRegistrationError(WarmupError):
    """Raised when a service registration conflict is detected.

    Usage: ServiceContainer raises this when a second, different factory
    is registered under an id that is already taken.
    """


class TemplateError(WarmupError):
    """Base class for all template-related errors."""


class TemplateCompileError(TemplateError):
    """Raised by a template engine when a template cannot be compiled.

    Engine adapters translate their library-specific errors into this one
    (the original error is kept as ``__cause__``).
    """

    def __init__(self, template_name: str, reason: str | None = None) -> None:
        self.template_name = template_name
        self.reason = reason

        msg = f"Failed to compile template {template_name!r}"
        if reason:
            msg += f" - {reason}"

        super().__init__(msg)
