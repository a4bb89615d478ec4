"""Service container with lazy, factory-backed services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .primitives.exceptions import ServiceNotFoundError, ServiceRegistrationError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Minimal application context for warm-up steps.

    Services are registered as zero-argument *factories* and built on first
    :meth:`get`, so a service can depend on state that an earlier warm-up
    step produces. Built instances are cached.

    **Conflict detection:** registering a second, different factory for an
    id raises :class:`ServiceRegistrationError`. Re-registering the same
    factory is a no-op.
    """

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], Any]] = {}
        self._instances: dict[str, Any] = {}

    # ── Registration ─────────────────────────────────────────────

    def register(self, service_id: str, factory: Callable[[], Any]) -> None:
        existing = self._factories.get(service_id)
        if existing is not None and existing is not factory:
            msg = (
                f"Duplicate service {service_id!r}: a different factory "
                "is already registered"
            )
            raise ServiceRegistrationError(msg)
        self._factories[service_id] = factory
        logger.debug("Registered service factory %s", service_id)

    def set(self, service_id: str, instance: Any) -> None:
        """Register an already built service, replacing any cached instance."""
        self._instances[service_id] = instance
        logger.debug("Registered service instance %s", service_id)

    # ── Lookup ───────────────────────────────────────────────────

    def has(self, service_id: str) -> bool:
        return service_id in self._instances or service_id in self._factories

    def get(self, service_id: str) -> Any:
        if service_id in self._instances:
            return self._instances[service_id]

        factory = self._factories.get(service_id)
        if factory is None:
            raise ServiceNotFoundError(service_id)

        instance = factory()
        self._instances[service_id] = instance
        logger.debug("Built service %s", service_id)
        return instance

    def reset(self) -> None:
        """Drop built instances; factories stay registered."""
        self._instances.clear()
