"""IServiceLocator - Protocol for the application-context handle."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IServiceLocator(Protocol):
    """Looks up application services by id."""

    def get(self, service_id: str) -> Any:
        """
        Return the service registered under ``service_id``.
        Raises ServiceNotFoundError when the id is unknown.
        """
        ...

    def has(self, service_id: str) -> bool:
        """Whether a service is registered under ``service_id``."""
        ...
