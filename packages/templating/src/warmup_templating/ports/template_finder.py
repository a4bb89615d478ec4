"""Template finder port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..reference import TemplateReference


@runtime_checkable
class ITemplateFinder(Protocol):
    """Protocol for enumerating every template known to the application."""

    def find_all_templates(self) -> list[TemplateReference]:
        """Return references for all templates, in a stable order."""
        ...
