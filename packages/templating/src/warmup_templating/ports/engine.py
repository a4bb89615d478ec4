"""Template engine port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..reference import TemplateReference


@runtime_checkable
class ITemplateEngine(Protocol):
    """Protocol for an engine that compiles templates on load."""

    def load_template(self, template: TemplateReference) -> Any:
        """
        Compile (or fetch from cache) the given template.
        Raises TemplateCompileError when the template cannot be compiled.
        """
        ...
