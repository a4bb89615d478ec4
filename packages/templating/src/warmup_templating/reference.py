"""Template reference value object."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

NAMESPACE_PREFIX = "@"


class TemplateReference(BaseModel):
    """Logical identity of a template: its name and the engine that owns it.

    Namespaced names look like ``@ns/path/to/file.html``; everything else
    is a path relative to one of the engine's template roots.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    engine: str

    @classmethod
    def build(cls, namespace: str, relative_path: str, engine: str) -> TemplateReference:
        """Build ``@namespace/relative_path``, or the bare path when namespace is empty."""
        name = (
            f"{NAMESPACE_PREFIX}{namespace}/{relative_path}"
            if namespace
            else relative_path
        )
        return cls(name=name, engine=engine)

    @property
    def namespace(self) -> str:
        if not self.name.startswith(NAMESPACE_PREFIX) or "/" not in self.name:
            return ""
        return self.name[len(NAMESPACE_PREFIX) : self.name.index("/")]

    def __str__(self) -> str:
        return self.name
