"""Filesystem template discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from .ports.template_finder import ITemplateFinder
from .reference import TemplateReference

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

logger = logging.getLogger(__name__)

JINJA_ENGINE = "jinja"

# File suffix -> engine tag. Unknown suffixes are used as the tag verbatim.
ENGINE_SUFFIXES: dict[str, str] = {
    "jinja": JINJA_ENGINE,
    "jinja2": JINJA_ENGINE,
    "j2": JINJA_ENGINE,
}


def engine_for_path(path: str | Path) -> str:
    """Engine tag of a template file, from its last suffix.

    ``index.html.jinja`` -> ``jinja``, ``mail.txt`` -> ``txt``,
    ``README`` -> ``""``.
    """
    suffix = Path(path).suffix.lstrip(".").lower()
    return ENGINE_SUFFIXES.get(suffix, suffix)


def _iter_files(directory: Path) -> Iterator[str]:
    """Relative ``/``-separated paths of every file below ``directory``."""
    for root, dirs, files in os.walk(directory, followlinks=True):
        dirs.sort()
        rel_root = Path(root).relative_to(directory)
        for filename in sorted(files):
            yield (rel_root / filename).as_posix()


def find_templates_in_folder(
    directory: str | Path,
    namespace: str = "",
    engine: str | None = None,
) -> list[TemplateReference]:
    """
    Scan ``directory`` recursively (following symlinks) for template files.

    Each file becomes a reference named ``@namespace/relative/path`` (or
    just ``relative/path`` for an empty namespace). With ``engine`` set,
    every reference gets that tag; otherwise it is derived from the file
    suffix. A directory that does not exist yields nothing.
    """
    directory = Path(directory)
    if not directory.is_dir():
        logger.debug("Template directory %s does not exist, skipping", directory)
        return []

    return [
        TemplateReference.build(
            namespace,
            relative_path,
            engine if engine is not None else engine_for_path(relative_path),
        )
        for relative_path in _iter_files(directory)
    ]


class FileSystemTemplateFinder(ITemplateFinder):
    """
    Finds all templates below a set of filesystem roots.

    ``roots`` hold un-namespaced templates; ``namespaced_roots`` maps a
    namespace to its directory (``@ns/...`` names). Results are computed
    once and memoised.
    """

    def __init__(
        self,
        roots: Iterable[str | Path] = (),
        namespaced_roots: Mapping[str, str | Path] | None = None,
    ) -> None:
        self.roots = [Path(root) for root in roots]
        self.namespaced_roots = {
            namespace: Path(directory)
            for namespace, directory in (namespaced_roots or {}).items()
        }
        self._templates: list[TemplateReference] | None = None

    def find_all_templates(self) -> list[TemplateReference]:
        if self._templates is not None:
            return list(self._templates)

        templates: list[TemplateReference] = []
        for root in self.roots:
            templates.extend(find_templates_in_folder(root))
        for namespace, directory in self.namespaced_roots.items():
            templates.extend(find_templates_in_folder(directory, namespace))

        logger.debug("Found %d templates", len(templates))
        self._templates = templates
        return list(templates)
