"""Jinja2 template engine adapter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from warmup_core.primitives.exceptions import TemplateCompileError

from ..ports.engine import ITemplateEngine
from ..reference import NAMESPACE_PREFIX

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ..reference import TemplateReference

logger = logging.getLogger(__name__)

try:
    import jinja2
    from jinja2 import (
        ChoiceLoader,
        Environment,
        FileSystemBytecodeCache,
        FileSystemLoader,
        PrefixLoader,
        select_autoescape,
    )

    _JINJA2_AVAILABLE = True
except ImportError:
    _JINJA2_AVAILABLE = False


class JinjaTemplateEngine(ITemplateEngine):
    """
    Compiles templates with a Jinja2 ``Environment``.

    Bare names resolve against ``roots``; ``@ns/...`` names resolve against
    ``namespaced_roots[ns]``. With ``cache_dir`` set, compiled bytecode is
    written there and survives process restarts.
    """

    def __init__(
        self,
        roots: Iterable[str | Path] = (),
        namespaced_roots: Mapping[str, str | Path] | None = None,
        cache_dir: str | Path | None = None,
        autoescape: bool = True,
        environment: Any | None = None,
    ) -> None:
        if not _JINJA2_AVAILABLE:
            raise ImportError(
                "Jinja2 is required. Install with: pip install 'warmup-templating[jinja2]'"
            )

        if environment is not None:
            self._env = environment
            return

        namespaced = {
            f"{NAMESPACE_PREFIX}{namespace}": FileSystemLoader(
                str(directory), followlinks=True
            )
            for namespace, directory in (namespaced_roots or {}).items()
        }
        loader = ChoiceLoader(
            [
                FileSystemLoader([str(root) for root in roots], followlinks=True),
                PrefixLoader(namespaced, delimiter="/"),
            ]
        )

        bytecode_cache = None
        if cache_dir is not None:
            Path(cache_dir).mkdir(parents=True, exist_ok=True)
            bytecode_cache = FileSystemBytecodeCache(str(cache_dir))

        autoescape_param = select_autoescape(["html", "xml"]) if autoescape else False
        self._env = Environment(
            loader=loader,
            autoescape=autoescape_param,
            bytecode_cache=bytecode_cache,
        )

    @property
    def environment(self) -> Any:
        return self._env

    def load_template(self, template: TemplateReference) -> Any:
        """Compile ``template``; Jinja2 errors surface as TemplateCompileError.

        Undecodable (binary) and unreadable files count as compile failures too.
        """
        try:
            return self._env.get_template(template.name)
        except (jinja2.TemplateError, UnicodeDecodeError, OSError) as e:
            logger.debug("Jinja2 compilation failed for %s: %s", template.name, e)
            raise TemplateCompileError(template.name, str(e)) from e
