"""Template cache warmer: compiles every template ahead of the first request."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from warmup_core.primitives.exceptions import TemplateCompileError

from .config import TemplateWarmupConfig
from .finder import JINJA_ENGINE, find_templates_in_folder

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from warmup_core.ports.locator import IServiceLocator

    from .ports.engine import ITemplateEngine
    from .ports.template_finder import ITemplateFinder
    from .reference import TemplateReference

logger = logging.getLogger(__name__)

DEFAULT_ENGINE_SERVICE_ID = "jinja"


@dataclass
class WarmupReport:
    """Per-template outcome of one warm-up pass."""

    compiled: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class TemplateCacheWarmer:
    """
    Generates the engine's compiled cache for all templates.

    The engine is looked up in the container inside :meth:`warm_up`, not
    here: its loader may depend on a cache produced by an earlier warm-up
    step, so this warmer must be registered after that step. Without a
    finder, templating is considered disabled and warming is a no-op.
    """

    def __init__(
        self,
        container: IServiceLocator,
        finder: ITemplateFinder | None = None,
        config: TemplateWarmupConfig | Mapping[str, str | Path] | None = None,
        engine_service_id: str = DEFAULT_ENGINE_SERVICE_ID,
    ) -> None:
        self._container = container
        self._finder = finder
        if config is None:
            config = TemplateWarmupConfig()
        elif not isinstance(config, TemplateWarmupConfig):
            config = TemplateWarmupConfig(paths=dict(config))
        self._config = config
        self._engine_service_id = engine_service_id
        self.last_report: WarmupReport | None = None

    @property
    def config(self) -> TemplateWarmupConfig:
        return self._config

    def warm_up(self, cache_dir: str | Path) -> None:
        """Compile every template owned by the target engine, ignoring failures."""
        if self._finder is None:
            logger.debug("No template finder configured, skipping template warm-up")
            return

        engine: ITemplateEngine = self._container.get(self._engine_service_id)

        templates = list(self._finder.find_all_templates())
        for namespace, directory in self._config.paths.items():
            templates.extend(
                find_templates_in_folder(directory, namespace, engine=JINJA_ENGINE)
            )

        self.last_report = self._compile(engine, templates)
        logger.info(
            "Template warm-up: %d compiled, %d failed, %d skipped",
            len(self.last_report.compiled),
            len(self.last_report.failed),
            len(self.last_report.skipped),
        )

    def _compile(
        self, engine: ITemplateEngine, templates: list[TemplateReference]
    ) -> WarmupReport:
        report = WarmupReport()
        for template in templates:
            if template.engine != JINJA_ENGINE:
                report.skipped.append(template.name)
                continue

            try:
                engine.load_template(template)
            except TemplateCompileError as e:
                # problem during compilation, give up on this one
                logger.debug("Skipping template %s: %s", template.name, e)
                report.failed.append(template.name)
            else:
                report.compiled.append(template.name)
        return report

    def is_optional(self) -> bool:
        return True
