"""Test configuration for warmup-templating."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

_packages = Path(__file__).resolve().parents[2]
for _src in (_packages / "core" / "src", _packages / "templating" / "src"):
    if _src.is_dir() and str(_src) not in sys.path:
        sys.path.insert(0, str(_src))


@pytest.fixture
def template_tree(tmp_path: Path) -> Path:
    """Application templates: two Jinja templates, one broken, one non-Jinja."""
    root = tmp_path / "templates"
    (root / "layout").mkdir(parents=True)
    (root / "layout" / "base.html.jinja").write_text(
        "<html>{% block body %}{% endblock %}</html>"
    )
    (root / "index.html.jinja").write_text(
        "{% extends 'layout/base.html.jinja' %}{% block body %}Hi{% endblock %}"
    )
    (root / "broken.html.jinja").write_text("{% if %}")
    (root / "legacy.html.mako").write_text("${name}")
    return root


@pytest.fixture
def engine():
    """Template engine double recording compiled names."""
    mock = MagicMock()
    mock.compiled = []
    mock.load_template.side_effect = lambda ref: mock.compiled.append(ref.name)
    return mock


@pytest.fixture
def container(engine):
    """Service locator double that serves the engine double."""
    mock = MagicMock()
    mock.get.return_value = engine
    return mock
