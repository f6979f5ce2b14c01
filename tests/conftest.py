"""Shared pytest fixtures for the vipergen test suite.

Provides reusable fixtures for:
- Render parameters for the Checkout/Order example module
- A module renderer bound to the packaged templates
- Patched identity lookups so no test depends on the host git config
"""

from __future__ import annotations

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from vipergen.scaffolder.models import RenderParameters
from vipergen.scaffolder.renderer import ModuleRenderer


# ---------------------------------------------------------------------------
# Rendering inputs
# ---------------------------------------------------------------------------


@pytest.fixture
def order_params() -> RenderParameters:
    """Parameters for module directory ``Checkout`` with prefix ``Order``."""
    return RenderParameters(
        module_directory="Checkout",
        prefix="Order",
        author_name="Jane Doe",
        generation_date=date(2024, 5, 1),
    )


@pytest.fixture
def module_renderer() -> ModuleRenderer:
    """A ModuleRenderer using the packaged templates and default header."""
    return ModuleRenderer()


# ---------------------------------------------------------------------------
# Identity lookup
# ---------------------------------------------------------------------------


@pytest.fixture
def git_user_name():
    """Patch the git lookup to report ``Jane Doe``."""
    with patch(
        "vipergen.identity.run_command",
        new=AsyncMock(return_value=(0, "Jane Doe", "")),
    ) as mock:
        yield mock


@pytest.fixture
def git_unavailable():
    """Patch the git lookup to behave as if git were not installed."""
    with patch(
        "vipergen.identity.run_command",
        new=AsyncMock(return_value=(127, "", "No such file or directory: 'git'")),
    ) as mock:
        yield mock


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every VIPERGEN_* variable from the environment."""
    for var in (
        "VIPERGEN_OUTPUT_DIR",
        "VIPERGEN_CATALOG_NAME",
        "VIPERGEN_FILE_EXTENSION",
        "VIPERGEN_FALLBACK_AUTHOR",
        "VIPERGEN_IDENTITY_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
