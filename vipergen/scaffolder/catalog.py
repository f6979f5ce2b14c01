"""Registry of the packaged file templates.

One template exists per (role, variant) pair.  The registry is built once at
import time and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import FileTemplate, Role, Variant

# Order in which files are rendered and written.
ROLE_ORDER: tuple[Role, ...] = (
    Role.VIEW_CONTROLLER,
    Role.PRESENTER,
    Role.INTERACTOR,
    Role.ROUTER,
)


def _build_registry() -> Mapping[tuple[Role, Variant], FileTemplate]:
    registry = {
        (role, variant): FileTemplate(
            role=role,
            variant=variant,
            template_path=f"{variant.value}/{role.value}.j2",
        )
        for variant in Variant
        for role in ROLE_ORDER
    }
    return MappingProxyType(registry)


class TemplateCatalog:
    """Read-only lookup of :class:`FileTemplate` entries."""

    _REGISTRY = _build_registry()

    def get(self, role: Role, variant: Variant) -> FileTemplate:
        return self._REGISTRY[(Role(role), Variant(variant))]

    def templates_for(self, variant: Variant) -> tuple[FileTemplate, ...]:
        """Return the four templates of *variant* in :data:`ROLE_ORDER`."""
        variant = Variant(variant)
        return tuple(self._REGISTRY[(role, variant)] for role in ROLE_ORDER)
