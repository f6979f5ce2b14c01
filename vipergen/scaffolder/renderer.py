"""Binds render parameters into the four files of one module.

Rendering is pure: the same :class:`RenderParameters` always produce the
same bytes.  No clock is read here; the date comes in with the parameters.
"""

from __future__ import annotations

from typing import Any

from vipergen.config import DEFAULT_CATALOG_NAME

from .catalog import TemplateCatalog
from .models import FileTemplate, RenderedFile, RenderParameters, Variant
from .templates import TemplateRenderer


class ModuleRenderer:
    """Renders every role of a variant from a single parameter snapshot."""

    def __init__(
        self,
        catalog: TemplateCatalog | None = None,
        renderer: TemplateRenderer | None = None,
        *,
        catalog_name: str = DEFAULT_CATALOG_NAME,
        file_extension: str = "swift",
    ) -> None:
        self.catalog = catalog or TemplateCatalog()
        self.renderer = renderer or TemplateRenderer()
        self.catalog_name = catalog_name
        self.file_extension = file_extension

    def relative_path(self, template: FileTemplate, params: RenderParameters) -> str:
        return f"{params.names.type_name(template.role)}.{self.file_extension}"

    def render(self, variant: Variant, params: RenderParameters) -> list[RenderedFile]:
        """Render all four files of *variant*, in catalog order."""
        return [
            self.render_one(template, params)
            for template in self.catalog.templates_for(variant)
        ]

    def render_one(self, template: FileTemplate, params: RenderParameters) -> RenderedFile:
        path = self.relative_path(template, params)
        contents = self.renderer.render(
            template.template_path, self._build_context(path, params)
        )
        return RenderedFile(role=template.role, relative_path=path, contents=contents)

    def _build_context(self, file_name: str, params: RenderParameters) -> dict[str, Any]:
        """Build the Jinja2 template context for one file."""
        return {
            "names": params.names,
            "file_name": file_name,
            "catalog_name": self.catalog_name,
            "author": params.author_name,
            "day": params.day,
            "month": params.month,
            "year": params.year,
        }
