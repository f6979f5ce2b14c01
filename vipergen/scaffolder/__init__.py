"""VIPER module scaffolder -- renders and writes the four files of a module.

Quick usage::

    from vipergen.scaffolder import ModuleGenerator, Variant

    generator = ModuleGenerator()
    result = await generator.generate("Checkout", "Order", variant=Variant.PLAIN)
    assert result.ok
"""

from vipergen.scaffolder.catalog import ROLE_ORDER, TemplateCatalog
from vipergen.scaffolder.generator import ModuleGenerator
from vipergen.scaffolder.models import (
    DerivedNames,
    FileTemplate,
    RenderedFile,
    RenderParameters,
    Role,
    ScaffoldResult,
    Variant,
)
from vipergen.scaffolder.renderer import ModuleRenderer
from vipergen.scaffolder.templates import TemplateRenderer
from vipergen.scaffolder.writer import ScaffoldWriter

__all__ = [
    "ROLE_ORDER",
    "DerivedNames",
    "FileTemplate",
    "ModuleGenerator",
    "ModuleRenderer",
    "RenderParameters",
    "RenderedFile",
    "Role",
    "ScaffoldResult",
    "ScaffoldWriter",
    "TemplateCatalog",
    "TemplateRenderer",
    "Variant",
]
