"""Module scaffolding orchestrator.

Resolves the author once, renders the four files of one module from a single
:class:`RenderParameters` snapshot, and hands them to the writer.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path

from vipergen.config import Config
from vipergen.identity import IdentityResolver

from .models import RenderParameters, ScaffoldResult, Variant
from .renderer import ModuleRenderer
from .writer import ScaffoldWriter


class ModuleGenerator:
    """Generates one VIPER module per :meth:`generate` call.

    Collaborators can be swapped for tests; by default they are built from
    the supplied :class:`Config`.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        identity: IdentityResolver | None = None,
        renderer: ModuleRenderer | None = None,
        writer: ScaffoldWriter | None = None,
    ) -> None:
        self.config = config or Config()
        self.identity = identity or IdentityResolver(
            fallback=self.config.fallback_author,
            timeout=self.config.identity_timeout,
        )
        self.renderer = renderer or ModuleRenderer(
            catalog_name=self.config.catalog_name,
            file_extension=self.config.file_extension,
        )
        self.writer = writer or ScaffoldWriter()

    async def generate(
        self,
        module_directory: str,
        prefix: str,
        *,
        variant: Variant = Variant.PLAIN,
        author: str | None = None,
        today: date | None = None,
        output_root: str | Path | None = None,
    ) -> ScaffoldResult:
        """Render and write one module.

        Args:
            module_directory: Directory created under *output_root*.
            prefix: Stem of every generated type name.
            variant: Which template set to use.
            author: Header author; looked up through git when omitted.
            today: Header date; the local date when omitted.
            output_root: Defaults to ``config.output_dir``.

        Returns:
            The writer's :class:`ScaffoldResult`.
        """
        if author is None:
            author = await self.identity.resolve()

        params = RenderParameters(
            module_directory=module_directory,
            prefix=prefix,
            author_name=author,
            generation_date=today or date.today(),
        )
        files = self.renderer.render(Variant(variant), params)
        root = Path(output_root) if output_root is not None else self.config.output_dir
        return await self.writer.write(root, module_directory, files)
