"""Value types for module scaffolding."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from functools import cached_property
from pathlib import Path

from vipergen.errors import ScaffoldError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Role(str, Enum):
    """Architectural role of one generated file.

    The value doubles as the type-name suffix and the file-name suffix.
    """

    VIEW_CONTROLLER = "ViewController"
    PRESENTER = "Presenter"
    INTERACTOR = "Interactor"
    ROUTER = "Router"


class Variant(str, Enum):
    """Concurrency convention assumed by the generated code."""

    PLAIN = "plain"
    REACTIVE = "reactive"


# ---------------------------------------------------------------------------
# Rendering inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DerivedNames:
    """Every type name a module declares, derived from one prefix."""

    prefix: str

    def type_name(self, role: Role) -> str:
        return f"{self.prefix}{role.value}"

    def protocol_name(self, role: Role) -> str:
        return f"{self.type_name(role)}Protocol"

    @property
    def view_controller(self) -> str:
        return self.type_name(Role.VIEW_CONTROLLER)

    @property
    def presenter(self) -> str:
        return self.type_name(Role.PRESENTER)

    @property
    def interactor(self) -> str:
        return self.type_name(Role.INTERACTOR)

    @property
    def router(self) -> str:
        return self.type_name(Role.ROUTER)

    @property
    def view_controller_protocol(self) -> str:
        return self.protocol_name(Role.VIEW_CONTROLLER)

    @property
    def presenter_protocol(self) -> str:
        return self.protocol_name(Role.PRESENTER)

    @property
    def interactor_protocol(self) -> str:
        return self.protocol_name(Role.INTERACTOR)

    @property
    def router_protocol(self) -> str:
        return self.protocol_name(Role.ROUTER)


@dataclass(frozen=True)
class RenderParameters:
    """One snapshot of the inputs shared by all four files of a module."""

    module_directory: str
    prefix: str
    author_name: str
    generation_date: date

    @cached_property
    def names(self) -> DerivedNames:
        return DerivedNames(self.prefix)

    @property
    def day(self) -> str:
        return f"{self.generation_date.day:02d}"

    @property
    def month(self) -> str:
        return f"{self.generation_date.month:02d}"

    @property
    def year(self) -> str:
        return f"{self.generation_date.year:04d}"


@dataclass(frozen=True)
class FileTemplate:
    """A packaged template body for one (role, variant) pair."""

    role: Role
    variant: Variant
    template_path: str


# ---------------------------------------------------------------------------
# Rendering outputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RenderedFile:
    """Concrete contents of one generated file, not yet on disk."""

    role: Role
    relative_path: str
    contents: str


@dataclass
class ScaffoldResult:
    """Outcome of writing one module to disk.

    ``written_files`` lists relative paths in the order they were written.
    When ``first_error`` is set, those files remain on disk.
    """

    created_directory: Path
    written_files: list[str] = field(default_factory=list)
    first_error: ScaffoldError | None = None

    @property
    def ok(self) -> bool:
        return self.first_error is None

    @property
    def error_kind(self) -> str | None:
        return self.first_error.kind if self.first_error else None
