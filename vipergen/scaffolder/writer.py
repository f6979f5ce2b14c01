"""Persists rendered module files.

Files are written one by one, in the order given, each through a temporary
file in the target directory followed by ``os.replace``.  A reader never
observes a half-written file.  The first failure stops the run; files that
were already written are left in place.
"""

from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path
from typing import Sequence

from vipergen.errors import DirectoryCreationFailure, FileWriteFailure
from vipergen.utils import ensure_dir

from .models import RenderedFile, ScaffoldResult


class ScaffoldWriter:
    """Creates a module directory and writes rendered files into it."""

    async def write(
        self,
        output_root: str | Path,
        module_directory: str,
        files: Sequence[RenderedFile],
    ) -> ScaffoldResult:
        """Write *files* under ``output_root/module_directory``.

        Returns:
            A :class:`ScaffoldResult`.  Failures are recorded in
            ``first_error`` rather than raised.
        """
        target = Path(output_root) / module_directory
        result = ScaffoldResult(created_directory=target)

        try:
            await asyncio.to_thread(ensure_dir, target)
        except (OSError, UnicodeError) as exc:
            result.first_error = DirectoryCreationFailure(
                f"Could not create directory {target}: {_describe(exc)}", path=target
            )
            return result

        for rendered in files:
            path = target / rendered.relative_path
            try:
                await asyncio.to_thread(_write_text_atomic, path, rendered.contents)
            except (OSError, UnicodeError) as exc:
                result.first_error = FileWriteFailure(
                    f"Could not write {path}: {_describe(exc)}", path=path
                )
                break
            result.written_files.append(rendered.relative_path)

        return result


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _describe(exc: Exception) -> str:
    return getattr(exc, "strerror", None) or str(exc)


def _write_text_atomic(path: Path, content: str) -> None:
    """Replace *path* with *content* in one step."""
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(tmp, 0o644)
        os.replace(tmp, path)
    finally:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass
