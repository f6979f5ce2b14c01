"""Author lookup for generated file headers.

The author is read from the global git configuration.  The lookup is bounded
by a timeout and never fails the run: any problem yields the fallback name.
"""

from __future__ import annotations

from vipergen.config import DEFAULT_FALLBACK_AUTHOR
from vipergen.errors import IdentityLookupFailure
from vipergen.utils import print_warning, run_command

GIT_USER_NAME_COMMAND = ["git", "config", "--global", "user.name"]


class IdentityResolver:
    """Resolves the display name written into each file header."""

    def __init__(
        self,
        fallback: str = DEFAULT_FALLBACK_AUTHOR,
        timeout: float = 5.0,
        command: list[str] | None = None,
    ) -> None:
        self.fallback = fallback
        self.timeout = timeout
        self.command = command or list(GIT_USER_NAME_COMMAND)

    async def resolve(self) -> str:
        """Return the configured git user name, or the fallback."""
        try:
            return await self._lookup()
        except IdentityLookupFailure as exc:
            print_warning(f"Using '{self.fallback}' as author: {exc}")
            return self.fallback

    async def _lookup(self) -> str:
        returncode, stdout, stderr = await run_command(self.command, timeout=self.timeout)
        if returncode != 0:
            raise IdentityLookupFailure(
                f"{' '.join(self.command)} exited with {returncode}"
                + (f": {stderr}" if stderr else "")
            )
        if not stdout:
            raise IdentityLookupFailure(f"{' '.join(self.command)} returned no name")
        return stdout
