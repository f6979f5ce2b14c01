"""vipergen configuration.

Typed settings for a generation run. The model is validated at construction
time so a bad environment value fails before anything touches the disk.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_FALLBACK_AUTHOR = "CIVIPERGENERATOR"
DEFAULT_CATALOG_NAME = "CIViperGenerator"


class Config(BaseModel):
    """Settings shared by the CLI and the module generator.

    Instances are created once per invocation, normally through
    :meth:`from_env`, and passed down explicitly.
    """

    output_dir: Path = Field(default=Path("."), description="Root the module directory is created in")
    catalog_name: str = Field(default=DEFAULT_CATALOG_NAME, description="Second line of the file header")
    file_extension: str = Field(default="swift", min_length=1)
    fallback_author: str = Field(default=DEFAULT_FALLBACK_AUTHOR, min_length=1)
    identity_timeout: float = Field(
        default=5.0, gt=0, description="Seconds to wait for the git identity lookup"
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            VIPERGEN_OUTPUT_DIR, VIPERGEN_CATALOG_NAME, VIPERGEN_FILE_EXTENSION,
            VIPERGEN_FALLBACK_AUTHOR, VIPERGEN_IDENTITY_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("VIPERGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["VIPERGEN_OUTPUT_DIR"])
        if os.environ.get("VIPERGEN_CATALOG_NAME"):
            kwargs["catalog_name"] = os.environ["VIPERGEN_CATALOG_NAME"]
        if os.environ.get("VIPERGEN_FILE_EXTENSION"):
            kwargs["file_extension"] = os.environ["VIPERGEN_FILE_EXTENSION"].lstrip(".")
        if os.environ.get("VIPERGEN_FALLBACK_AUTHOR"):
            kwargs["fallback_author"] = os.environ["VIPERGEN_FALLBACK_AUTHOR"]
        if os.environ.get("VIPERGEN_IDENTITY_TIMEOUT"):
            kwargs["identity_timeout"] = float(os.environ["VIPERGEN_IDENTITY_TIMEOUT"])
        return cls(**kwargs)
