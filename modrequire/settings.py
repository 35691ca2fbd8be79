"""
Configuration and report models.
Uses Pydantic for validation and serialization.
"""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from pydantic import BaseModel
from pydantic import Field

PATH_ENV = "MODREQUIRE_PATH"
VERBOSE_ENV = "MODREQUIRE_VERBOSE"

LoadMode = Literal["strict", "optimistic", "try"]


class LoaderSettings(BaseModel):
    """Settings for loading modules from the command line."""

    search_paths: list[Path] = Field(
        default_factory=list, description="Directories prepended to sys.path while loading"
    )
    verbose: bool = Field(default=False, description="Emit debug logging")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LoaderSettings":
        """Build settings from MODREQUIRE_PATH and MODREQUIRE_VERBOSE."""
        env = os.environ if environ is None else environ
        paths = [Path(p) for p in env.get(PATH_ENV, "").split(os.pathsep) if p]
        verbose = env.get(VERBOSE_ENV, "").lower() in ("1", "true", "yes", "on")
        return cls(search_paths=paths, verbose=verbose)

    def with_paths(self, paths: list[Path]) -> "LoaderSettings":
        """Return a copy with ``paths`` searched before the configured ones."""
        return self.model_copy(update={"search_paths": [*paths, *self.search_paths]})


class LoadReport(BaseModel):
    """Outcome of a load requested from the command line."""

    name: str = Field(..., description="Module name as given")
    filename: str = Field(..., description="Notional filename")
    mode: LoadMode = Field(..., description="Entry point used")
    loaded: bool = Field(..., description="Whether the module is now loaded")
    version: str | None = Field(default=None, description="Declared __version__, if any")
