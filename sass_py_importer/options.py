"""
Configuration and result models for the importer.
"""
import os
import sys
from typing import Any, Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

SYNTAX = "scss"
SASS_PATH_ENV = "SASS_PATH"


class ImporterOptions(BaseModel):
    """
    Process-wide importer configuration, fixed when an importer is created.

    include_paths: Search roots tried, in order, when a module is not found
        next to the importing stylesheet. Accepts a sequence or an
        os.pathsep-joined string.
    resolve_request: External error-first resolver
        (previous, specifier, callback(error, result)), e.g. a bundler's.
    timeout: Seconds to wait for the module-load subprocess, None for no limit.
    python_executable: Interpreter used to run the module-load subprocess.
    """
    model_config = ConfigDict(frozen=True)

    include_paths: Tuple[str, ...] = ()
    resolve_request: Optional[Callable[..., Any]] = None
    timeout: Optional[float] = Field(default=None, gt=0)
    python_executable: str = Field(default_factory=lambda: sys.executable)

    @field_validator('include_paths', mode='before')
    @classmethod
    def split_include_paths(cls, value):
        if value is None:
            return ()
        if isinstance(value, (str, os.PathLike)):
            value = os.fspath(value).split(os.pathsep)
        return tuple(os.fspath(path) for path in value if os.fspath(path))

    @classmethod
    def from_env(cls, environ=None, **overrides):
        """Build options with include paths taken from SASS_PATH."""
        environ = os.environ if environ is None else environ
        overrides.setdefault('include_paths', environ.get(SASS_PATH_ENV, ""))
        return cls(**overrides)


class CanonicalizeContext(BaseModel):
    """What the host knows about the stylesheet issuing an import."""
    containing_url: Optional[str] = None
    from_import: bool = False


class ImporterResult(BaseModel):
    contents: str
    syntax: str = SYNTAX


class LegacyImporterResult(BaseModel):
    file: str
    contents: str
