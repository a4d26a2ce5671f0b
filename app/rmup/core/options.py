"""Run options for a single upward removal call.

Options are immutable for the duration of a call. Relative ``cwd`` and
``stop`` values are resolved once, at validation time, so every later
path comparison works on absolute normalized strings.
"""

import os
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RunOptions(BaseModel):
    """Configuration for one upward removal run.

    Attributes:
        cwd: Base directory for relative input paths (default: process cwd).
        stop: Exclusive upper boundary; never deleted or reported (default: cwd).
        force: Treat a missing or non-directory bottom-most target as absent.
        delete_initial: Allow the bottom-most target itself to be deleted even
            if it is a non-empty directory or a plain file.
        dry: Compute the decisions without deleting anything.
        verbose: Report every deleted entry instead of the topmost decisions.
        relative: Report paths relative to ``cwd`` instead of absolute.
        extra_junk: Glob patterns ignored in addition to the built-in junk list.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    cwd: Annotated[str, Field(description="Base directory for relative paths")] = ""
    stop: Annotated[str, Field(description="Exclusive upper boundary")] = ""
    force: bool = False
    delete_initial: bool = False
    dry: bool = False
    verbose: bool = False
    relative: bool = True
    extra_junk: tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def resolve_boundaries(cls, data: Any) -> Any:
        """Resolve ``cwd`` and ``stop`` to absolute normalized paths.

        Empty or missing values fall back to the process working directory
        for ``cwd``, and to ``cwd`` for ``stop``.
        """
        if not isinstance(data, dict):
            return data

        values = dict(data)
        cwd = os.path.abspath(os.fspath(values.get("cwd") or os.getcwd()))
        stop = os.fspath(values.get("stop") or cwd)
        values["cwd"] = cwd
        values["stop"] = os.path.abspath(os.path.join(cwd, stop))
        return values

    def with_overrides(self, **overrides: Any) -> "RunOptions":
        """Return validated options with some fields replaced.

        A ``stop`` that equals ``cwd`` is the default boundary, so it moves
        with ``cwd`` when only ``cwd`` is overridden. Any other ``stop``
        keeps its resolved absolute location.
        """
        if not overrides:
            return self
        data = self.model_dump()
        if "cwd" in overrides and "stop" not in overrides and self.stop == self.cwd:
            data["stop"] = ""
        return RunOptions(**{**data, **overrides})

    def resolve_path(self, path: str | os.PathLike[str]) -> str:
        """Resolve a user supplied path against ``cwd``.

        Args:
            path: Relative or absolute path.

        Returns:
            Absolute, lexically normalized path without trailing separator.
        """
        return os.path.abspath(os.path.join(self.cwd, os.fspath(path)))

    def is_below_stop(self, path: str) -> bool:
        """Check if an absolute path lies strictly below the stop boundary.

        Uses a plain string-prefix test, so the stop path itself is
        excluded and everything it prefixes is included.
        """
        return path != self.stop and path.startswith(self.stop)
