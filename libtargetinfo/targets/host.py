"""Host collaborators that target resolution queries (environment variables and filesystem)."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class HostEnvironment(ABC):
    """Read-only view of host environment used by target resolver."""

    @property
    @abstractmethod
    def path_separator(self) -> str:
        """Separator for lists of paths in environment variables (e.g `:` on POSIX, `;` on Windows)."""
        ...

    @abstractmethod
    def get_variable(self, name: str) -> str | None:
        """Get value of environment variable, or None if it is absent."""
        ...

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        """Is given path an existing regular file?."""
        ...

    def split_paths(self, value: str) -> Iterable[Path]:
        """Split list of paths from environment variable, skipping empty entries."""
        return [Path(entry) for entry in value.split(self.path_separator) if entry]


class ProcessHostEnvironment(HostEnvironment):
    """Host environment of current process.

    Variables may be replaced with explicit mapping, filesystem is always the real one.
    """

    def __init__(
        self,
        variables: Mapping[str, str] | None = None,
        *,
        path_separator: str = os.pathsep,
    ) -> None:
        self._variables = variables
        self._path_separator = path_separator

    @property
    def path_separator(self) -> str:
        return self._path_separator

    def get_variable(self, name: str) -> str | None:
        variables = os.environ if self._variables is None else self._variables
        return variables.get(name)

    def is_file(self, path: Path) -> bool:
        return path.is_file()
