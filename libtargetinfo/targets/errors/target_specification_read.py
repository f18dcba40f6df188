from pathlib import Path

from libtargetinfo.exceptions import TargetInfoError


class TargetSpecificationReadError(TargetInfoError):
    """Target specification file exists but cannot be opened or read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(path, cause)
        self.path = path
        self.cause = cause

    @property
    def summary(self) -> str:
        return f"Unable to read target specification file at '{self.path}'!"

    @property
    def details(self) -> str:
        return f"{self.cause.__class__.__name__}: {self.cause.strerror or self.cause}"
