from pathlib import Path

from libtargetinfo.exceptions import TargetInfoError


class InvalidTargetSpecificationError(TargetInfoError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path, reason)
        self.path = path
        self.reason = reason

    @property
    def summary(self) -> str:
        return f"Invalid target specification file at '{self.path}'!"

    @property
    def details(self) -> str:
        return self.reason
