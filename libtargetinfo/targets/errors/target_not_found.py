from collections.abc import Sequence
from pathlib import Path

from libtargetinfo.exceptions import TargetInfoError


class TargetNotFoundError(TargetInfoError):
    def __init__(self, target: str, searched_directories: Sequence[Path] = ()) -> None:
        super().__init__(target)
        self.target = target
        self.searched_directories = tuple(searched_directories)

    @property
    def summary(self) -> str:
        return f"Unknown compilation target '{self.target}'!"

    @property
    def details(self) -> str:
        searched = (
            "\n".join(f"\t{directory}" for directory in self.searched_directories)
            or "\t(search path is empty)"
        )
        return (
            "It is not a known triplet, not a path to target specification file\n"
            f"and no '{self.target}.json' found in any of search path directories:\n{searched}"
        )
