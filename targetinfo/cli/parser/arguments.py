from dataclasses import dataclass
from typing import Literal


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole target information process."""

    # Explicit target (triplet, path or name), None if must be taken from host or environment
    target: str | None
    host: bool

    output_format: Literal["text", "json"]

    # Goals
    version: bool
    list_triplets: bool
    field: str | None
    cfg: str | None

    verbose: bool
    cli_debug_user_friendly_errors: bool
