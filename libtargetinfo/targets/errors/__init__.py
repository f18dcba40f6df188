"""Errors collections that target resolution may raise (user-facing ones)."""

from .invalid_target_specification import InvalidTargetSpecificationError
from .target_not_found import TargetNotFoundError
from .target_specification_read import TargetSpecificationReadError
from .target_unset import TargetUnsetError

__all__ = [
    "InvalidTargetSpecificationError",
    "TargetNotFoundError",
    "TargetSpecificationReadError",
    "TargetUnsetError",
]
