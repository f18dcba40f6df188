"""Target information library.

Resolves compilation target triplets (or custom target specification files) into target description.
"""

from .targets import Target
from .targets.resolver import resolve_target, resolve_target_from_environment
from .targets.specification import load_target_specification

__all__ = [
    "Target",
    "load_target_specification",
    "resolve_target",
    "resolve_target_from_environment",
]
