"""Resolve compilation target from triplet, path to target specification file or its name.

Resolution order (first match wins):
1. Built-in triplet (exact match, no filesystem access)
2. Path to an existing target specification file
3. `<name>.json` inside directories from search path environment variable
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from libtargetinfo.targets.errors import TargetNotFoundError, TargetUnsetError
from libtargetinfo.targets.host import HostEnvironment, ProcessHostEnvironment
from libtargetinfo.targets.specification import load_target_specification
from libtargetinfo.targets.target import Target
from libtargetinfo.targets.text import is_valid_text

if TYPE_CHECKING:
    from collections.abc import Iterable

# Variable that build tooling sets to the compilation target
TARGET_ENVIRONMENT_VARIABLE: Final = "TARGET"

# Directories to search target specification files in, follows host toolchain convention
TARGET_SEARCH_PATH_ENVIRONMENT_VARIABLE: Final = "RUST_TARGET_PATH"

TARGET_SPECIFICATION_SUFFIX: Final = ".json"


def resolve_target(
    target: str,
    *,
    host: HostEnvironment | None = None,
    search_path_variable: str = TARGET_SEARCH_PATH_ENVIRONMENT_VARIABLE,
) -> Target:
    """Resolve given target (triplet, path or name of target specification file) into its description.

    :param target: Triplet, path to target specification file or its name (without suffix)
    :param host: Host environment to query, by default current process one
    :param search_path_variable: Environment variable with list of directories to search specification files in
    :raises TargetNotFoundError: Target is not known and no specification file found for it
    """
    builtin = Target.from_triplet(target)
    if builtin is not None:
        return builtin

    host = host or ProcessHostEnvironment()

    path = Path(target)
    if host.is_file(path):
        return load_target_specification(path)

    specification_filename = target + TARGET_SPECIFICATION_SUFFIX
    search_directories = list(_get_search_directories(host, search_path_variable))
    for directory in search_directories:
        candidate = directory / specification_filename
        if host.is_file(candidate):
            return load_target_specification(candidate)

    raise TargetNotFoundError(target, searched_directories=search_directories)


def resolve_target_from_environment(
    *,
    host: HostEnvironment | None = None,
    variable: str = TARGET_ENVIRONMENT_VARIABLE,
    search_path_variable: str = TARGET_SEARCH_PATH_ENVIRONMENT_VARIABLE,
) -> Target:
    """Resolve target from environment variable (`TARGET` by default), as it is set for build scripts.

    :raises TargetUnsetError: Variable is absent or is not valid text
    """
    host = host or ProcessHostEnvironment()

    target = host.get_variable(variable)
    if target is None or not is_valid_text(target):
        raise TargetUnsetError(variable)

    return resolve_target(target, host=host, search_path_variable=search_path_variable)


def _get_search_directories(host: HostEnvironment, variable: str) -> Iterable[Path]:
    """Directories from search path variable in listed order, unset variable treated as empty."""
    value = host.get_variable(variable)
    if not value:
        return []
    return host.split_paths(value)

