import sys
from importlib.metadata import PackageNotFoundError, version
from platform import platform, python_implementation, python_version
from typing import NoReturn

from libtargetinfo.targets.infer_host import infer_host_triplet
from libtargetinfo.targets.triplets import BUILTIN_TRIPLETS
from targetinfo.cli.parser.arguments import CLIArguments


def cli_perform_version_goal(args: CLIArguments) -> NoReturn:  # noqa: ARG001
    """Perform version goal that display information about host and toolkit."""
    try:
        toolkit_version = version("targetinfo")
    except PackageNotFoundError:
        toolkit_version = "(not installed)"

    print("[Target information toolkit]")
    print(f"\tVersion: {toolkit_version}")
    print(f"\tBuilt-in triplets: {len(BUILTIN_TRIPLETS)}")
    print("Host machine:")
    print(f"\tPlatform: {platform()}")
    print(f"\tPython: {python_implementation()} {python_version()}")
    print(f"\tInferred triplet: {infer_host_triplet() or '(unknown)'}")
    return sys.exit(0)
