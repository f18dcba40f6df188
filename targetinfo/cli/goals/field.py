import sys
from typing import NoReturn

from targetinfo.cli.goals._target import cli_resolve_target
from targetinfo.cli.output import cli_fatal_abort
from targetinfo.cli.parser.arguments import CLIArguments


def cli_perform_field_goal(args: CLIArguments, key: str) -> NoReturn:
    """Perform field goal that display only value of single conditional compilation key."""
    target = cli_resolve_target(args)

    value = target.cfg_value(key)
    if value is None:
        return cli_fatal_abort(f"Unknown target field '{key}' (expected e.g `target_os`)")

    print(value)
    return sys.exit(0)
