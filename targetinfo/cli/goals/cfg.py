import sys
from typing import NoReturn

from targetinfo.cli.goals._target import cli_resolve_target
from targetinfo.cli.output import cli_message
from targetinfo.cli.parser.arguments import CLIArguments


def cli_perform_cfg_goal(args: CLIArguments, predicate: str) -> NoReturn:
    """Perform cfg goal that exits with success only if target matches given predicate."""
    target = cli_resolve_target(args)

    matches = target.matches_cfg(predicate)
    cli_message(
        "INFO",
        f"Target {'matches' if matches else 'does not match'} `{predicate}`",
        verbose=args.verbose,
    )
    return sys.exit(0 if matches else 1)
