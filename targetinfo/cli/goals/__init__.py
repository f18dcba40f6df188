"""Goals for CLI (e.g describe target, show version) as different goals that output different result."""

import sys
from time import perf_counter_ns
from typing import NoReturn

from targetinfo.cli.goals.cfg import cli_perform_cfg_goal
from targetinfo.cli.goals.describe import cli_perform_describe_goal
from targetinfo.cli.goals.field import cli_perform_field_goal
from targetinfo.cli.goals.list_triplets import cli_perform_list_triplets_goal
from targetinfo.cli.goals.version import cli_perform_version_goal
from targetinfo.cli.output import cli_message
from targetinfo.cli.parser.arguments import CLIArguments

NANOS_TO_MILLISECONDS = 1_000_000


def perform_desired_goal(args: CLIArguments) -> NoReturn:
    """Perform goal base on CLI arguments, by default fall into describe goal."""
    start = perf_counter_ns()
    try:
        if args.version:
            return cli_perform_version_goal(args)

        if args.list_triplets:
            return cli_perform_list_triplets_goal(args)

        if args.field is not None:
            return cli_perform_field_goal(args, args.field)

        if args.cfg is not None:
            return cli_perform_cfg_goal(args, args.cfg)

        return cli_perform_describe_goal(args)
    except SystemExit as e:
        end = perf_counter_ns()
        time_taken = (end - start) / NANOS_TO_MILLISECONDS
        cli_message(
            "INFO",
            f"Performing an goal took {time_taken:.2f} milliseconds!",
            verbose=args.verbose,
        )
        sys.exit(e.code)
