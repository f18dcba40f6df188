from __future__ import annotations

from typing import TYPE_CHECKING, Literal, cast

from targetinfo.cli.output import cli_fatal_abort
from targetinfo.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    _validate_mutually_exclusive_goals(args)
    _validate_target_selection(args)

    return CLIArguments(
        target=cast("str | None", args.target),
        host=bool(args.host),
        output_format=cast('Literal["text", "json"]', args.output_format),
        version=bool(args.version),
        list_triplets=bool(args.list_triplets),
        field=cast("str | None", args.field),
        cfg=cast("str | None", args.cfg),
        verbose=bool(args.verbose),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _validate_mutually_exclusive_goals(args: Namespace) -> None:
    """Validate that goal flags is not present as mutually exclusive."""
    goals = [args.version, args.list_triplets, args.field is not None, args.cfg is not None]
    if sum(goals) in (0, 1):
        return None

    return cli_fatal_abort("Goal flags is mutually exclusive!")


def _validate_target_selection(args: Namespace) -> None:
    if args.target is not None and args.host:
        cli_fatal_abort("Flags `--target` and `--host` is mutually exclusive!")
