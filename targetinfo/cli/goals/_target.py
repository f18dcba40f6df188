from libtargetinfo.targets.infer_host import infer_host_triplet
from libtargetinfo.targets.resolver import (
    TARGET_ENVIRONMENT_VARIABLE,
    resolve_target,
    resolve_target_from_environment,
)
from libtargetinfo.targets.target import Target
from targetinfo.cli.output import cli_fatal_abort, cli_message
from targetinfo.cli.parser.arguments import CLIArguments


def cli_resolve_target(args: CLIArguments) -> Target:
    """Resolve target as selected by CLI arguments (explicit one, host one or from environment)."""
    if args.target is not None:
        cli_message("INFO", f"Resolving target '{args.target}'...", verbose=args.verbose)
        return resolve_target(args.target)

    if args.host:
        triplet = infer_host_triplet()
        if triplet is None:
            return cli_fatal_abort(
                "Unable to infer host target due to no built-in triplet for current system",
            )
        cli_message("INFO", f"Inferred host target '{triplet}'", verbose=args.verbose)
        return resolve_target(triplet)

    cli_message(
        "INFO",
        f"Resolving target from '{TARGET_ENVIRONMENT_VARIABLE}' environment variable...",
        verbose=args.verbose,
    )
    return resolve_target_from_environment()
