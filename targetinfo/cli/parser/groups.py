import argparse
from argparse import ArgumentParser


def add_target_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with target options into given parser."""
    group = parser.add_argument_group("Target", "Compilation target selection")
    group.add_argument(
        "--target",
        "-t",
        type=str,
        required=False,
        help="Target triplet, path to target specification file or its name to search for in `RUST_TARGET_PATH`. By default taken from `TARGET` environment variable.",
    )
    group.add_argument(
        "--host",
        required=False,
        action="store_true",
        help="If passed will use target inferred from host system instead of `TARGET` environment variable.",
    )


def add_goals_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with goals into given parser."""
    group = parser.add_argument_group("Goals", "What to display, by default describes whole target")
    group.add_argument(
        "--field",
        "-f",
        type=str,
        required=False,
        help="Display only value of given conditional compilation key (e.g `target_os`).",
    )
    group.add_argument(
        "--cfg",
        type=str,
        required=False,
        help='Exit with success only if target matches given predicate (e.g `unix`, `target_os="linux"`).',
    )
    group.add_argument(
        "--list-triplets",
        required=False,
        action="store_true",
        help="If passed will display all built-in triplets.",
    )
    group.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output options into given parser."""
    group = parser.add_argument_group("Output", "Control output")
    group.add_argument(
        "--format",
        dest="output_format",
        type=str,
        required=False,
        default="text",
        choices=["text", "json"],
        help="Output format of target description.",
    )


def add_logging_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with logging options into given parser."""
    group = parser.add_argument_group("Logging", "Diagnostic messages")
    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs.",
    )


def add_toolchain_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with internal debug options into given parser."""
    parser.add_argument(
        "--debug-unwrap-errors",
        dest="cli_debug_user_friendly_errors",
        action="store_false",
        default=True,
        help=argparse.SUPPRESS,
    )
