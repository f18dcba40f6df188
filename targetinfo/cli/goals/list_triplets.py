import sys
from typing import NoReturn

from libtargetinfo.targets.triplets import BUILTIN_TRIPLETS
from targetinfo.cli.parser.arguments import CLIArguments


def cli_perform_list_triplets_goal(args: CLIArguments) -> NoReturn:
    """Perform goal that display all built-in triplets."""
    for triplet in sorted(BUILTIN_TRIPLETS):
        if args.verbose:
            architecture, vendor, operating_system, environment, endianness, pointer_width = (
                BUILTIN_TRIPLETS[triplet]
            )
            print(
                f"{triplet}\t{architecture} {vendor} {operating_system} "
                f"{environment or '-'} {endianness} {pointer_width}",
            )
            continue
        print(triplet)
    return sys.exit(0)
