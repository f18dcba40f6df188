from argparse import ArgumentParser

from targetinfo.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Target information - resolve compilation target into its architecture, OS, ABI and etc.",
        usage=f"{prog} [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    groups.add_target_group(parser)
    groups.add_goals_group(parser)
    groups.add_output_group(parser)
    groups.add_logging_group(parser)
    groups.add_toolchain_debug_group(parser)
    return parser
