"""Entry point for CLI.

Only for calling via `python -m targetinfo`, which is considered as bad practice.
"""

from targetinfo.cli.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
