import sys
from typing import Literal, NoReturn, TypeAlias

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]


class CLIColor:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"


LEVEL_COLORS: dict[MessageLevel, str] = {
    "INFO": CLIColor.BLUE,
    "WARNING": CLIColor.YELLOW,
    "ERROR": CLIColor.RED,
}


def cli_message(level: MessageLevel, text: str, *, verbose: bool = True) -> None:
    """Emit message for user into stderr (INFO level is emitted only when verbose)."""
    if level == "INFO" and not verbose:
        return
    color = LEVEL_COLORS[level] if sys.stderr.isatty() else ""
    reset = CLIColor.RESET if color else ""
    print(f"{color}[{level}]{reset} {text}", file=sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error message and exit with failure."""
    cli_message("ERROR", text)
    sys.exit(1)
