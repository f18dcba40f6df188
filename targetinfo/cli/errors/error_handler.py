from collections.abc import Generator
from contextlib import contextmanager

from libtargetinfo.exceptions import TargetInfoError
from targetinfo.cli.output import cli_fatal_abort


@contextmanager
def cli_target_info_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, None]:
    """Wrap goal to emit target resolution errors as user-friendly fatal messages."""
    try:
        yield
    except TargetInfoError as te:
        if not debug_user_friendly_errors:
            raise  # re-throw exception due to unfriendly flag set for debugging
        cli_fatal_abort(str(te))
