from .error_handler import cli_target_info_error_handler

__all__ = ["cli_target_info_error_handler"]
