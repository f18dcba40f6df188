"""Loader for custom target specification files (JSON documents).

Required string fields: `arch`, `os`, `target-endian`, `target-pointer-width`
Optional string fields: `vendor` (defaults to `unknown`), `env` (defaults to empty string)
Unknown fields are ignored.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, cast

from libtargetinfo.exceptions import TargetInfoError
from libtargetinfo.targets.errors import (
    InvalidTargetSpecificationError,
    TargetSpecificationReadError,
)
from libtargetinfo.targets.target import ENDIANNESS_VALUES, Endianness, Target
from libtargetinfo.targets.text import is_valid_text

if TYPE_CHECKING:
    from collections.abc import Mapping

REQUIRED_SPECIFICATION_FIELDS: Final = (
    "arch",
    "os",
    "target-endian",
    "target-pointer-width",
)

DEFAULT_VENDOR: Final = "unknown"
DEFAULT_ENVIRONMENT: Final = ""


def load_target_specification(path: Path) -> Target:
    """Load target from target specification file at given path.

    :raises TargetSpecificationReadError: File cannot be opened or read
    :raises InvalidTargetSpecificationError: File is not a valid target specification
    """
    try:
        with path.open("rb") as file:
            document = json.load(file)
    except (OSError, ValueError, RecursionError) as e:
        raise _classify_parser_error(path, e) from e

    if not isinstance(document, dict):
        raise InvalidTargetSpecificationError(
            path,
            reason=f"Expected top-level JSON object, got {type(document).__name__}",
        )
    return _target_from_specification(path, cast("dict[str, Any]", document))


def _classify_parser_error(
    path: Path,
    error: OSError | ValueError | RecursionError,
) -> TargetInfoError:
    """Treat I/O faults as read errors, any other faults (syntax, encoding, nesting) as invalid specification."""
    if isinstance(error, OSError):
        return TargetSpecificationReadError(path, cause=error)
    if isinstance(error, RecursionError):
        return InvalidTargetSpecificationError(path, reason="JSON document is nested too deeply")
    # `json.JSONDecodeError` and `UnicodeDecodeError` are both `ValueError`
    return InvalidTargetSpecificationError(path, reason=f"Malformed JSON document: {error}")


def _target_from_specification(path: Path, document: Mapping[str, Any]) -> Target:
    architecture, operating_system, endianness, pointer_width = (
        _required_string_field(path, document, field) for field in REQUIRED_SPECIFICATION_FIELDS
    )

    if endianness not in ENDIANNESS_VALUES:
        raise InvalidTargetSpecificationError(
            path,
            reason=f"Field 'target-endian' must be one of {ENDIANNESS_VALUES}, got '{endianness}'",
        )

    return Target(
        architecture=architecture,
        vendor=_optional_string_field(path, document, "vendor", default=DEFAULT_VENDOR),
        operating_system=operating_system,
        environment=_optional_string_field(path, document, "env", default=DEFAULT_ENVIRONMENT),
        endianness=cast("Endianness", endianness),
        pointer_width=pointer_width,
    )


def _required_string_field(path: Path, document: Mapping[str, Any], field: str) -> str:
    value = document.get(field)
    if value is None:
        raise InvalidTargetSpecificationError(path, reason=f"Missing required field '{field}'")
    if not isinstance(value, str):
        raise InvalidTargetSpecificationError(
            path,
            reason=f"Field '{field}' must be a string, got {type(value).__name__}",
        )
    if not is_valid_text(value):
        raise InvalidTargetSpecificationError(
            path,
            reason=f"Field '{field}' contains invalid (non UTF-8) text",
        )
    return value


def _optional_string_field(
    path: Path,
    document: Mapping[str, Any],
    field: str,
    *,
    default: str,
) -> str:
    value = document.get(field)
    if not isinstance(value, str):
        return default
    return _required_string_field(path, document, field)
