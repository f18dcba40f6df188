from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, TypeAlias

from libtargetinfo.targets.triplets import BUILTIN_TRIPLETS

Endianness: TypeAlias = Literal["little", "big"]

ENDIANNESS_VALUES: Final[tuple[Endianness, ...]] = ("little", "big")

# Operating systems that are considered as `unix` family (e.g `cfg(unix)`)
UNIX_OPERATING_SYSTEMS: Final = frozenset(
    (
        "linux",
        "android",
        "macos",
        "ios",
        "freebsd",
        "dragonfly",
        "bitrig",
        "openbsd",
        "netbsd",
        "solaris",
        "emscripten",
    ),
)


@dataclass(slots=True, frozen=True)
class Target:
    """Specifications for compilation target."""

    # e.g `x86_64`, `arm`, `aarch64`
    architecture: str
    # e.g `unknown`, `apple`, `pc`
    vendor: str
    # e.g `linux`, `windows`, `macos`
    operating_system: str
    # ABI qualifier (e.g `gnu`, `musl`, `msvc`), empty if target has no distinguishing ABI
    environment: str

    endianness: Endianness

    # Kept as text as custom targets may specify non-standard widths
    pointer_width: str

    @staticmethod
    def from_triplet(triplet: str) -> Target | None:
        """Get target from built-in triplets (exact match), or None if that triplet is not known."""
        description = BUILTIN_TRIPLETS.get(triplet)
        if description is None:
            return None
        return Target(*description)

    @property
    def family(self) -> Literal["unix", "windows", ""]:
        """Operating system family, empty if target does not belong to any known one."""
        if self.operating_system == "windows":
            return "windows"
        if self.operating_system in UNIX_OPERATING_SYSTEMS:
            return "unix"
        return ""

    def cfg_value(self, key: str) -> str | None:
        """Get value of conditional compilation key (e.g `target_os`), or None if key is unknown."""
        match key:
            case "target_arch":
                return self.architecture
            case "target_vendor":
                return self.vendor
            case "target_os":
                return self.operating_system
            case "target_env":
                return self.environment
            case "target_endian":
                return self.endianness
            case "target_pointer_width":
                return self.pointer_width
            case "target_family":
                return self.family
            case _:
                return None

    def matches_cfg(self, predicate: str) -> bool:
        """Check conditional compilation predicate against that target.

        Predicate is either family name (`unix`, `windows`) or `key=value` pair (e.g `target_os="linux"`)
        """
        key, separator, value = predicate.partition("=")
        key = key.strip()
        if not separator:
            return key in ("unix", "windows") and self.family == key

        value = value.strip()
        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):  # noqa: PLR2004
            value = value[1:-1]
        return self.cfg_value(key) == value
